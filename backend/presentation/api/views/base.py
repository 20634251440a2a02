"""
Base Views.

REST resource base class shared by every catalog entity. Request handling
follows the usual CRUD contract:

- POST creates; a body carrying an id is rejected (``idexists``)
- PUT replaces; the body id must be present (``idnull``), match the path
  (``idinvalid``) and exist (``idnotfound``)
- PATCH merges non-null fields, with the same id checks
- DELETE always answers 204
"""

import logging

from django.urls import reverse
from rest_framework import serializers, status, viewsets
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..errors import BadRequestAlertException, EntityNotFoundAlertException
from ..filters import get_criteria
from ..headers import (
    create_entity_creation_alert,
    create_entity_update_alert,
    create_entity_deletion_alert,
)

logger = logging.getLogger(__name__)


class EntityResourceViewSet(viewsets.ViewSet):
    """
    CRUD resource backed by an ``EntityService``.
    
    Subclasses set ``entity_name``, ``service_class`` and ``serializer_class``.
    ``pagination_class`` enables paged listing; ``filterset_class`` enables
    list filters.
    """
    
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'
    
    entity_name = None
    service_class = None
    serializer_class = None
    pagination_class = None
    filterset_class = None
    
    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.service = self.service_class()
    
    def get_serializer_class(self):
        return self.serializer_class
    
    def get_serializer(self, *args, **kwargs):
        return self.get_serializer_class()(*args, **kwargs)
    
    # =========================================================================
    # Hooks
    # =========================================================================
    
    def fetch_all(self, page_request, criteria):
        return self.service.find_all(page_request, criteria)
    
    def fetch_one(self, entity_id):
        return self.service.find_one(entity_id)
    
    # =========================================================================
    # Endpoints
    # =========================================================================
    
    def create(self, request):
        data = self._get_body(request)
        logger.debug("REST request to save %s : %s", self.entity_name, data)
        self.get_serializer(data=data).is_valid(raise_exception=True)
        if data.get('id') is not None:
            raise BadRequestAlertException(
                f'A new {self.entity_name} cannot already have an ID',
                self.entity_name,
                'idexists'
            )
        
        result = self.service.save(data)
        logger.info("Created %s %s", self.entity_name, result['id'])
        headers = {'Location': self._location(result['id'])}
        headers.update(create_entity_creation_alert(self.entity_name, result['id']))
        return Response(result, status=status.HTTP_201_CREATED, headers=headers)
    
    def update(self, request, pk=None):
        data = self._get_body(request)
        logger.debug("REST request to update %s : %s, %s", self.entity_name, pk, data)
        self.get_serializer(data=data).is_valid(raise_exception=True)
        entity_id = self._check_identity(data, pk)
        
        result = self.service.update({**data, 'id': entity_id})
        logger.info("Updated %s %s", self.entity_name, entity_id)
        return Response(
            result,
            headers=create_entity_update_alert(self.entity_name, entity_id)
        )
    
    def partial_update(self, request, pk=None):
        data = self._get_body(request)
        logger.debug(
            "REST request to partial update %s partially : %s, %s",
            self.entity_name, pk, data
        )
        entity_id = self._check_identity(data, pk)
        
        result = self.service.partial_update({**data, 'id': entity_id})
        if result is None:
            raise NotFound()
        logger.info("Partially updated %s %s", self.entity_name, entity_id)
        return Response(
            result,
            headers=create_entity_update_alert(self.entity_name, entity_id)
        )
    
    def list(self, request):
        logger.debug("REST request to get all %s", self.entity_name)
        criteria = self._get_criteria(request)
        if self.pagination_class is None:
            return Response(self.fetch_all(None, criteria))
        
        paginator = self.pagination_class()
        page = self.fetch_all(paginator.get_page_request(request), criteria)
        return paginator.get_paginated_response(page, request)
    
    def retrieve(self, request, pk=None):
        logger.debug("REST request to get %s : %s", self.entity_name, pk)
        result = self.fetch_one(int(pk))
        if result is None:
            raise NotFound()
        return Response(result)
    
    def destroy(self, request, pk=None):
        logger.debug("REST request to delete %s : %s", self.entity_name, pk)
        self.service.delete(int(pk))
        logger.info("Deleted %s %s", self.entity_name, pk)
        return Response(
            status=status.HTTP_204_NO_CONTENT,
            headers=create_entity_deletion_alert(self.entity_name, pk)
        )
    
    # =========================================================================
    # Helpers
    # =========================================================================
    
    def _get_body(self, request) -> dict:
        if not isinstance(request.data, dict):
            raise ValidationError({'non_field_errors': ['Expected a JSON object.']})
        return request.data
    
    def _check_identity(self, data, pk) -> int:
        """Validate the body id against the path id and the stored records."""
        raw_id = data.get('id')
        if raw_id is None:
            raise BadRequestAlertException('Invalid id', self.entity_name, 'idnull')
        try:
            entity_id = serializers.IntegerField().to_internal_value(raw_id)
        except serializers.ValidationError:
            raise BadRequestAlertException('Invalid ID', self.entity_name, 'idinvalid')
        if entity_id != int(pk):
            raise BadRequestAlertException('Invalid ID', self.entity_name, 'idinvalid')
        if not self.service.exists(entity_id):
            raise EntityNotFoundAlertException('Entity not found', self.entity_name)
        return entity_id
    
    def _get_criteria(self, request) -> dict:
        if self.filterset_class is None:
            return {}
        return get_criteria(self.filterset_class, request.query_params)
    
    def _location(self, entity_id) -> str:
        return reverse(f'{self.basename}-detail', kwargs={'pk': entity_id})

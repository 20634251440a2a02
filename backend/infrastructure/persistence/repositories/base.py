"""
Base Django Repository.

Generic adapter from the domain ``Repository`` port to the Django ORM.
"""

import logging
from typing import List, Optional, Union

from django.db import transaction
from django.db.models import QuerySet

from domain.shared.pagination import Page, PageRequest
from domain.shared.repositories import Repository

logger = logging.getLogger(__name__)


def sortable_fields(model) -> set:
    """Names accepted in ``sort`` criteria for ``model``."""
    return {f.name for f in model._meta.concrete_fields}


def paginate(queryset: QuerySet, page_request: PageRequest) -> Page:
    """Slice ``queryset`` according to ``page_request``."""
    allowed = sortable_fields(queryset.model)
    ordering = [
        order.as_ordering()
        for order in page_request.sort
        if order.field in allowed
    ]
    if ordering:
        if not any(o.lstrip('-') == 'id' for o in ordering):
            ordering.append('id')
        queryset = queryset.order_by(*ordering)
    
    total = queryset.count()
    start = page_request.offset
    content = list(queryset[start:start + page_request.size])
    return Page(content=content, total=total, request=page_request)


class DjangoRepository(Repository):
    """
    Repository backed by a Django model.
    
    Subclasses set ``model`` and may override ``get_queryset``
    to add ``select_related`` / ``prefetch_related``.
    """
    
    model = None
    
    def get_queryset(self) -> QuerySet:
        return self.model.objects.all()
    
    def find_by_id(self, entity_id: int):
        return self.get_queryset().filter(pk=entity_id).first()
    
    def find_all(
        self,
        page_request: Optional[PageRequest] = None,
        criteria: Optional[dict] = None
    ) -> Union[List, Page]:
        queryset = self.get_queryset()
        if criteria:
            queryset = queryset.filter(**criteria)
        if page_request is None:
            return list(queryset)
        return paginate(queryset, page_request)
    
    def exists_by_id(self, entity_id: int) -> bool:
        return self.model.objects.filter(pk=entity_id).exists()
    
    @transaction.atomic
    def save(self, entity):
        entity.full_clean(validate_unique=False)
        entity.save()
        entity.apply_staged_many_to_many()
        logger.debug("Saved %s id=%s", self.model.__name__, entity.pk)
        return entity
    
    @transaction.atomic
    def delete_by_id(self, entity_id: int) -> None:
        deleted, _ = self.model.objects.filter(pk=entity_id).delete()
        logger.debug("Deleted %s id=%s (%s rows)", self.model.__name__, entity_id, deleted)

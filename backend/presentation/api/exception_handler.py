"""
Global API exception handler.

Renders every error as problem details and adds the error alert headers.
"""

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error
from rest_framework.views import exception_handler

from domain.shared.exceptions import EntityNotFoundException
from .errors import (
    BadRequestAlertException,
    EntityNotFoundAlertException,
    DEFAULT_TYPE,
    CONSTRAINT_VIOLATION_TYPE,
    ERR_VALIDATION,
)
from .headers import create_failure_alert

logger = logging.getLogger(__name__)


def _field_errors(detail, object_name):
    if not isinstance(detail, dict):
        detail = {'non_field_errors': detail}
    errors = []
    for field, messages in detail.items():
        if not isinstance(messages, (list, tuple)):
            messages = [messages]
        for message in messages:
            errors.append({
                'objectName': object_name,
                'field': field,
                'message': str(message),
            })
    return errors


def _apply_headers(response, headers):
    for name, value in headers.items():
        response[name] = value
    return response


def custom_exception_handler(exc, context):
    """
    Translate exceptions into problem-details responses.
    
    Alert exceptions keep their entity name and error key; field validation
    errors are listed in ``fieldErrors``; integrity problems become 409.
    """
    view = context.get('view')
    entity_name = getattr(view, 'entity_name', None)
    
    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]
        return Response(
            {
                'type': DEFAULT_TYPE,
                'title': 'Conflict',
                'status': status.HTTP_409_CONFLICT,
                'detail': 'The entity is referenced by other records.',
                'message': 'error.protected',
                'protectedObjectsSample': protected,
            },
            status=status.HTTP_409_CONFLICT,
        )
    
    if isinstance(exc, IntegrityError):
        logger.warning("Integrity error on %s: %s", entity_name, exc)
        return Response(
            {
                'type': DEFAULT_TYPE,
                'title': 'Conflict',
                'status': status.HTTP_409_CONFLICT,
                'detail': 'Data integrity violation.',
                'message': 'error.integrity',
            },
            status=status.HTTP_409_CONFLICT,
        )
    
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(detail=as_serializer_error(exc))
    
    if isinstance(exc, EntityNotFoundException):
        exc = EntityNotFoundAlertException('Entity not found', exc.entity_type)
    
    response = exception_handler(exc, context)
    if response is None:
        return None
    
    if isinstance(exc, BadRequestAlertException):
        logger.warning("Rejected %s request: %s", exc.entity_name, exc.error_key)
        response.data = exc.get_problem()
        return _apply_headers(response, create_failure_alert(exc.entity_name, exc.error_key))
    
    if isinstance(exc, ValidationError):
        object_name = f'{entity_name}DTO' if entity_name else 'request'
        response.data = {
            'type': CONSTRAINT_VIOLATION_TYPE,
            'title': 'Method argument not valid',
            'status': response.status_code,
            'message': ERR_VALIDATION,
            'fieldErrors': _field_errors(exc.detail, object_name),
        }
        return _apply_headers(response, create_failure_alert(entity_name, 'validation'))
    
    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    response.data = {
        'type': DEFAULT_TYPE,
        'title': str(detail) if detail else 'Error',
        'status': response.status_code,
        'detail': str(detail) if detail else None,
        'message': f'error.http.{response.status_code}',
    }
    if isinstance(exc, Http404) or response.status_code == status.HTTP_404_NOT_FOUND:
        response.data['title'] = 'Not Found'
    return response

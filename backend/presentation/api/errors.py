"""
API Errors.

Alert exceptions raised by the REST resources. The exception handler
renders them as problem details plus ``X-{app}-error`` headers.
"""

from rest_framework import status
from rest_framework.exceptions import APIException

PROBLEM_BASE_URL = 'https://www.jhipster.tech/problem'
DEFAULT_TYPE = f'{PROBLEM_BASE_URL}/problem-with-message'
CONSTRAINT_VIOLATION_TYPE = f'{PROBLEM_BASE_URL}/constraint-violation'

ERR_VALIDATION = 'error.validation'


class BadRequestAlertException(APIException):
    """
    Client error carrying the entity it concerns and an error key
    (``idexists``, ``idnull``, ``idinvalid``, ...).
    """
    
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code = 'badrequest'
    
    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(detail=message, code=error_key)
        self.title = message
        self.entity_name = entity_name
        self.error_key = error_key
    
    @property
    def message(self) -> str:
        return f'error.{self.error_key}'
    
    def get_problem(self) -> dict:
        return {
            'type': DEFAULT_TYPE,
            'title': self.title,
            'status': self.status_code,
            'detail': f'{self.status_code} "{self.title}"',
            'message': self.message,
            'params': self.entity_name,
            'entityName': self.entity_name,
            'errorKey': self.error_key,
        }


class EntityNotFoundAlertException(BadRequestAlertException):
    """Update of an id that does not exist."""
    
    status_code = status.HTTP_404_NOT_FOUND
    default_code = 'idnotfound'
    
    def __init__(self, message: str, entity_name: str, error_key: str = 'idnotfound'):
        super().__init__(message, entity_name, error_key)

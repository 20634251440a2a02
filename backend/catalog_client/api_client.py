"""
HTTP client for the catalog REST API.

One ``ResourceClient`` per entity resource, sharing the authenticated
``requests.Session`` of a ``CatalogApiClient``.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from decouple import config

logger = logging.getLogger(__name__)

MERGE_PATCH_CONTENT_TYPE = 'application/merge-patch+json'


class ApiError(Exception):
    """Non-2xx answer from the API."""
    
    def __init__(self, status_code: int, message: str, error_key: Optional[str] = None,
                 entity_name: Optional[str] = None, body: Any = None):
        super().__init__(f'{status_code}: {message}')
        self.status_code = status_code
        self.message = message
        self.error_key = error_key
        self.entity_name = entity_name
        self.body = body
    
    @classmethod
    def from_response(cls, response: requests.Response) -> 'ApiError':
        try:
            body = response.json()
        except ValueError:
            body = response.text
        
        message = response.reason or 'HTTP error'
        error_key = None
        entity_name = None
        if isinstance(body, dict):
            message = body.get('title') or body.get('detail') or message
            error_key = body.get('errorKey')
            entity_name = body.get('entityName')
            if error_key is None and str(body.get('message') or '').startswith('error.'):
                error_key = body['message'][len('error.'):]
        return cls(response.status_code, message, error_key, entity_name, body)


class ResourceClient:
    """
    CRUD calls for one resource (``dispositivos``, ``opcions``, ...).
    """
    
    def __init__(self, client: 'CatalogApiClient', resource: str):
        self.client = client
        self.resource = resource
    
    @property
    def url(self) -> str:
        return f'api/{self.resource}'
    
    def create(self, dto: dict) -> dict:
        return self.client.request('POST', self.url, json=dto).json()
    
    def update(self, dto: dict) -> dict:
        return self.client.request('PUT', f"{self.url}/{dto['id']}", json=dto).json()
    
    def partial_update(self, dto: dict) -> dict:
        response = self.client.request(
            'PATCH',
            f"{self.url}/{dto['id']}",
            json=dto,
            headers={'Content-Type': MERGE_PATCH_CONTENT_TYPE},
        )
        return response.json()
    
    def find(self, entity_id: int) -> dict:
        return self.client.request('GET', f'{self.url}/{entity_id}').json()
    
    def query(self, **params) -> List[dict]:
        """List the resource; ``params`` go to the query string (filters, eagerload)."""
        return self.client.request('GET', self.url, params=params or None).json()
    
    def query_page(self, page: int = 0, size: int = 20,
                   sort: Optional[List[str]] = None, **params) -> Tuple[List[dict], int]:
        """One page of a paginated resource and the total number of records."""
        params.update({'page': page, 'size': size})
        if sort:
            params['sort'] = sort
        response = self.client.request('GET', self.url, params=params)
        total = int(response.headers.get('X-Total-Count', 0))
        return response.json(), total
    
    def delete(self, entity_id: int) -> None:
        self.client.request('DELETE', f'{self.url}/{entity_id}')


class CatalogApiClient:
    """
    Client for the catalog API.
    
    Settings:
    - ``CATALOG_API_URL``: server base URL
    - ``CATALOG_API_TIMEOUT``: read timeout in seconds
    """
    
    RESOURCES = (
        'dispositivos',
        'caracteristicas',
        'personalizacions',
        'opcions',
        'adicionals',
        'ventas',
    )
    
    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
                 session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or config('CATALOG_API_URL', default='http://localhost:8000')).rstrip('/')
        self.timeout = timeout or config('CATALOG_API_TIMEOUT', default=30.0, cast=float)
        self.session = session or requests.Session()
        self.session.headers.setdefault('Accept', 'application/json')
        if token:
            self.set_token(token)
        
        for resource in self.RESOURCES:
            setattr(self, resource, ResourceClient(self, resource))
    
    def set_token(self, token: str) -> None:
        self.session.headers['Authorization'] = f'Bearer {token}'
    
    def authenticate(self, username: str, password: str) -> str:
        """Obtain a JWT access token and use it for the following calls."""
        response = self.request(
            'POST',
            'api/authenticate',
            json={'username': username, 'password': password},
        )
        token = response.json()['access']
        self.set_token(token)
        return token
    
    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f'{self.base_url}/{path}'
        kwargs.setdefault('timeout', self.timeout)
        logger.debug("%s %s", method, url)
        response = self.session.request(method, url, **kwargs)
        
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as he:
            error = ApiError.from_response(response)
            logger.warning("%s %s failed: %s", method, url, error)
            raise error from he
        return response

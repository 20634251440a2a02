"""
Catalog API client.

Python counterpart of the web UI's entity services.
"""

from .api_client import ApiError, CatalogApiClient, ResourceClient
from .dialogs import DeleteDialog

__all__ = [
    'ApiError',
    'CatalogApiClient',
    'ResourceClient',
    'DeleteDialog',
]

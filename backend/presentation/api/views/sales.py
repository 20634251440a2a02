"""
Sales Views.
"""

from application.mappers import VentaSerializer
from application.services import VentaService
from ..pagination import StandardResultsSetPagination
from .base import EntityResourceViewSet


class VentaViewSet(EntityResourceViewSet):
    entity_name = 'venta'
    service_class = VentaService
    serializer_class = VentaSerializer
    pagination_class = StandardResultsSetPagination

"""
Sales Repositories.
"""

from django.db.models import QuerySet

from domain.sales.repositories import VentaRepository
from infrastructure.persistence.models import Venta

from .base import DjangoRepository


class DjangoVentaRepository(DjangoRepository, VentaRepository):
    model = Venta
    
    def get_queryset(self) -> QuerySet:
        return super().get_queryset().select_related('user')

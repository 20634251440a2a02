"""
Sales Services.
"""

from infrastructure.persistence.repositories import DjangoVentaRepository
from application.mappers import VentaMapper
from .base import EntityService


class VentaService(EntityService):
    entity_name = 'venta'
    repository_class = DjangoVentaRepository
    mapper_class = VentaMapper

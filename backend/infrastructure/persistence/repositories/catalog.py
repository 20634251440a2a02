"""
Catalog Repositories.

Django ORM implementations of the catalog repository ports.
"""

from typing import List, Optional, Union

from django.db.models import QuerySet

from domain.catalog.repositories import (
    DispositivoRepository,
    CaracteristicaRepository,
    PersonalizacionRepository,
    OpcionRepository,
    AdicionalRepository,
)
from domain.shared.pagination import Page, PageRequest
from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
)

from .base import DjangoRepository, paginate


class DjangoDispositivoRepository(DjangoRepository, DispositivoRepository):
    model = Dispositivo
    
    def get_eager_queryset(self) -> QuerySet:
        return self.get_queryset().prefetch_related('adicionales')
    
    def find_one_with_eager_relationships(self, entity_id: int) -> Optional[Dispositivo]:
        return self.get_eager_queryset().filter(pk=entity_id).first()
    
    def find_all_with_eager_relationships(
        self,
        page_request: Optional[PageRequest] = None
    ) -> Union[List[Dispositivo], Page]:
        queryset = self.get_eager_queryset()
        if page_request is None:
            return list(queryset)
        return paginate(queryset, page_request)


class DjangoCaracteristicaRepository(DjangoRepository, CaracteristicaRepository):
    model = Caracteristica
    
    def get_queryset(self) -> QuerySet:
        return super().get_queryset().select_related('dispositivo')


class DjangoPersonalizacionRepository(DjangoRepository, PersonalizacionRepository):
    model = Personalizacion
    
    def get_queryset(self) -> QuerySet:
        return super().get_queryset().select_related('dispositivo')


class DjangoOpcionRepository(DjangoRepository, OpcionRepository):
    model = Opcion
    
    def get_queryset(self) -> QuerySet:
        return super().get_queryset().select_related('personalizacion')


class DjangoAdicionalRepository(DjangoRepository, AdicionalRepository):
    model = Adicional

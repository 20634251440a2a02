"""
Catalog Services.

Services for Dispositivo, Caracteristica, Personalizacion, Opcion and Adicional.
"""

import logging
from typing import List, Optional, Union

from domain.shared.pagination import Page, PageRequest
from infrastructure.persistence.repositories import (
    DjangoDispositivoRepository,
    DjangoCaracteristicaRepository,
    DjangoPersonalizacionRepository,
    DjangoOpcionRepository,
    DjangoAdicionalRepository,
)
from application.mappers import (
    DispositivoMapper,
    CaracteristicaMapper,
    PersonalizacionMapper,
    OpcionMapper,
    AdicionalMapper,
)
from .base import EntityService

logger = logging.getLogger(__name__)


class DispositivoService(EntityService):
    entity_name = 'dispositivo'
    repository_class = DjangoDispositivoRepository
    mapper_class = DispositivoMapper
    
    def find_all_with_eager_relationships(
        self,
        page_request: Optional[PageRequest] = None
    ) -> Union[List[dict], Page]:
        """Get all devices with their add-ons fetched in the same round trip."""
        logger.debug("Request to get all dispositivos with eager relationships")
        result = self.repository.find_all_with_eager_relationships(page_request)
        return self._map_result(result)
    
    def find_one_with_eager_relationships(self, entity_id: int) -> Optional[dict]:
        logger.debug("Request to get dispositivo with eager relationships : %s", entity_id)
        entity = self.repository.find_one_with_eager_relationships(entity_id)
        return self.mapper.to_dto(entity) if entity is not None else None


class CaracteristicaService(EntityService):
    entity_name = 'caracteristica'
    repository_class = DjangoCaracteristicaRepository
    mapper_class = CaracteristicaMapper


class PersonalizacionService(EntityService):
    entity_name = 'personalizacion'
    repository_class = DjangoPersonalizacionRepository
    mapper_class = PersonalizacionMapper


class OpcionService(EntityService):
    entity_name = 'opcion'
    repository_class = DjangoOpcionRepository
    mapper_class = OpcionMapper


class AdicionalService(EntityService):
    entity_name = 'adicional'
    repository_class = DjangoAdicionalRepository
    mapper_class = AdicionalMapper

"""
Base Entity Service.

Orchestrates a repository and a mapper for one entity.
"""

import logging
from typing import List, Optional, Union

from django.db import transaction

from domain.shared.exceptions import EntityNotFoundException
from domain.shared.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class EntityService:
    """
    Service implementation for managing a single entity type.
    
    Subclasses set ``entity_name``, ``repository_class`` and ``mapper_class``;
    both collaborators can also be passed in explicitly.
    """
    
    entity_name = None
    repository_class = None
    mapper_class = None
    
    def __init__(self, repository=None, mapper=None):
        self.repository = repository or self.repository_class()
        self.mapper = mapper or self.mapper_class()
    
    @transaction.atomic
    def save(self, dto: dict) -> dict:
        """Save a new entity and return it with its generated id."""
        logger.debug("Request to save %s : %s", self.entity_name, dto)
        entity = self.mapper.to_entity(dto)
        entity = self.repository.save(entity)
        return self.mapper.to_dto(entity)
    
    @transaction.atomic
    def update(self, dto: dict) -> dict:
        """Replace every field of an existing entity."""
        logger.debug("Request to update %s : %s", self.entity_name, dto)
        entity_id = dto.get('id')
        if entity_id is None or not self.repository.exists_by_id(entity_id):
            raise EntityNotFoundException(self.entity_name, entity_id)
        entity = self.mapper.to_entity(dto)
        entity = self.repository.save(entity)
        return self.mapper.to_dto(entity)
    
    @transaction.atomic
    def partial_update(self, dto: dict) -> Optional[dict]:
        """
        Copy the non-null fields of ``dto`` onto the stored entity.
        
        Returns ``None`` when no entity has the given id.
        """
        logger.debug("Request to partially update %s : %s", self.entity_name, dto)
        existing = self.repository.find_by_id(dto.get('id'))
        if existing is None:
            return None
        self.mapper.partial_update(existing, dto)
        entity = self.repository.save(existing)
        return self.mapper.to_dto(entity)
    
    def find_all(
        self,
        page_request: Optional[PageRequest] = None,
        criteria: Optional[dict] = None
    ) -> Union[List[dict], Page]:
        """Get all entities, or one page of them when ``page_request`` is given."""
        logger.debug("Request to get all %s", self.entity_name)
        result = self.repository.find_all(page_request, criteria)
        return self._map_result(result)
    
    def find_one(self, entity_id: int) -> Optional[dict]:
        logger.debug("Request to get %s : %s", self.entity_name, entity_id)
        entity = self.repository.find_by_id(entity_id)
        return self.mapper.to_dto(entity) if entity is not None else None
    
    def exists(self, entity_id: int) -> bool:
        return self.repository.exists_by_id(entity_id)
    
    @transaction.atomic
    def delete(self, entity_id: int) -> None:
        logger.debug("Request to delete %s : %s", self.entity_name, entity_id)
        self.repository.delete_by_id(entity_id)
    
    def _map_result(self, result):
        if isinstance(result, Page):
            return result.map(self.mapper.to_dto)
        return self.mapper.to_dto_list(result)

"""
Shared Repository Interface (Port).

Generic persistence contract implemented once per entity
in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar, Union

from domain.shared.pagination import Page, PageRequest

E = TypeVar('E')


class Repository(ABC, Generic[E]):
    """
    Repository interface shared by all catalog entities.
    
    Every method is atomic on its own. Lookups return ``None`` when
    the entity is absent instead of raising.
    """
    
    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[E]:
        """Get entity by ID."""
        pass
    
    @abstractmethod
    def find_all(
        self,
        page_request: Optional[PageRequest] = None,
        criteria: Optional[dict] = None
    ) -> Union[List[E], Page[E]]:
        """
        Get all entities, or a single page of them.
        
        ``criteria`` maps field names to required values.
        """
        pass
    
    @abstractmethod
    def exists_by_id(self, entity_id: int) -> bool:
        """Check if entity with ID exists."""
        pass
    
    @abstractmethod
    def save(self, entity: E) -> E:
        """Save (create or update) an entity."""
        pass
    
    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """Delete an entity. Deleting an absent ID does nothing."""
        pass

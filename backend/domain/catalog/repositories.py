"""
Catalog Domain - Repository Interfaces (Ports).

These are abstract interfaces that define how the domain interacts with persistence.
The actual implementations are in the infrastructure layer.
"""

from abc import abstractmethod
from typing import Any, List, Optional, Union

from domain.shared.pagination import Page, PageRequest
from domain.shared.repositories import Repository


class DispositivoRepository(Repository[Any]):
    """Repository interface for Dispositivo."""
    
    @abstractmethod
    def find_one_with_eager_relationships(self, entity_id: int) -> Optional[Any]:
        """Get device by ID with its add-ons loaded."""
        pass
    
    @abstractmethod
    def find_all_with_eager_relationships(
        self,
        page_request: Optional[PageRequest] = None
    ) -> Union[List[Any], Page[Any]]:
        """Get all devices with their add-ons loaded."""
        pass


class CaracteristicaRepository(Repository[Any]):
    """Repository interface for Caracteristica."""


class PersonalizacionRepository(Repository[Any]):
    """Repository interface for Personalizacion."""


class OpcionRepository(Repository[Any]):
    """Repository interface for Opcion."""


class AdicionalRepository(Repository[Any]):
    """Repository interface for Adicional."""

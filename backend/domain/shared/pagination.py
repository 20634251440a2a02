"""
Pagination Value Objects.

Page requests and result pages shared by repositories and services.
Pages are zero-based.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from math import ceil
from typing import Callable, Generic, List, Tuple, TypeVar

T = TypeVar('T')
U = TypeVar('U')

ASC = 'asc'
DESC = 'desc'


@dataclass(frozen=True)
class SortOrder:
    """Single sort criterion, e.g. ``precio_base,desc``."""
    
    field: str
    direction: str = ASC
    
    @classmethod
    def parse(cls, value: str) -> 'SortOrder':
        name, _, direction = value.partition(',')
        direction = direction.strip().lower() or ASC
        if direction not in (ASC, DESC):
            direction = ASC
        return cls(field=name.strip(), direction=direction)
    
    def as_ordering(self) -> str:
        """Django ``order_by`` expression."""
        return f"-{self.field}" if self.direction == DESC else self.field


@dataclass(frozen=True)
class PageRequest:
    """Requested window over a collection."""
    
    page: int = 0
    size: int = 20
    sort: Tuple[SortOrder, ...] = field(default_factory=tuple)
    
    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")
    
    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the size of the whole collection."""
    
    content: List[T]
    total: int
    request: PageRequest
    
    @property
    def number(self) -> int:
        return self.request.page
    
    @property
    def size(self) -> int:
        return self.request.size
    
    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.size) if self.size else 0
    
    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages
    
    @property
    def has_previous(self) -> bool:
        return self.number > 0
    
    def map(self, func: Callable[[T], U]) -> 'Page[U]':
        return Page(content=[func(item) for item in self.content], total=self.total, request=self.request)

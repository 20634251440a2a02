"""
Persistence Repositories Package.

Django ORM implementations of the domain repository ports.
"""

from .base import DjangoRepository
from .catalog import (
    DjangoDispositivoRepository,
    DjangoCaracteristicaRepository,
    DjangoPersonalizacionRepository,
    DjangoOpcionRepository,
    DjangoAdicionalRepository,
)
from .sales import DjangoVentaRepository

__all__ = [
    'DjangoRepository',
    'DjangoDispositivoRepository',
    'DjangoCaracteristicaRepository',
    'DjangoPersonalizacionRepository',
    'DjangoOpcionRepository',
    'DjangoAdicionalRepository',
    'DjangoVentaRepository',
]

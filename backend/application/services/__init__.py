"""
Application Services Package.
"""

from .base import EntityService
from .catalog import (
    DispositivoService,
    CaracteristicaService,
    PersonalizacionService,
    OpcionService,
    AdicionalService,
)
from .sales import VentaService

__all__ = [
    'EntityService',
    'DispositivoService',
    'CaracteristicaService',
    'PersonalizacionService',
    'OpcionService',
    'AdicionalService',
    'VentaService',
]

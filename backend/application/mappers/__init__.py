"""
Mappers Package.

Conversion between ORM entities and DTOs.
"""

from .base import BaseModelSerializer, EntityMapper, IdReferenceField
from .catalog import (
    DispositivoSerializer,
    DispositivoMapper,
    CaracteristicaSerializer,
    CaracteristicaMapper,
    PersonalizacionSerializer,
    PersonalizacionMapper,
    OpcionSerializer,
    OpcionMapper,
    AdicionalSerializer,
    AdicionalMapper,
)
from .sales import VentaSerializer, VentaMapper

__all__ = [
    'BaseModelSerializer',
    'EntityMapper',
    'IdReferenceField',
    'DispositivoSerializer',
    'DispositivoMapper',
    'CaracteristicaSerializer',
    'CaracteristicaMapper',
    'PersonalizacionSerializer',
    'PersonalizacionMapper',
    'OpcionSerializer',
    'OpcionMapper',
    'AdicionalSerializer',
    'AdicionalMapper',
    'VentaSerializer',
    'VentaMapper',
]

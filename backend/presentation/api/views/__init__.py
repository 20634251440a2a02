from .catalog import (
    DispositivoViewSet,
    CaracteristicaViewSet,
    PersonalizacionViewSet,
    OpcionViewSet,
    AdicionalViewSet,
)
from .sales import VentaViewSet

__all__ = [
    'DispositivoViewSet',
    'CaracteristicaViewSet',
    'PersonalizacionViewSet',
    'OpcionViewSet',
    'AdicionalViewSet',
    'VentaViewSet',
]

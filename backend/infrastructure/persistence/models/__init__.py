"""
Persistence Models Package.

All Django ORM models for the device catalog.
"""

# Base
from .base import (
    BaseModel,
    MONEY_MAX_DIGITS,
    MONEY_DECIMAL_PLACES,
)

# Catalog models
from .catalog import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
)

# Sales models
from .sales import (
    Venta,
)


__all__ = [
    # Base
    'BaseModel',
    'MONEY_MAX_DIGITS',
    'MONEY_DECIMAL_PLACES',
    
    # Catalog
    'Dispositivo',
    'Caracteristica',
    'Personalizacion',
    'Opcion',
    'Adicional',
    
    # Sales
    'Venta',
]

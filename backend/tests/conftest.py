"""
Shared fixtures for the catalog test suite.
"""

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
    Venta,
)

ALERT = 'X-catalogoApp-alert'
ERROR = 'X-catalogoApp-error'
PARAMS = 'X-catalogoApp-params'


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username='vendedor', password='secreto123')


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def adicional(db):
    return Adicional.objects.create(
        nombre='Funda',
        descripcion='Funda de silicona',
        precio=Decimal('15.00'),
        precio_gratis=Decimal('500.00'),
    )


@pytest.fixture
def dispositivo(db):
    return Dispositivo.objects.create(
        codigo='PH-100',
        nombre='Teléfono',
        descripcion='Teléfono inteligente',
        precio_base=Decimal('450.00'),
        moneda='USD',
    )


@pytest.fixture
def caracteristica(dispositivo):
    return Caracteristica.objects.create(
        nombre='Pantalla',
        descripcion='6.1 pulgadas',
        dispositivo=dispositivo,
    )


@pytest.fixture
def personalizacion(dispositivo):
    return Personalizacion.objects.create(
        nombre='Color',
        descripcion='Color de la carcasa',
        dispositivo=dispositivo,
    )


@pytest.fixture
def opcion(personalizacion):
    return Opcion.objects.create(
        codigo='NEG',
        nombre='Negro',
        descripcion='Carcasa negra',
        precio_adicional=Decimal('0.00'),
        personalizacion=personalizacion,
    )


@pytest.fixture
def venta(user):
    return Venta.objects.create(
        fecha_venta=datetime(2024, 3, 1, 12, 0, tzinfo=dt_timezone.utc),
        ganancia=Decimal('120.50'),
        user=user,
    )

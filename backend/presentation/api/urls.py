"""
API URL Configuration.

All catalog and sales endpoints, mounted under ``/api/``.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    DispositivoViewSet,
    CaracteristicaViewSet,
    PersonalizacionViewSet,
    OpcionViewSet,
    AdicionalViewSet,
    VentaViewSet,
)

router = DefaultRouter(trailing_slash=False)

# Catalog
router.register(r'dispositivos', DispositivoViewSet, basename='dispositivo')
router.register(r'caracteristicas', CaracteristicaViewSet, basename='caracteristica')
router.register(r'personalizacions', PersonalizacionViewSet, basename='personalizacion')
router.register(r'opcions', OpcionViewSet, basename='opcion')
router.register(r'adicionals', AdicionalViewSet, basename='adicional')

# Sales
router.register(r'ventas', VentaViewSet, basename='venta')

urlpatterns = [
    path('', include(router.urls)),
]

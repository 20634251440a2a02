"""
Catalog Views.

REST resources for devices, their characteristics and customizations,
customization options and add-ons.
"""

from rest_framework import serializers

from application.mappers import (
    DispositivoSerializer,
    CaracteristicaSerializer,
    PersonalizacionSerializer,
    OpcionSerializer,
    AdicionalSerializer,
)
from application.services import (
    DispositivoService,
    CaracteristicaService,
    PersonalizacionService,
    OpcionService,
    AdicionalService,
)
from ..filters import (
    CaracteristicaFilterSet,
    PersonalizacionFilterSet,
    OpcionFilterSet,
)
from ..pagination import StandardResultsSetPagination
from .base import EntityResourceViewSet


class DispositivoViewSet(EntityResourceViewSet):
    """
    ViewSet for devices.
    
    Endpoints:
    - GET /dispositivos - paged list (``?eagerload=false`` skips add-ons prefetch)
    - POST /dispositivos - create device
    - GET /dispositivos/{id} - get device with its add-ons
    - PUT/PATCH /dispositivos/{id} - update device
    - DELETE /dispositivos/{id} - delete device with its children
    """
    
    entity_name = 'dispositivo'
    service_class = DispositivoService
    serializer_class = DispositivoSerializer
    pagination_class = StandardResultsSetPagination
    
    def eagerload(self) -> bool:
        raw = self.request.query_params.get('eagerload')
        if raw in (None, ''):
            return True
        try:
            return serializers.BooleanField().to_internal_value(raw)
        except serializers.ValidationError as exc:
            raise serializers.ValidationError({'eagerload': exc.detail})
    
    def fetch_all(self, page_request, criteria):
        if self.eagerload():
            return self.service.find_all_with_eager_relationships(page_request)
        return self.service.find_all(page_request, criteria)
    
    def fetch_one(self, entity_id):
        if self.eagerload():
            return self.service.find_one_with_eager_relationships(entity_id)
        return self.service.find_one(entity_id)


class CaracteristicaViewSet(EntityResourceViewSet):
    """Characteristics; ``?dispositivo={id}`` narrows to one device."""
    
    entity_name = 'caracteristica'
    service_class = CaracteristicaService
    serializer_class = CaracteristicaSerializer
    filterset_class = CaracteristicaFilterSet


class PersonalizacionViewSet(EntityResourceViewSet):
    """Customizations; ``?dispositivo={id}`` narrows to one device."""
    
    entity_name = 'personalizacion'
    service_class = PersonalizacionService
    serializer_class = PersonalizacionSerializer
    filterset_class = PersonalizacionFilterSet


class OpcionViewSet(EntityResourceViewSet):
    """Options; ``?personalizacion={id}`` narrows to one customization."""
    
    entity_name = 'opcion'
    service_class = OpcionService
    serializer_class = OpcionSerializer
    filterset_class = OpcionFilterSet


class AdicionalViewSet(EntityResourceViewSet):
    entity_name = 'adicional'
    service_class = AdicionalService
    serializer_class = AdicionalSerializer
    pagination_class = StandardResultsSetPagination

"""
Catalog Mappers.

DTO serializers and mappers for Dispositivo, Caracteristica,
Personalizacion, Opcion and Adicional.
"""

from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
)
from .base import BaseModelSerializer, EntityMapper, IdReferenceField


# =============================================================================
# Adicional
# =============================================================================

class AdicionalSerializer(BaseModelSerializer):
    
    class Meta(BaseModelSerializer.Meta):
        model = Adicional
        fields = ['id', 'nombre', 'descripcion', 'precio', 'precio_gratis']


class AdicionalMapper(EntityMapper):
    serializer_class = AdicionalSerializer


# =============================================================================
# Dispositivo
# =============================================================================

class DispositivoSerializer(BaseModelSerializer):
    """Device DTO; add-ons are referenced by id."""
    
    adicionales = IdReferenceField(
        queryset=Adicional.objects.all(),
        many=True,
        required=False
    )
    
    class Meta(BaseModelSerializer.Meta):
        model = Dispositivo
        fields = [
            'id', 'codigo', 'nombre', 'descripcion', 'precio_base', 'moneda',
            'adicionales'
        ]


class DispositivoMapper(EntityMapper):
    serializer_class = DispositivoSerializer


# =============================================================================
# Caracteristica
# =============================================================================

class CaracteristicaSerializer(BaseModelSerializer):
    
    dispositivo = IdReferenceField(queryset=Dispositivo.objects.all())
    
    class Meta(BaseModelSerializer.Meta):
        model = Caracteristica
        fields = ['id', 'nombre', 'descripcion', 'dispositivo']


class CaracteristicaMapper(EntityMapper):
    serializer_class = CaracteristicaSerializer


# =============================================================================
# Personalizacion
# =============================================================================

class PersonalizacionSerializer(BaseModelSerializer):
    
    dispositivo = IdReferenceField(queryset=Dispositivo.objects.all())
    
    class Meta(BaseModelSerializer.Meta):
        model = Personalizacion
        fields = ['id', 'nombre', 'descripcion', 'dispositivo']


class PersonalizacionMapper(EntityMapper):
    serializer_class = PersonalizacionSerializer


# =============================================================================
# Opcion
# =============================================================================

class OpcionSerializer(BaseModelSerializer):
    
    personalizacion = IdReferenceField(queryset=Personalizacion.objects.all())
    
    class Meta(BaseModelSerializer.Meta):
        model = Opcion
        fields = [
            'id', 'codigo', 'nombre', 'descripcion', 'precio_adicional',
            'personalizacion'
        ]


class OpcionMapper(EntityMapper):
    serializer_class = OpcionSerializer

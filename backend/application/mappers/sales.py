"""
Sales Mappers.
"""

from django.contrib.auth import get_user_model

from infrastructure.persistence.models import Venta
from .base import BaseModelSerializer, EntityMapper, IdReferenceField

User = get_user_model()


class VentaSerializer(BaseModelSerializer):
    """Sale DTO; the user is mapped to ``{"id": ...}`` only."""
    
    user = IdReferenceField(
        queryset=User.objects.all(),
        required=False,
        allow_null=True
    )
    
    class Meta(BaseModelSerializer.Meta):
        model = Venta
        fields = ['id', 'fecha_venta', 'ganancia', 'user']


class VentaMapper(EntityMapper):
    serializer_class = VentaSerializer

"""
Sales ORM Models.

Registro de ventas asociadas a un usuario del sistema.
"""

from django.conf import settings
from django.db import models

from .base import BaseModel, money_field


class Venta(BaseModel):
    """Venta registrada; el usuario proviene del almacén de identidades."""
    
    fecha_venta = models.DateTimeField(
        verbose_name="Fecha de venta"
    )
    
    ganancia = money_field("Ganancia", null=True, non_negative=False)
    
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ventas',
        verbose_name="Usuario"
    )
    
    class Meta:
        db_table = 'venta'
        verbose_name = 'Venta'
        verbose_name_plural = 'Ventas'
        ordering = ['id']
    
    def __str__(self):
        return f"Venta {self.pk} ({self.fecha_venta:%Y-%m-%d})"

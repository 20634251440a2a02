"""
Catalog ORM Models.

Arquitectura del catálogo de dispositivos:
1. Dispositivo - Dispositivo base con precio y moneda
2. Caracteristica - Características de un dispositivo
3. Personalizacion - Personalizaciones disponibles para un dispositivo
4. Opcion - Opciones de una personalización, con precio adicional
5. Adicional - Accesorios opcionales, vinculados muchos-a-muchos con dispositivos
"""

from django.db import models

from .base import BaseModel, money_field


class Dispositivo(BaseModel):
    """
    Dispositivo del catálogo.
    
    Es dueño de sus características y personalizaciones (se eliminan con él)
    y del lado propietario de la relación con los adicionales.
    """
    
    codigo = models.CharField(
        max_length=255,
        verbose_name="Código"
    )
    
    nombre = models.CharField(
        max_length=255,
        verbose_name="Nombre"
    )
    
    descripcion = models.CharField(
        max_length=255,
        verbose_name="Descripción"
    )
    
    precio_base = money_field("Precio base")
    
    moneda = models.CharField(
        max_length=255,
        verbose_name="Moneda"
    )
    
    adicionales = models.ManyToManyField(
        'persistence.Adicional',
        related_name='dispositivos',
        blank=True,
        db_table='rel_dispositivo__adicionales',
        verbose_name="Adicionales"
    )
    
    class Meta:
        db_table = 'dispositivo'
        verbose_name = 'Dispositivo'
        verbose_name_plural = 'Dispositivos'
        ordering = ['id']
    
    def __str__(self):
        return f"{self.codigo} - {self.nombre}"


class Caracteristica(BaseModel):
    """Característica de un dispositivo (p. ej. "Pantalla 6.1 pulgadas")."""
    
    nombre = models.CharField(
        max_length=255,
        verbose_name="Nombre"
    )
    
    descripcion = models.CharField(
        max_length=255,
        verbose_name="Descripción"
    )
    
    dispositivo = models.ForeignKey(
        Dispositivo,
        on_delete=models.CASCADE,
        related_name='caracteristicas',
        verbose_name="Dispositivo"
    )
    
    class Meta:
        db_table = 'caracteristica'
        verbose_name = 'Característica'
        verbose_name_plural = 'Características'
        ordering = ['id']
    
    def __str__(self):
        return self.nombre


class Personalizacion(BaseModel):
    """
    Personalización ofrecida para un dispositivo.
    
    Ejemplo: "Color" con opciones "Negro", "Blanco".
    """
    
    nombre = models.CharField(
        max_length=255,
        verbose_name="Nombre"
    )
    
    descripcion = models.CharField(
        max_length=255,
        verbose_name="Descripción"
    )
    
    dispositivo = models.ForeignKey(
        Dispositivo,
        on_delete=models.CASCADE,
        related_name='personalizaciones',
        verbose_name="Dispositivo"
    )
    
    class Meta:
        db_table = 'personalizacion'
        verbose_name = 'Personalización'
        verbose_name_plural = 'Personalizaciones'
        ordering = ['id']
    
    def __str__(self):
        return self.nombre


class Opcion(BaseModel):
    """Opción concreta de una personalización, con su precio adicional."""
    
    codigo = models.CharField(
        max_length=255,
        verbose_name="Código"
    )
    
    nombre = models.CharField(
        max_length=255,
        verbose_name="Nombre"
    )
    
    descripcion = models.CharField(
        max_length=255,
        verbose_name="Descripción"
    )
    
    precio_adicional = money_field("Precio adicional")
    
    personalizacion = models.ForeignKey(
        Personalizacion,
        on_delete=models.CASCADE,
        related_name='opciones',
        verbose_name="Personalización"
    )
    
    class Meta:
        db_table = 'opcion'
        verbose_name = 'Opción'
        verbose_name_plural = 'Opciones'
        ordering = ['id']
    
    def __str__(self):
        return f"{self.codigo} - {self.nombre}"


class Adicional(BaseModel):
    """
    Accesorio opcional con precio propio.
    
    ``precio_gratis`` es el umbral a partir del cual el adicional es gratis;
    un valor negativo indica que nunca lo es.
    """
    
    nombre = models.CharField(
        max_length=255,
        verbose_name="Nombre"
    )
    
    descripcion = models.CharField(
        max_length=255,
        verbose_name="Descripción"
    )
    
    precio = money_field("Precio")
    
    precio_gratis = money_field("Precio gratis", null=True, non_negative=False)
    
    class Meta:
        db_table = 'adicional'
        verbose_name = 'Adicional'
        verbose_name_plural = 'Adicionales'
        ordering = ['id']
    
    def __str__(self):
        return self.nombre

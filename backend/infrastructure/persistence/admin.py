from django.contrib import admin

from .models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
    Venta,
)


# =============================================================================
# Inlines
# =============================================================================

class CaracteristicaInline(admin.TabularInline):
    model = Caracteristica
    extra = 1
    fields = ['nombre', 'descripcion']


class PersonalizacionInline(admin.TabularInline):
    model = Personalizacion
    extra = 0
    fields = ['nombre', 'descripcion']
    show_change_link = True


class OpcionInline(admin.TabularInline):
    model = Opcion
    extra = 1
    fields = ['codigo', 'nombre', 'descripcion', 'precio_adicional']


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Dispositivo)
class DispositivoAdmin(admin.ModelAdmin):
    list_display = ['codigo', 'nombre', 'precio_base', 'moneda']
    list_filter = ['moneda']
    search_fields = ['codigo', 'nombre', 'descripcion']
    filter_horizontal = ['adicionales']
    inlines = [CaracteristicaInline, PersonalizacionInline]


@admin.register(Caracteristica)
class CaracteristicaAdmin(admin.ModelAdmin):
    list_display = ['nombre', 'dispositivo']
    list_filter = ['dispositivo']
    search_fields = ['nombre', 'descripcion', 'dispositivo__nombre']


@admin.register(Personalizacion)
class PersonalizacionAdmin(admin.ModelAdmin):
    list_display = ['nombre', 'dispositivo', 'opcion_count']
    list_filter = ['dispositivo']
    search_fields = ['nombre', 'descripcion', 'dispositivo__nombre']
    inlines = [OpcionInline]
    
    def opcion_count(self, obj):
        return obj.opciones.count()
    opcion_count.short_description = 'Opciones'


@admin.register(Opcion)
class OpcionAdmin(admin.ModelAdmin):
    list_display = ['codigo', 'nombre', 'personalizacion', 'precio_adicional']
    list_filter = ['personalizacion__dispositivo']
    search_fields = ['codigo', 'nombre', 'personalizacion__nombre']


@admin.register(Adicional)
class AdicionalAdmin(admin.ModelAdmin):
    list_display = ['nombre', 'precio', 'precio_gratis']
    search_fields = ['nombre', 'descripcion']


@admin.register(Venta)
class VentaAdmin(admin.ModelAdmin):
    list_display = ['id', 'fecha_venta', 'ganancia', 'user']
    list_filter = ['fecha_venta']
    date_hierarchy = 'fecha_venta'
    raw_id_fields = ['user']


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Catálogo de Dispositivos'
admin.site.site_title = 'Catálogo'
admin.site.index_title = 'Administración'

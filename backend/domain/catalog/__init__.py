"""
Catalog Domain - device customization catalog.

This domain handles:
- Devices (Dispositivo) with base price and currency
- Characteristics of a device (Caracteristica)
- Customizations of a device (Personalizacion) and their options (Opcion)
- Add-ons (Adicional) linked many-to-many to devices
"""

"""\
Setup Demo Data Command.

Purpose:
- Clear the device catalog and its sales.
- Seed a small demo catalog: devices with characteristics, customizations
  with priced options, add-ons, and a sale.

This command is intended for local demo environments.
"""

from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
    Venta,
)


DEMO_ADICIONALES = [
    ('Funda', 'Funda de silicona', Decimal('15.00'), Decimal('500.00')),
    ('Cargador rápido', 'Cargador USB-C 30W', Decimal('35.00'), Decimal('1000.00')),
    ('Seguro', 'Seguro contra roturas por un año', Decimal('80.00'), Decimal('-1')),
]

DEMO_DISPOSITIVOS = [
    {
        'codigo': 'PH-100',
        'nombre': 'Teléfono',
        'descripcion': 'Teléfono inteligente de gama media',
        'precio_base': Decimal('450.00'),
        'moneda': 'USD',
        'caracteristicas': [
            ('Pantalla', '6.1 pulgadas OLED'),
            ('Batería', '4000 mAh'),
        ],
        'personalizaciones': [
            ('Color', 'Color de la carcasa', [
                ('NEG', 'Negro', 'Carcasa negra', Decimal('0.00')),
                ('BLA', 'Blanco', 'Carcasa blanca', Decimal('0.00')),
                ('ORO', 'Dorado', 'Carcasa dorada', Decimal('25.00')),
            ]),
            ('Almacenamiento', 'Capacidad interna', [
                ('128', '128 GB', 'Almacenamiento base', Decimal('0.00')),
                ('256', '256 GB', 'Doble capacidad', Decimal('100.00')),
            ]),
        ],
        'adicionales': ['Funda', 'Cargador rápido', 'Seguro'],
    },
    {
        'codigo': 'TB-200',
        'nombre': 'Tablet',
        'descripcion': 'Tablet de 11 pulgadas',
        'precio_base': Decimal('700.00'),
        'moneda': 'USD',
        'caracteristicas': [
            ('Pantalla', '11 pulgadas LCD'),
        ],
        'personalizaciones': [
            ('Conectividad', 'Tipo de conexión', [
                ('WIFI', 'Wi-Fi', 'Solo Wi-Fi', Decimal('0.00')),
                ('LTE', 'Wi-Fi + LTE', 'Con módem celular', Decimal('120.00')),
            ]),
        ],
        'adicionales': ['Funda'],
    },
]


class Command(BaseCommand):
    help = 'Reset the device catalog and seed demo data'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Only clear catalog data (no seeding)'
        )
        parser.add_argument(
            '--seed',
            action='store_true',
            help='Only seed demo data (no clearing)'
        )

    def handle(self, *args, **options):
        only_clear = bool(options.get('clear'))
        only_seed = bool(options.get('seed'))

        # Default behavior: do both (clear + seed)
        do_clear = not only_seed
        do_seed = not only_clear

        with transaction.atomic():
            if do_clear:
                self.stdout.write('Clearing catalog data...')
                self._clear_catalog()
                self.stdout.write(self.style.SUCCESS('Catalog data cleared.'))

            if do_seed:
                self.stdout.write('Seeding demo data...')
                counts = self._seed_catalog()
                self.stdout.write(self.style.SUCCESS(
                    f"Demo data seeded: {counts['dispositivos']} dispositivos, "
                    f"{counts['opciones']} opciones, {counts['adicionales']} adicionales."
                ))

    # ---------------------------------------------------------------------
    # Clear
    # ---------------------------------------------------------------------
    def _clear_catalog(self):
        # Characteristics, customizations and options cascade from devices
        Venta.objects.all().delete()
        Dispositivo.objects.all().delete()
        Adicional.objects.all().delete()

    # ---------------------------------------------------------------------
    # Seed
    # ---------------------------------------------------------------------
    def _seed_catalog(self):
        adicionales = {}
        for nombre, descripcion, precio, precio_gratis in DEMO_ADICIONALES:
            adicionales[nombre] = Adicional.objects.create(
                nombre=nombre,
                descripcion=descripcion,
                precio=precio,
                precio_gratis=precio_gratis,
            )

        opcion_count = 0
        for data in DEMO_DISPOSITIVOS:
            dispositivo = Dispositivo.objects.create(
                codigo=data['codigo'],
                nombre=data['nombre'],
                descripcion=data['descripcion'],
                precio_base=data['precio_base'],
                moneda=data['moneda'],
            )
            dispositivo.adicionales.set(adicionales[name] for name in data['adicionales'])

            Caracteristica.objects.bulk_create(
                [
                    Caracteristica(dispositivo=dispositivo, nombre=nombre, descripcion=descripcion)
                    for nombre, descripcion in data['caracteristicas']
                ]
            )

            for nombre, descripcion, opciones in data['personalizaciones']:
                personalizacion = Personalizacion.objects.create(
                    dispositivo=dispositivo,
                    nombre=nombre,
                    descripcion=descripcion,
                )
                Opcion.objects.bulk_create(
                    [
                        Opcion(
                            personalizacion=personalizacion,
                            codigo=codigo,
                            nombre=opcion_nombre,
                            descripcion=opcion_descripcion,
                            precio_adicional=precio_adicional,
                        )
                        for codigo, opcion_nombre, opcion_descripcion, precio_adicional in opciones
                    ]
                )
                opcion_count += len(opciones)

        user = get_user_model().objects.filter(is_superuser=True).order_by('id').first()
        Venta.objects.create(
            fecha_venta=timezone.now() - timedelta(days=1),
            ganancia=Decimal('120.50'),
            user=user,
        )

        return {
            'dispositivos': len(DEMO_DISPOSITIVOS),
            'opciones': opcion_count,
            'adicionales': len(adicionales),
        }

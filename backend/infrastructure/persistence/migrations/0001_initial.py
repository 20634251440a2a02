from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Adicional',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre')),
                ('descripcion', models.CharField(max_length=255, verbose_name='Descripción')),
                ('precio', models.DecimalField(decimal_places=2, max_digits=21, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Precio')),
                ('precio_gratis', models.DecimalField(blank=True, decimal_places=2, max_digits=21, null=True, verbose_name='Precio gratis')),
            ],
            options={
                'db_table': 'adicional',
                'verbose_name': 'Adicional',
                'verbose_name_plural': 'Adicionales',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Dispositivo',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('codigo', models.CharField(max_length=255, verbose_name='Código')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre')),
                ('descripcion', models.CharField(max_length=255, verbose_name='Descripción')),
                ('precio_base', models.DecimalField(decimal_places=2, max_digits=21, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Precio base')),
                ('moneda', models.CharField(max_length=255, verbose_name='Moneda')),
                ('adicionales', models.ManyToManyField(blank=True, db_table='rel_dispositivo__adicionales', related_name='dispositivos', to='persistence.adicional', verbose_name='Adicionales')),
            ],
            options={
                'db_table': 'dispositivo',
                'verbose_name': 'Dispositivo',
                'verbose_name_plural': 'Dispositivos',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Caracteristica',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre')),
                ('descripcion', models.CharField(max_length=255, verbose_name='Descripción')),
                ('dispositivo', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='caracteristicas', to='persistence.dispositivo', verbose_name='Dispositivo')),
            ],
            options={
                'db_table': 'caracteristica',
                'verbose_name': 'Característica',
                'verbose_name_plural': 'Características',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Personalizacion',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre')),
                ('descripcion', models.CharField(max_length=255, verbose_name='Descripción')),
                ('dispositivo', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='personalizaciones', to='persistence.dispositivo', verbose_name='Dispositivo')),
            ],
            options={
                'db_table': 'personalizacion',
                'verbose_name': 'Personalización',
                'verbose_name_plural': 'Personalizaciones',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Opcion',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('codigo', models.CharField(max_length=255, verbose_name='Código')),
                ('nombre', models.CharField(max_length=255, verbose_name='Nombre')),
                ('descripcion', models.CharField(max_length=255, verbose_name='Descripción')),
                ('precio_adicional', models.DecimalField(decimal_places=2, max_digits=21, validators=[django.core.validators.MinValueValidator(Decimal('0'))], verbose_name='Precio adicional')),
                ('personalizacion', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='opciones', to='persistence.personalizacion', verbose_name='Personalización')),
            ],
            options={
                'db_table': 'opcion',
                'verbose_name': 'Opción',
                'verbose_name_plural': 'Opciones',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Venta',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='ID')),
                ('fecha_venta', models.DateTimeField(verbose_name='Fecha de venta')),
                ('ganancia', models.DecimalField(blank=True, decimal_places=2, max_digits=21, null=True, verbose_name='Ganancia')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ventas', to=settings.AUTH_USER_MODEL, verbose_name='Usuario')),
            ],
            options={
                'db_table': 'venta',
                'verbose_name': 'Venta',
                'verbose_name_plural': 'Ventas',
                'ordering': ['id'],
            },
        ),
    ]

"""
Characteristics, customizations and options: parent references,
parent filters and partial updates.
"""

from decimal import Decimal

import pytest

from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
)


@pytest.fixture
def otro_dispositivo(db):
    return Dispositivo.objects.create(
        codigo='TB-200',
        nombre='Tablet',
        descripcion='Tablet de 11 pulgadas',
        precio_base=Decimal('700.00'),
        moneda='USD',
    )


@pytest.mark.django_db
class TestCaracteristicaResource:
    
    def test_partial_update_of_descripcion_keeps_other_fields(self, api_client, caracteristica):
        response = api_client.patch(
            f'/api/caracteristicas/{caracteristica.id}',
            {'id': caracteristica.id, 'descripcion': '6.7 pulgadas'},
            format='json',
        )
        
        assert response.status_code == 200
        body = response.json()
        assert body == {
            'id': caracteristica.id,
            'nombre': 'Pantalla',
            'descripcion': '6.7 pulgadas',
            'dispositivo': {'id': caracteristica.dispositivo_id},
        }
        caracteristica.refresh_from_db()
        assert caracteristica.nombre == 'Pantalla'
        assert caracteristica.descripcion == '6.7 pulgadas'
    
    def test_partial_update_can_move_to_other_dispositivo(self, api_client, caracteristica, otro_dispositivo):
        response = api_client.patch(
            f'/api/caracteristicas/{caracteristica.id}',
            {'id': caracteristica.id, 'dispositivo': {'id': otro_dispositivo.id}},
            format='json',
        )
        
        assert response.status_code == 200
        caracteristica.refresh_from_db()
        assert caracteristica.dispositivo == otro_dispositivo
    
    def test_dispositivo_is_required(self, api_client):
        response = api_client.post(
            '/api/caracteristicas',
            {'nombre': 'Peso', 'descripcion': '180 g'},
            format='json',
        )
        
        assert response.status_code == 400
        fields = [e['field'] for e in response.json()['fieldErrors']]
        assert fields == ['dispositivo']
    
    def test_unknown_dispositivo_is_rejected(self, api_client):
        response = api_client.post(
            '/api/caracteristicas',
            {'nombre': 'Peso', 'descripcion': '180 g', 'dispositivo': {'id': 4242}},
            format='json',
        )
        
        assert response.status_code == 400
        assert not Caracteristica.objects.exists()
    
    def test_filter_by_dispositivo(self, api_client, caracteristica, otro_dispositivo):
        Caracteristica.objects.create(
            nombre='Pantalla', descripcion='11 pulgadas', dispositivo=otro_dispositivo
        )
        
        response = api_client.get('/api/caracteristicas', {'dispositivo': caracteristica.dispositivo_id})
        
        assert response.status_code == 200
        assert [item['id'] for item in response.json()] == [caracteristica.id]
    
    def test_invalid_filter_value_is_rejected(self, api_client):
        response = api_client.get('/api/caracteristicas', {'dispositivo': 'abc'})
        
        assert response.status_code == 400
    
    def test_list_is_not_paginated(self, api_client, caracteristica):
        response = api_client.get('/api/caracteristicas')
        
        assert response.status_code == 200
        assert 'X-Total-Count' not in response
        assert len(response.json()) == 1


@pytest.mark.django_db
class TestPersonalizacionResource:
    
    def test_filter_by_dispositivo(self, api_client, personalizacion, otro_dispositivo):
        Personalizacion.objects.create(
            nombre='Conectividad', descripcion='Wi-Fi o LTE', dispositivo=otro_dispositivo
        )
        
        response = api_client.get('/api/personalizacions', {'dispositivo': otro_dispositivo.id})
        
        assert [item['nombre'] for item in response.json()] == ['Conectividad']
    
    def test_delete_removes_opciones(self, api_client, opcion):
        response = api_client.delete(f'/api/personalizacions/{opcion.personalizacion_id}')
        
        assert response.status_code == 204
        assert not Opcion.objects.exists()
        assert Dispositivo.objects.exists()


@pytest.mark.django_db
class TestOpcionResource:
    
    def test_create_references_personalizacion(self, api_client, personalizacion):
        response = api_client.post(
            '/api/opcions',
            {
                'codigo': 'ORO',
                'nombre': 'Dorado',
                'descripcion': 'Carcasa dorada',
                'precio_adicional': '25.00',
                'personalizacion': {'id': personalizacion.id},
            },
            format='json',
        )
        
        assert response.status_code == 201
        assert response.json()['personalizacion'] == {'id': personalizacion.id}
        assert Opcion.objects.get().precio_adicional == Decimal('25.00')
    
    def test_filter_by_personalizacion(self, api_client, opcion, dispositivo):
        other = Personalizacion.objects.create(
            nombre='Almacenamiento', descripcion='Capacidad', dispositivo=dispositivo
        )
        Opcion.objects.create(
            codigo='256', nombre='256 GB', descripcion='Doble capacidad',
            precio_adicional=Decimal('100.00'), personalizacion=other,
        )
        
        response = api_client.get('/api/opcions', {'personalizacion': opcion.personalizacion_id})
        
        assert [item['codigo'] for item in response.json()] == ['NEG']
    
    def test_negative_precio_adicional_is_rejected(self, api_client, opcion):
        response = api_client.put(
            f'/api/opcions/{opcion.id}',
            {
                'id': opcion.id,
                'codigo': 'NEG',
                'nombre': 'Negro',
                'descripcion': 'Carcasa negra',
                'precio_adicional': '-3.00',
                'personalizacion': {'id': opcion.personalizacion_id},
            },
            format='json',
        )
        
        assert response.status_code == 400
        opcion.refresh_from_db()
        assert opcion.precio_adicional == Decimal('0.00')

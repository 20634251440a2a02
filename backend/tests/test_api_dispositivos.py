"""
Device resource: creation scenario, add-on links, paging, eager loading
and cascading deletes.
"""

import json
from decimal import Decimal

import pytest

from conftest import ERROR
from infrastructure.persistence.models import (
    Dispositivo,
    Caracteristica,
    Personalizacion,
    Opcion,
    Adicional,
)


def make_dispositivos(count):
    return [
        Dispositivo.objects.create(
            codigo=f'D{i}',
            nombre=f'Dispositivo {i}',
            descripcion='Demo',
            precio_base=Decimal(100 * i),
            moneda='USD',
        )
        for i in range(1, count + 1)
    ]


@pytest.mark.django_db
class TestCreateDispositivo:
    
    def test_create_phone(self, api_client):
        payload = {
            'codigo': 'D1',
            'nombre': 'Phone',
            'descripcion': 'Smartphone',
            'precio_base': '100.00',
            'moneda': 'USD',
        }
        
        response = api_client.post('/api/dispositivos', payload, format='json')
        
        assert response.status_code == 201
        body = response.json()
        assert response['Location'] == f"/api/dispositivos/{body['id']}"
        assert body['codigo'] == 'D1'
        assert body['nombre'] == 'Phone'
        assert Decimal(str(body['precio_base'])) == Decimal('100.00')
        assert body['moneda'] == 'USD'
        assert body['adicionales'] == []
        
        stored = Dispositivo.objects.get(pk=body['id'])
        assert stored.precio_base == Decimal('100.00')
    
    def test_duplicate_adicionales_are_stored_once(self, api_client, adicional):
        payload = {
            'codigo': 'D2',
            'nombre': 'Tablet',
            'descripcion': 'Tablet',
            'precio_base': '300.00',
            'moneda': 'USD',
            'adicionales': [{'id': adicional.id}, {'id': adicional.id}],
        }
        
        response = api_client.post('/api/dispositivos', payload, format='json')
        
        assert response.status_code == 201
        assert response.json()['adicionales'] == [{'id': adicional.id}]
        stored = Dispositivo.objects.get(pk=response.json()['id'])
        assert list(stored.adicionales.all()) == [adicional]
    
    def test_unknown_adicional_is_rejected(self, api_client):
        payload = {
            'codigo': 'D3',
            'nombre': 'Reloj',
            'descripcion': 'Reloj',
            'precio_base': '80.00',
            'moneda': 'USD',
            'adicionales': [{'id': 4242}],
        }
        
        response = api_client.post('/api/dispositivos', payload, format='json')
        
        assert response.status_code == 400
        fields = [e['field'] for e in response.json()['fieldErrors']]
        assert fields == ['adicionales']
        assert not Dispositivo.objects.exists()
    
    def test_negative_precio_base_is_rejected(self, api_client):
        payload = {
            'codigo': 'D4',
            'nombre': 'Auriculares',
            'descripcion': 'Auriculares',
            'precio_base': '-1.00',
            'moneda': 'USD',
        }
        
        response = api_client.post('/api/dispositivos', payload, format='json')
        
        assert response.status_code == 400
        assert response[ERROR] == 'error.validation'
        assert response.json()['fieldErrors'][0]['field'] == 'precio_base'
        assert response.json()['fieldErrors'][0]['objectName'] == 'dispositivoDTO'


@pytest.mark.django_db
class TestUpdateDispositivo:
    
    def test_full_update_replaces_adicionales(self, api_client, dispositivo, adicional):
        dispositivo.adicionales.add(adicional)
        payload = {
            'id': dispositivo.id,
            'codigo': 'PH-101',
            'nombre': 'Teléfono Pro',
            'descripcion': 'Nueva versión',
            'precio_base': '500.00',
            'moneda': 'EUR',
        }
        
        response = api_client.put(f'/api/dispositivos/{dispositivo.id}', payload, format='json')
        
        assert response.status_code == 200
        dispositivo.refresh_from_db()
        assert dispositivo.codigo == 'PH-101'
        assert dispositivo.moneda == 'EUR'
        assert not dispositivo.adicionales.exists()
    
    def test_partial_update_keeps_unspecified_fields(self, api_client, dispositivo, adicional):
        dispositivo.adicionales.add(adicional)
        
        response = api_client.patch(
            f'/api/dispositivos/{dispositivo.id}',
            {'id': dispositivo.id, 'nombre': 'Teléfono Lite'},
            format='json',
        )
        
        assert response.status_code == 200
        body = response.json()
        assert body['nombre'] == 'Teléfono Lite'
        assert body['codigo'] == 'PH-100'
        assert body['adicionales'] == [{'id': adicional.id}]
    
    def test_partial_update_ignores_null_fields(self, api_client, dispositivo):
        response = api_client.patch(
            f'/api/dispositivos/{dispositivo.id}',
            {'id': dispositivo.id, 'nombre': None, 'moneda': 'ARS'},
            format='json',
        )
        
        assert response.status_code == 200
        dispositivo.refresh_from_db()
        assert dispositivo.nombre == 'Teléfono'
        assert dispositivo.moneda == 'ARS'
    
    def test_partial_update_accepts_merge_patch(self, api_client, dispositivo):
        response = api_client.patch(
            f'/api/dispositivos/{dispositivo.id}',
            data=json.dumps({'id': dispositivo.id, 'descripcion': 'Reacondicionado'}),
            content_type='application/merge-patch+json',
        )
        
        assert response.status_code == 200
        dispositivo.refresh_from_db()
        assert dispositivo.descripcion == 'Reacondicionado'
    
    def test_partial_update_validates_values(self, api_client, dispositivo):
        response = api_client.patch(
            f'/api/dispositivos/{dispositivo.id}',
            {'id': dispositivo.id, 'precio_base': '-5.00'},
            format='json',
        )
        
        assert response.status_code == 400
        dispositivo.refresh_from_db()
        assert dispositivo.precio_base == Decimal('450.00')


@pytest.mark.django_db
class TestListDispositivos:
    
    def test_first_page_headers(self, api_client):
        make_dispositivos(3)
        
        response = api_client.get('/api/dispositivos', {'page': 0, 'size': 2, 'sort': 'id,asc'})
        
        assert response.status_code == 200
        assert len(response.json()) == 2
        assert response['X-Total-Count'] == '3'
        link = response['Link']
        assert 'rel="next"' in link
        assert 'rel="last"' in link
        assert 'rel="first"' in link
        assert 'rel="prev"' not in link
        assert 'page=1' in link
    
    def test_last_page(self, api_client):
        make_dispositivos(3)
        
        response = api_client.get('/api/dispositivos', {'page': 1, 'size': 2})
        
        assert len(response.json()) == 1
        assert 'rel="prev"' in response['Link']
        assert 'rel="next"' not in response['Link']
    
    def test_sort_descending(self, api_client):
        make_dispositivos(3)
        
        response = api_client.get('/api/dispositivos', {'sort': 'precio_base,desc'})
        
        assert [item['codigo'] for item in response.json()] == ['D3', 'D2', 'D1']
    
    def test_unknown_sort_field_is_ignored(self, api_client):
        make_dispositivos(2)
        
        response = api_client.get('/api/dispositivos', {'sort': 'color,desc'})
        
        assert response.status_code == 200
        assert [item['codigo'] for item in response.json()] == ['D1', 'D2']
    
    def test_page_size_is_capped(self, api_client):
        make_dispositivos(2)
        
        response = api_client.get('/api/dispositivos', {'size': 5000})
        
        assert response.status_code == 200
        assert 'size=1000' in response['Link']
    
    def test_invalid_page_is_rejected(self, api_client):
        response = api_client.get('/api/dispositivos', {'page': 'abc'})
        
        assert response.status_code == 400
    
    def test_page_beyond_database_offset_is_rejected(self, api_client):
        make_dispositivos(1)
        
        response = api_client.get('/api/dispositivos', {'page': 10 ** 19, 'size': 20})
        
        assert response.status_code == 400
        assert [e['field'] for e in response.json()['fieldErrors']] == ['page']
    
    def test_page_past_last_is_empty(self, api_client):
        make_dispositivos(1)
        
        response = api_client.get('/api/dispositivos', {'page': 5, 'size': 20})
        
        assert response.status_code == 200
        assert response.json() == []
        assert response['X-Total-Count'] == '1'
    
    def test_eager_loading_includes_adicionales(self, api_client, dispositivo, adicional):
        dispositivo.adicionales.add(adicional)
        
        eager = api_client.get('/api/dispositivos').json()
        lazy = api_client.get('/api/dispositivos', {'eagerload': 'false'}).json()
        
        assert eager[0]['adicionales'] == [{'id': adicional.id}]
        assert lazy == eager
    
    def test_get_with_eager_loading_disabled(self, api_client, dispositivo):
        response = api_client.get(f'/api/dispositivos/{dispositivo.id}', {'eagerload': 'false'})
        
        assert response.status_code == 200
        assert response.json()['codigo'] == 'PH-100'
    
    def test_invalid_eagerload_is_rejected(self, api_client, dispositivo):
        response = api_client.get('/api/dispositivos', {'eagerload': 'maybe'})
        
        assert response.status_code == 400


@pytest.mark.django_db
class TestDeleteDispositivo:
    
    def test_delete_cascades_to_owned_records(self, api_client, caracteristica, opcion, adicional):
        dispositivo = caracteristica.dispositivo
        dispositivo.adicionales.add(adicional)
        
        response = api_client.delete(f'/api/dispositivos/{dispositivo.id}')
        
        assert response.status_code == 204
        assert not Caracteristica.objects.exists()
        assert not Personalizacion.objects.exists()
        assert not Opcion.objects.exists()
        assert Adicional.objects.filter(pk=adicional.pk).exists()
        assert not Dispositivo.adicionales.through.objects.exists()

"""
Add-on resource.
"""

from decimal import Decimal

import pytest

from infrastructure.persistence.models import Adicional


@pytest.mark.django_db
class TestAdicionalResource:
    
    def test_precio_gratis_may_be_negative(self, api_client):
        response = api_client.post(
            '/api/adicionals',
            {
                'nombre': 'Seguro',
                'descripcion': 'Seguro contra roturas',
                'precio': '80.00',
                'precio_gratis': '-1.00',
            },
            format='json',
        )
        
        assert response.status_code == 201
        assert Adicional.objects.get().precio_gratis == Decimal('-1.00')
    
    def test_precio_gratis_is_optional(self, api_client):
        response = api_client.post(
            '/api/adicionals',
            {'nombre': 'Funda', 'descripcion': 'Funda', 'precio': '15.00'},
            format='json',
        )
        
        assert response.status_code == 201
        assert response.json()['precio_gratis'] is None
    
    def test_negative_precio_is_rejected(self, api_client):
        response = api_client.post(
            '/api/adicionals',
            {'nombre': 'Funda', 'descripcion': 'Funda', 'precio': '-15.00'},
            format='json',
        )
        
        assert response.status_code == 400
        assert [e['field'] for e in response.json()['fieldErrors']] == ['precio']
    
    def test_list_is_paginated(self, api_client, adicional):
        response = api_client.get('/api/adicionals')
        
        assert response['X-Total-Count'] == '1'
        assert response.json()[0]['nombre'] == 'Funda'
    
    def test_delete_keeps_linked_dispositivo(self, api_client, adicional, dispositivo):
        dispositivo.adicionales.add(adicional)
        
        response = api_client.delete(f'/api/adicionals/{adicional.id}')
        
        assert response.status_code == 204
        dispositivo.refresh_from_db()
        assert not dispositivo.adicionales.exists()

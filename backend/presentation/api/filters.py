"""
Filters for the child resources.

Each FilterSet turns query parameters into the ``criteria`` mapping
passed down to the services (``{'dispositivo': 1}``).
"""

from django import forms
from django_filters import rest_framework as django_filters
from django_filters.utils import translate_validation

from infrastructure.persistence.models import (
    Caracteristica,
    Personalizacion,
    Opcion,
)


class IdFilter(django_filters.Filter):
    """Exact match on a related entity id."""
    
    field_class = forms.IntegerField


class CaracteristicaFilterSet(django_filters.FilterSet):
    dispositivo = IdFilter(field_name='dispositivo')
    
    class Meta:
        model = Caracteristica
        fields = ['dispositivo']


class PersonalizacionFilterSet(django_filters.FilterSet):
    dispositivo = IdFilter(field_name='dispositivo')
    
    class Meta:
        model = Personalizacion
        fields = ['dispositivo']


class OpcionFilterSet(django_filters.FilterSet):
    personalizacion = IdFilter(field_name='personalizacion')
    
    class Meta:
        model = Opcion
        fields = ['personalizacion']


def get_criteria(filterset_class, query_params) -> dict:
    """
    Validate ``query_params`` against ``filterset_class``.
    
    Returns the supplied filters keyed by model field name; raises a DRF
    ``ValidationError`` for malformed values.
    """
    filterset = filterset_class(data=query_params)
    if not filterset.is_valid():
        raise translate_validation(filterset.errors)
    return {
        filterset.filters[name].field_name: value
        for name, value in filterset.form.cleaned_data.items()
        if value is not None
    }

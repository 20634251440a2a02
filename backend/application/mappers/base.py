"""
Base Mappers.

DTO serializers and the mapper that converts between ORM entities and
their DTOs. A DTO is the JSON-ready ``dict`` produced by a serializer.
"""

from collections import OrderedDict

from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers
from rest_framework.utils import model_meta


class IdReferenceField(serializers.RelatedField):
    """
    Reference to another entity projected to its identity: ``{"id": 7}``.
    
    Accepts ``{"id": 7}`` (or a bare ``7``) on input and resolves it
    against ``queryset``. Keeps DTOs from embedding whole related entities.
    """
    
    default_error_messages = {
        'required': 'This field is required.',
        'missing_id': 'Reference must include an "id".',
        'does_not_exist': 'Invalid id "{pk_value}" - object does not exist.',
        'incorrect_type': 'Incorrect type. Expected id value, received {data_type}.',
    }
    
    def use_pk_only_optimization(self):
        return True
    
    def to_representation(self, value):
        return {'id': value.pk}
    
    def to_internal_value(self, data):
        pk = data.get('id') if isinstance(data, dict) else data
        if pk is None:
            self.fail('missing_id')
        if isinstance(pk, bool):
            self.fail('incorrect_type', data_type=type(pk).__name__)
        try:
            return self.get_queryset().get(pk=pk)
        except ObjectDoesNotExist:
            self.fail('does_not_exist', pk_value=pk)
        except (TypeError, ValueError):
            self.fail('incorrect_type', data_type=type(pk).__name__)
    
    def get_choices(self, cutoff=None):
        queryset = self.get_queryset()
        if queryset is None:
            return {}
        if cutoff is not None:
            queryset = queryset[:cutoff]
        return OrderedDict((item.pk, self.display_value(item)) for item in queryset)


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base DTO serializer with common configuration.
    """
    
    class Meta:
        abstract = True
        read_only_fields = ['id']


class EntityMapper:
    """
    Mapper for an entity and its DTO.
    
    Subclasses set ``serializer_class``; the model is taken from its Meta.
    Mapping is stateless: a mapper instance can be shared between requests.
    """
    
    serializer_class = None
    
    @property
    def model(self):
        return self.serializer_class.Meta.model
    
    def to_dto(self, entity) -> dict:
        return dict(self.serializer_class(entity).data)
    
    def to_dto_list(self, entities) -> list:
        return [self.to_dto(entity) for entity in entities]
    
    def to_entity(self, dto: dict):
        """
        Build an unsaved entity from ``dto``.
        
        Every writable field is replaced; many-to-many fields absent
        from ``dto`` are staged as empty.
        """
        serializer = self.serializer_class(data=dto)
        serializer.is_valid(raise_exception=True)
        
        entity = self.model()
        entity_id = dto.get('id')
        if entity_id is not None:
            entity.pk = self.model._meta.pk.to_python(entity_id)
        
        values = dict(serializer.validated_data)
        for name in self._to_many_fields():
            values.setdefault(name, [])
        self._assign(entity, values, skip_none=False)
        return entity
    
    def partial_update(self, entity, dto: dict):
        """Copy the non-null values of ``dto`` onto ``entity``."""
        data = {name: value for name, value in dto.items() if value is not None}
        serializer = self.serializer_class(entity, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        self._assign(entity, serializer.validated_data, skip_none=True)
        return entity
    
    def _to_many_fields(self):
        info = model_meta.get_field_info(self.model)
        writable = {
            name for name, field in self.serializer_class().fields.items()
            if not field.read_only
        }
        return [
            name for name, relation in info.relations.items()
            if relation.to_many and not relation.reverse and name in writable
        ]
    
    def _assign(self, entity, values, skip_none):
        to_many = set(self._to_many_fields())
        for name, value in values.items():
            if skip_none and value is None:
                continue
            if name in to_many:
                entity.stage_many_to_many(name, value)
            else:
                setattr(entity, name, value)

"""
Base ORM Models.

Provides common functionality for all catalog models:
- Auto-increment BIGINT primary keys, assigned by the database
- Default ordering by id
- Decimal money field used for every price column
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


MONEY_MAX_DIGITS = 21
MONEY_DECIMAL_PLACES = 2


def money_field(verbose_name, null=False, non_negative=True):
    """Decimal column stored as DECIMAL(21, 2)."""
    validators = [MinValueValidator(Decimal('0'))] if non_negative else []
    return models.DecimalField(
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        null=null,
        blank=null,
        validators=validators,
        verbose_name=verbose_name
    )


class BaseModel(models.Model):
    """
    Base model with a database-assigned identifier.
    
    The identifier is immutable once assigned: the API layer rejects
    creates that carry an id and updates whose id does not match.
    """
    
    id = models.BigAutoField(
        primary_key=True,
        verbose_name="ID"
    )
    
    class Meta:
        abstract = True
        ordering = ['id']

    def __str__(self):
        return f"{self.__class__.__name__} {self.pk}"

    def stage_many_to_many(self, field_name, values):
        """
        Keep many-to-many values until the instance has a primary key.

        Unsaved instances cannot hold relations, so they are applied
        by ``apply_staged_many_to_many`` right after ``save()``.
        """
        if not hasattr(self, '_staged_many_to_many'):
            self._staged_many_to_many = {}
        self._staged_many_to_many[field_name] = list(values)

    def apply_staged_many_to_many(self):
        staged = getattr(self, '_staged_many_to_many', None)
        if not staged:
            return
        for field_name, values in staged.items():
            getattr(self, field_name).set(values)
        self._staged_many_to_many = {}

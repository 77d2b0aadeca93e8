"""
Custom model fields.
"""

from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.db import models


class DecimalTextField(models.TextField):
    """
    Stores a Decimal as its exact string form.

    Every digit and the scale read back unchanged on every backend, including
    SQLite, whose NUMERIC columns come back through a float.
    """

    description = "Exact decimal number stored as text"

    def from_db_value(self, value, expression, connection):
        if value is None:
            return value
        return Decimal(value)

    def to_python(self, value):
        if value is None or isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"'{value}' is not a decimal number", code="invalid")

    def get_prep_value(self, value):
        value = self.to_python(value)
        if value is None:
            return None
        return str(value)

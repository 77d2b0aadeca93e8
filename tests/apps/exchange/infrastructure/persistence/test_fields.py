from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from apps.exchange.infrastructure.persistence.fields import DecimalTextField


class TestDecimalTextField:

    def test_prep_value_keeps_scale(self):
        field = DecimalTextField()

        assert field.get_prep_value(Decimal("180.0000")) == "180.0000"
        assert field.get_prep_value("12345678901.123456789") == "12345678901.123456789"
        assert field.get_prep_value(None) is None

    def test_from_db_value(self):
        field = DecimalTextField()

        value = field.from_db_value("22222222022.0222", None, None)

        assert value == Decimal("22222222022.0222")
        assert value.as_tuple().exponent == -4
        assert field.from_db_value(None, None, None) is None

    def test_rejects_non_numbers(self):
        with pytest.raises(ValidationError):
            DecimalTextField().to_python("ten")

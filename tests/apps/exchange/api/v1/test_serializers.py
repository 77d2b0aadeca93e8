import uuid
from decimal import Decimal
from datetime import date

from apps.exchange.api.v1.serializers import (
    ConversionByDateQuerySerializer,
    ConversionByIdQuerySerializer,
    ConversionPageSerializer,
    ConversionSummarySerializer,
    ConvertQuerySerializer,
    ExchangeRateQuerySerializer,
)
from apps.exchange.application.dto import ConversionSummaryDTO
from apps.exchange.domain.models import Page


class TestExchangeRateQuerySerializer:
    """Tests for rate lookup query parameters."""

    def test_valid(self):
        serializer = ExchangeRateQuerySerializer(data={"fromCurrency": "USD", "toCurrency": "EUR"})

        assert serializer.is_valid()
        assert serializer.validated_data == {"fromCurrency": "USD", "toCurrency": "EUR"}

    def test_missing_currency(self):
        serializer = ExchangeRateQuerySerializer(data={"fromCurrency": "USD"})

        assert not serializer.is_valid()
        assert "toCurrency" in serializer.errors

    def test_blank_currency(self):
        serializer = ExchangeRateQuerySerializer(data={"fromCurrency": "  ", "toCurrency": "EUR"})

        assert not serializer.is_valid()
        assert "fromCurrency" in serializer.errors


class TestConvertQuerySerializer:
    """Tests for conversion query parameters."""

    def test_valid_amount_parsed_as_decimal(self):
        serializer = ConvertQuerySerializer(
            data={"amount": "158.24", "fromCurrency": "USD", "toCurrency": "EUR"}
        )

        assert serializer.is_valid()
        assert serializer.validated_data["amount"] == Decimal("158.24")

    def test_negative_amount_left_to_domain(self):
        """
        Test that the sign is not checked here; the service rejects it.
        """
        serializer = ConvertQuerySerializer(
            data={"amount": "-5", "fromCurrency": "USD", "toCurrency": "EUR"}
        )

        assert serializer.is_valid()

    def test_non_numeric_amount(self):
        serializer = ConvertQuerySerializer(
            data={"amount": "abc", "fromCurrency": "USD", "toCurrency": "EUR"}
        )

        assert not serializer.is_valid()
        assert "amount" in serializer.errors

    def test_nan_amount(self):
        serializer = ConvertQuerySerializer(
            data={"amount": "NaN", "fromCurrency": "USD", "toCurrency": "EUR"}
        )

        assert not serializer.is_valid()
        assert "amount" in serializer.errors


class TestConversionLookupSerializers:

    def test_by_id_requires_uuid(self):
        serializer = ConversionByIdQuerySerializer(data={"transactionId": "not-a-uuid"})

        assert not serializer.is_valid()
        assert "transactionId" in serializer.errors

    def test_by_id_valid(self):
        tid = uuid.uuid4()
        serializer = ConversionByIdQuerySerializer(data={"transactionId": str(tid)})

        assert serializer.is_valid()
        assert serializer.validated_data["transactionId"] == tid

    def test_by_date_defaults(self):
        """Test page defaults to 0 and size to 3."""
        serializer = ConversionByDateQuerySerializer(data={"transactionDateTime": "2025-07-08"})

        assert serializer.is_valid()
        assert serializer.validated_data == {
            "transactionDateTime": date(2025, 7, 8),
            "page": 0,
            "size": 3,
        }

    def test_by_date_invalid_format(self):
        serializer = ConversionByDateQuerySerializer(data={"transactionDateTime": "08/07/2025"})

        assert not serializer.is_valid()
        assert "transactionDateTime" in serializer.errors


class TestResponseSerializers:

    def test_summary_shape(self):
        tid = uuid.uuid4()
        dto = ConversionSummaryDTO(converted_amount=Decimal("180.0000"), transaction_id=tid)

        data = ConversionSummarySerializer(dto).data

        assert data == {"convertedAmount": "180.0000", "transactionId": str(tid)}

    def test_summary_renders_amounts_wider_than_default_context(self):
        dto = ConversionSummaryDTO(
            converted_amount=Decimal("1800000000000000000000000.0000"),
            transaction_id=uuid.uuid4(),
        )

        data = ConversionSummarySerializer(dto).data

        assert data["convertedAmount"] == "1800000000000000000000000.0000"

    def test_page_shape(self):
        tid = uuid.uuid4()
        page = Page(
            content=[ConversionSummaryDTO(converted_amount=Decimal("1.5000"), transaction_id=tid)],
            number=0,
            size=3,
            total_elements=1,
        )

        data = ConversionPageSerializer(page).data

        assert data["totalElements"] == 1
        assert data["totalPages"] == 1
        assert data["number"] == 0
        assert data["size"] == 3
        assert data["content"] == [{"convertedAmount": "1.5000", "transactionId": str(tid)}]

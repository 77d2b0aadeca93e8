"""
Serializers for the exchange bounded context.
Validates query parameters and shapes the public responses.
"""

from rest_framework import serializers


class ExchangeRateQuerySerializer(serializers.Serializer):
    fromCurrency = serializers.CharField(max_length=16)
    toCurrency = serializers.CharField(max_length=16)


class ConvertQuerySerializer(ExchangeRateQuerySerializer):
    # Sign and size are checked by the domain service so the message stays the same
    # for API and command line callers.
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)


class ConversionByIdQuerySerializer(serializers.Serializer):
    transactionId = serializers.UUIDField()


class ConversionByDateQuerySerializer(serializers.Serializer):
    transactionDateTime = serializers.DateField(input_formats=["%Y-%m-%d"])
    page = serializers.IntegerField(default=0)
    size = serializers.IntegerField(default=3)


class ConversionSummarySerializer(serializers.Serializer):
    # Already quantized to 4 places; rendered as-is at any magnitude.
    convertedAmount = serializers.DecimalField(
        source="converted_amount",
        max_digits=None,
        decimal_places=None,
        read_only=True,
    )
    transactionId = serializers.UUIDField(source="transaction_id", read_only=True)


class ConversionPageSerializer(serializers.Serializer):
    content = ConversionSummarySerializer(many=True, read_only=True)
    totalElements = serializers.IntegerField(source="total_elements", read_only=True)
    totalPages = serializers.IntegerField(source="total_pages", read_only=True)
    number = serializers.IntegerField(read_only=True)
    size = serializers.IntegerField(read_only=True)

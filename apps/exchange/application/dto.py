"""
Data Transfer Objects for the application layer.
DTOs decouple internal domain models from external API contracts.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from apps.exchange.domain.models import ConversionRecord


@dataclass(frozen=True)
class ConversionSummaryDTO:
    """Public projection of a conversion: what callers get to see."""
    converted_amount: Decimal
    transaction_id: UUID

    @classmethod
    def from_record(cls, record: ConversionRecord) -> "ConversionSummaryDTO":
        return cls(
            converted_amount=record.converted_amount,
            transaction_id=record.transaction_id,
        )

"""
Django ORM models for persistence.
Infrastructure layer — technical storage detail.
"""

import uuid
from django.db import models

from apps.exchange.domain.models import ConversionRecord
from apps.exchange.infrastructure.persistence.fields import DecimalTextField


class ImmutableRecordError(Exception):
    pass


class ConversionTransaction(models.Model):

    # Surrogate key; stays inside the persistence layer.
    id = models.BigAutoField(primary_key=True)
    transaction_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    original_amount = DecimalTextField()
    from_currency = models.CharField(max_length=16)
    to_currency = models.CharField(max_length=16)
    rate = models.FloatField(null=True, blank=True)
    converted_amount = DecimalTextField()
    date_time = models.DateTimeField(db_index=True, editable=False)

    class Meta:
        ordering = ["-date_time"]

    def __str__(self):
        return (
            f"{self.transaction_id} | {self.original_amount} {self.from_currency} "
            f"-> {self.converted_amount} {self.to_currency}"
        )

    def save(self, *args, **kwargs):
        # Append-only: rows are written once and never updated.
        if not self._state.adding:
            raise ImmutableRecordError(
                f"Conversion transaction {self.transaction_id} cannot be modified"
            )
        super().save(*args, **kwargs)

    @classmethod
    def from_record(cls, record: ConversionRecord) -> "ConversionTransaction":
        return cls(
            transaction_id=record.transaction_id,
            original_amount=record.original_amount,
            from_currency=record.from_currency,
            to_currency=record.to_currency,
            rate=record.rate,
            converted_amount=record.converted_amount,
            date_time=record.date_time,
        )

    def to_record(self) -> ConversionRecord:
        return ConversionRecord(
            transaction_id=self.transaction_id,
            original_amount=self.original_amount,
            from_currency=self.from_currency,
            to_currency=self.to_currency,
            rate=self.rate,
            converted_amount=self.converted_amount,
            date_time=self.date_time,
        )

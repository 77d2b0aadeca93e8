"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

import logging
from typing import Optional
from datetime import datetime
from uuid import UUID

from django.db import DatabaseError

from apps.exchange.domain.exceptions import PersistenceError
from apps.exchange.domain.models import ConversionRecord, Page
from apps.exchange.infrastructure.persistence.models import ConversionTransaction

logger = logging.getLogger(__name__)


class ConversionTransactionRepository:
    """Repository for the ConversionTransaction aggregate."""

    @staticmethod
    def save(record: ConversionRecord) -> ConversionRecord:
        """Insert a new transaction row."""
        try:
            row = ConversionTransaction.from_record(record)
            row.save()
        except DatabaseError as e:
            logger.error("Failed to save conversion transaction %s: %s", record.transaction_id, e)
            raise PersistenceError("Could not save conversion transaction") from e
        return row.to_record()

    @staticmethod
    def find_by_transaction_id(transaction_id: UUID) -> Optional[ConversionRecord]:
        """Get a transaction by its public identifier."""
        try:
            row = ConversionTransaction.objects.filter(transaction_id=transaction_id).first()
        except DatabaseError as e:
            logger.error("Failed to read conversion transaction %s: %s", transaction_id, e)
            raise PersistenceError("Could not read conversion transaction") from e
        return row.to_record() if row else None

    @staticmethod
    def find_by_date_time_between(
        start: datetime,
        end: datetime,
        page: int,
        size: int
    ) -> Page[ConversionRecord]:
        """
        Get one page of transactions with start <= date_time < end, newest first.

        page is zero-based. Bounds are not checked here.
        """
        queryset = (
            ConversionTransaction.objects
            .filter(date_time__gte=start, date_time__lt=end)
            .order_by("-date_time", "-id")
        )
        offset = page * size
        try:
            total = queryset.count()
            rows = list(queryset[offset:offset + size])
        except DatabaseError as e:
            logger.error("Failed to read conversions between %s and %s: %s", start, end, e)
            raise PersistenceError("Could not read conversion transactions") from e

        return Page(
            content=[row.to_record() for row in rows],
            number=page,
            size=size,
            total_elements=total,
        )

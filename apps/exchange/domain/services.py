"""
Domain services - Core business logic.
Implements the conversion workflow and the transaction lookups.
"""

import logging
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from apps.exchange.application.dto import ConversionSummaryDTO
from apps.exchange.domain.exceptions import (
    FutureDateError,
    InvalidAmountError,
    InvalidInputError,
    MissingRateError,
    NotFoundError,
)
from apps.exchange.domain.interfaces import BaseExchangeRateProvider
from apps.exchange.domain.models import (
    MAX_AMOUNT_FRACTION_DIGITS,
    MAX_AMOUNT_WHOLE_DIGITS,
    ConversionRecord,
    Page,
    amount_within_bounds,
    compute_converted_amount,
)
from apps.exchange.infrastructure.persistence.repositories import ConversionTransactionRepository
from apps.exchange.infrastructure.providers.registry import get_configured_provider

logger = logging.getLogger(__name__)

# SQL LIMIT and OFFSET are signed 64-bit integers.
MAX_ROW_OFFSET = 2**63 - 1


def _normalize_currency(code: str | None, field_name: str) -> str:
    if code is None or not code.strip():
        raise InvalidInputError(f"{field_name} must be present")
    return code.strip().upper()


class ConversionService:
    """
    Domain service that converts amounts and records each conversion.

    Workflow:
    1. Validate amount and currency codes
    2. Fetch the live rate from the provider
    3. Compute the converted amount (4 digits, half-up)
    4. Stamp a fresh transaction id and timestamp
    5. Persist the record and return it
    """

    def __init__(
        self,
        provider: BaseExchangeRateProvider | None = None,
        repository=None,
    ):
        self.provider = provider if provider is not None else get_configured_provider()
        self.repository = repository if repository is not None else ConversionTransactionRepository

    def get_exchange_rate(self, source_currency: str, target_currency: str) -> float | None:
        """
        Get the live exchange rate for a currency pair.

        Returns:
            Rate as float, or None if the provider did not quote the pair

        Example:
            >>> ConversionService().get_exchange_rate("USD", "EUR")
            0.85
        """
        source_currency = _normalize_currency(source_currency, "fromCurrency")
        target_currency = _normalize_currency(target_currency, "toCurrency")

        return self.provider.get_rate(source_currency, target_currency)

    def convert(self, amount: Decimal, source_currency: str, target_currency: str) -> ConversionRecord:
        """
        Convert an amount from one currency to another and store the transaction.

        Args:
            amount: Amount to convert, must be > 0
            source_currency: Source currency
            target_currency: Target currency

        Returns:
            The stored ConversionRecord

        Example:
            >>> record = ConversionService().convert(Decimal("100"), "USD", "BGN")
            >>> record.converted_amount
            Decimal('180.0000')
        """
        logger.info("Converting amount %s from %s to %s", amount, source_currency, target_currency)

        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        if not amount.is_finite() or amount <= 0:
            logger.warning("Invalid amount for conversion: %s", amount)
            raise InvalidAmountError("Amount must be greater than 0")

        if not amount_within_bounds(amount):
            logger.warning("Amount out of supported range: %s", amount)
            raise InvalidAmountError(
                f"Amount must be less than 10^{MAX_AMOUNT_WHOLE_DIGITS} "
                f"with at most {MAX_AMOUNT_FRACTION_DIGITS} fractional digits"
            )

        source_currency = _normalize_currency(source_currency, "fromCurrency")
        target_currency = _normalize_currency(target_currency, "toCurrency")

        rate = self.get_exchange_rate(source_currency, target_currency)
        if rate is None:
            logger.warning("No rate quoted for %s/%s", source_currency, target_currency)
            raise MissingRateError(source_currency, target_currency)

        record = ConversionRecord(
            transaction_id=uuid.uuid4(),
            original_amount=amount,
            from_currency=source_currency,
            to_currency=target_currency,
            rate=rate,
            converted_amount=compute_converted_amount(amount, rate),
            date_time=timezone.now(),
        )

        saved = self.repository.save(record)
        logger.info("Conversion transaction saved with ID %s", saved.transaction_id)
        return saved


class ConversionQueryService:
    """Read side: looks up stored conversions and maps them to summaries."""

    def __init__(self, repository=None):
        self.repository = repository if repository is not None else ConversionTransactionRepository

    def get_by_id(self, transaction_id: UUID) -> ConversionSummaryDTO:
        logger.info("Fetching conversion by transaction ID: %s", transaction_id)

        record = self.repository.find_by_transaction_id(transaction_id)
        if record is None:
            logger.warning("Transaction not found for ID %s", transaction_id)
            raise NotFoundError("Transaction not found for the given ID")

        return ConversionSummaryDTO.from_record(record)

    def get_by_date(self, transaction_date: date, page: int, size: int) -> Page[ConversionSummaryDTO]:
        """
        Get one page of conversions made on a given day, newest first.

        page is zero-based. Raises FutureDateError for days after today and
        NotFoundError when the page is empty.
        """
        logger.info("Fetching conversions by transaction date: %s", transaction_date)

        if transaction_date > timezone.localdate():
            logger.warning("Transaction date %s is in the future", transaction_date)
            raise FutureDateError("Transaction date cannot be in the future")

        if page < 0:
            raise InvalidInputError("Page index must not be less than zero")
        if size < 1:
            raise InvalidInputError("Page size must not be less than one")
        if size > MAX_ROW_OFFSET or page * size > MAX_ROW_OFFSET - size:
            raise InvalidInputError("Page index or size is too large")

        start_of_day = _start_of_day(transaction_date)
        end_of_day = _start_of_day(transaction_date + timedelta(days=1))

        records = self.repository.find_by_date_time_between(start_of_day, end_of_day, page, size)

        if not records.has_content:
            logger.warning("No transactions found for date %s", transaction_date)
            raise NotFoundError("No transactions found for the given date")

        return records.map(ConversionSummaryDTO.from_record)


def _start_of_day(day: date) -> datetime:
    # Attaching the zone directly keeps a midnight that falls in a DST gap valid.
    tzinfo = timezone.get_current_timezone() if settings.USE_TZ else None
    return datetime.combine(day, time.min, tzinfo=tzinfo)

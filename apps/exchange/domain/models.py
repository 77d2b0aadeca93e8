"""
Pure domain entities (POPOs).
No dependency on Django or the ORM.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Callable, Generic, List, TypeVar
from uuid import UUID

T = TypeVar("T")
R = TypeVar("R")

CONVERTED_AMOUNT_QUANTUM = Decimal("0.0001")
CONVERTED_AMOUNT_PLACES = 4

# Accepted amounts are below 10**24 with at most 24 fractional digits.
MAX_AMOUNT_WHOLE_DIGITS = 24
MAX_AMOUNT_FRACTION_DIGITS = 24


def amount_within_bounds(amount: Decimal) -> bool:
    """True when a finite amount fits the accepted whole and fractional digit counts."""
    if not amount.is_finite():
        return False
    if amount.is_zero():
        return True
    return (
        amount.adjusted() < MAX_AMOUNT_WHOLE_DIGITS
        and -amount.as_tuple().exponent <= MAX_AMOUNT_FRACTION_DIGITS
    )


def compute_converted_amount(amount: Decimal, rate: float) -> Decimal:
    """
    Multiply amount by rate and round to 4 fractional digits, half-up.

    The rate goes through str() so 1.8 stays Decimal("1.8") instead of
    picking up binary float noise. The arithmetic runs in a local context
    wide enough to hold the exact product, so nothing is rounded before
    the final quantize.
    """
    rate_value = Decimal(str(rate))

    with localcontext() as ctx:
        exact_digits = len(amount.as_tuple().digits) + len(rate_value.as_tuple().digits)
        whole_digits = max(amount.adjusted() + rate_value.adjusted() + 2, 1)
        ctx.prec = max(exact_digits, whole_digits + CONVERTED_AMOUNT_PLACES, ctx.prec) + 1
        return (amount * rate_value).quantize(
            CONVERTED_AMOUNT_QUANTUM, rounding=ROUND_HALF_UP
        )


@dataclass(frozen=True)
class ConversionRecord:

    transaction_id: UUID
    original_amount: Decimal
    from_currency: str
    to_currency: str
    rate: float | None
    converted_amount: Decimal
    date_time: datetime


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a larger result set plus its paging metadata."""

    content: List[T] = field(default_factory=list)
    number: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    def map(self, func: Callable[[T], R]) -> "Page[R]":
        return replace(self, content=[func(item) for item in self.content])

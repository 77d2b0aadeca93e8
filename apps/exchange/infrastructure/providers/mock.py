"""
Mock provider for testing and local development.
Returns scripted quotes or derives them from a fixed USD-based table.
"""

import logging
from typing import Dict, List, Optional, Tuple

from apps.exchange.domain.exceptions import ConversionError
from apps.exchange.domain.interfaces import BaseExchangeRateProvider

logger = logging.getLogger(__name__)


class MockProvider(BaseExchangeRateProvider):
    """
    In-memory provider that never touches the network.
    Useful for:
    - Testing without external API calls
    - Scripting provider failures (pass error=...)
    - Development without API keys
    """

    # Base rates relative to USD (approximate real-world values)
    BASE_RATES = {
        "USD": 1.0,
        "EUR": 0.85,
        "GBP": 0.73,
        "CHF": 0.88,
        "BGN": 1.80,
    }

    def __init__(
        self,
        quotes: Optional[Dict[str, float]] = None,
        error: Optional[ConversionError] = None,
    ):
        self.quotes = quotes
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    def get_rate(self, source_currency: str, target_currency: str) -> float | None:
        """
        Return the scripted quote for FROMTO, or a cross rate from BASE_RATES.

        Unknown pairs yield None, the same way a real provider omits them.
        """
        self.calls.append((source_currency, target_currency))

        if self.error is not None:
            raise self.error

        if self.quotes is not None:
            return self.quotes.get(f"{source_currency}{target_currency}")

        source_rate = self.BASE_RATES.get(source_currency)
        target_rate = self.BASE_RATES.get(target_currency)

        if source_rate is None or target_rate is None:
            logger.warning("MockProvider: Unsupported currency pair %s/%s", source_currency, target_currency)
            return None

        # Round to 6 decimal places
        return round(target_rate / source_rate, 6)

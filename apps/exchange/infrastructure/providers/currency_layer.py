import logging
import math

import requests

from apps.exchange.domain.exceptions import ProviderError, TransportError
from apps.exchange.domain.interfaces import BaseExchangeRateProvider

logger = logging.getLogger(__name__)


class CurrencyLayerProvider(BaseExchangeRateProvider):
    """
    CurrencyLayer API provider.
    Uses the /live endpoint to fetch the current rate for one currency pair.
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def get_rate(self, source_currency: str, target_currency: str) -> float | None:
        """
        Fetch the live exchange rate from CurrencyLayer.

        Args:
            source_currency: Base currency code (e.g. USD)
            target_currency: Target currency code (e.g. EUR)

        Returns:
            Exchange rate as float, or None if the pair is missing from the quotes

        Raises:
            ProviderError: the API answered with success=false
            TransportError: the call failed, returned non-2xx, or an unreadable body
        """
        logger.info("Fetching exchange rate from %s to %s", source_currency, target_currency)

        # Format: http://api.currencylayer.com/live?access_key=KEY&source=USD&currencies=EUR&format=1
        url = f"{self.base_url}/live"
        params = {
            "access_key": self.api_key,
            "source": source_currency,
            "currencies": target_currency,
            "format": 1,
        }

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Error calling CurrencyLayer API: %s", e)
            raise TransportError(f"Unsuccessful rate retrieval: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error("Failed to fetch exchange rate, status: %s", response.status_code)
            raise TransportError(
                f"Unsuccessful rate retrieval! Status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Invalid response body from CurrencyLayer: %s", e)
            raise TransportError(
                "Unsuccessful rate retrieval! Empty or malformed response body",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise TransportError(
                "Unsuccessful rate retrieval! Unexpected response shape",
                status_code=response.status_code,
            )

        if not data.get("success"):
            error = data.get("error") or {}
            if not isinstance(error, dict):
                raise TransportError(
                    "Unsuccessful rate retrieval! Unexpected error shape",
                    status_code=response.status_code,
                )
            logger.error(
                "CurrencyLayer API error: code=%s, info=%s",
                error.get("code"),
                error.get("info"),
            )
            raise ProviderError(error.get("code"), error.get("info"))

        # Response format: {"success": true, "source": "USD", "quotes": {"USDEUR": 0.85}}
        quotes = data.get("quotes") or {}
        if not isinstance(quotes, dict):
            raise TransportError(
                "Unsuccessful rate retrieval! Unexpected quotes shape",
                status_code=response.status_code,
            )

        rate = quotes.get(f"{source_currency}{target_currency}")
        logger.debug("Exchange rate obtained: %s", rate)
        if rate is None:
            return None
        return _parse_rate(rate, response.status_code)


def _parse_rate(value, status_code: int) -> float:
    if isinstance(value, bool):
        raise TransportError("Unsuccessful rate retrieval! Non-numeric quote", status_code=status_code)
    try:
        rate = float(value)
    except (TypeError, ValueError) as e:
        raise TransportError(
            "Unsuccessful rate retrieval! Non-numeric quote", status_code=status_code
        ) from e
    if not math.isfinite(rate):
        raise TransportError("Unsuccessful rate retrieval! Non-finite quote", status_code=status_code)
    return rate

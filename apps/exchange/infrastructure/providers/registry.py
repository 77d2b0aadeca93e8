"""
Provider Registry - Maps ProviderName to adapter factories.
The EXCHANGE_RATE_PROVIDER setting picks which one the services use.
"""

import logging
from typing import Callable

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models

from apps.exchange.domain.interfaces import BaseExchangeRateProvider
from apps.exchange.infrastructure.providers.currency_layer import CurrencyLayerProvider
from apps.exchange.infrastructure.providers.mock import MockProvider

logger = logging.getLogger(__name__)


class ProviderName(models.TextChoices):
    """
    Enum with available providers.
    To add a new provider:
    1. Add an entry here
    2. Implement the BaseExchangeRateProvider interface
    3. Register a factory in PROVIDER_REGISTRY
    """

    CURRENCY_LAYER = "currency_layer", "CurrencyLayer"
    MOCK = "mock", "Mock"


def _build_currency_layer() -> CurrencyLayerProvider:
    return CurrencyLayerProvider(
        base_url=settings.CURRENCY_API_URL,
        api_key=settings.CURRENCY_API_KEY,
        timeout=settings.CURRENCY_API_TIMEOUT,
    )


# Registry: Maps ProviderName to a factory building a configured adapter
PROVIDER_REGISTRY: dict[str, Callable[[], BaseExchangeRateProvider]] = {
    ProviderName.CURRENCY_LAYER: _build_currency_layer,
    ProviderName.MOCK: MockProvider,
}


def get_provider_instance(provider_name: str) -> BaseExchangeRateProvider | None:
    """
    Get an instance of a provider by its name.

    Args:
        provider_name: The provider name from ProviderName enum

    Returns:
        Instance of the provider adapter, or None if not found
    """
    factory = PROVIDER_REGISTRY.get(provider_name)

    if factory is None:
        logger.warning("Provider '%s' not found in registry", provider_name)
        return None

    return factory()


def get_configured_provider() -> BaseExchangeRateProvider:
    """Get the provider named by settings.EXCHANGE_RATE_PROVIDER."""
    provider_name = settings.EXCHANGE_RATE_PROVIDER
    provider = get_provider_instance(provider_name)

    if provider is None:
        raise ImproperlyConfigured(
            f"EXCHANGE_RATE_PROVIDER '{provider_name}' is not registered. "
            f"Choose one of: {', '.join(ProviderName.values)}"
        )

    return provider

import pytest

from apps.exchange.domain.exceptions import ProviderError
from apps.exchange.infrastructure.providers.mock import MockProvider


class TestMockProvider:
    """Tests for the in-memory MockProvider."""

    def test_cross_rate_from_base_rates(self):
        """
        Test that unscripted pairs are derived from BASE_RATES.
        """
        provider = MockProvider()

        rate = provider.get_rate("USD", "EUR")

        assert rate == 0.85

    def test_cross_rate_between_non_usd_currencies(self):
        provider = MockProvider()

        rate = provider.get_rate("EUR", "GBP")

        assert rate == round(0.73 / 0.85, 6)

    def test_unsupported_pair_returns_none(self):
        """
        Test that an unknown currency yields None like a missing quote.
        """
        provider = MockProvider()

        assert provider.get_rate("USD", "XXX") is None

    def test_scripted_quotes(self):
        """
        Test that scripted quotes take precedence and are keyed FROMTO.
        """
        provider = MockProvider(quotes={"USDBGN": 1.80})

        assert provider.get_rate("USD", "BGN") == 1.80
        assert provider.get_rate("USD", "EUR") is None

    def test_scripted_error(self):
        """
        Test that a scripted error is raised on every call.
        """
        provider = MockProvider(error=ProviderError(202, "Invalid target currency"))

        with pytest.raises(ProviderError):
            provider.get_rate("USD", "ZZZ")

    def test_records_calls(self):
        provider = MockProvider()

        provider.get_rate("USD", "EUR")
        provider.get_rate("GBP", "CHF")

        assert provider.calls == [("USD", "EUR"), ("GBP", "CHF")]

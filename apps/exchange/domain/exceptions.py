"""
Domain exceptions for the conversion workflow.
The API layer maps each of these to a status code and an error code.
"""


class ConversionError(Exception):
    """Base class for every failure raised by the exchange domain."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidInputError(ConversionError):
    """A caller-supplied value violates a precondition."""


class InvalidAmountError(InvalidInputError):
    """Amount to convert is not a positive, finite number."""


class FutureDateError(InvalidInputError):
    """A by-date lookup asked for a day after today."""


class ProviderError(ConversionError):
    """The rate provider answered but reported a failure of its own."""

    def __init__(self, code: int | None, info: str | None):
        super().__init__(f"CurrencyLayer API error {code}: {info}")
        self.code = code
        self.info = info


class TransportError(ConversionError):
    """The rate provider could not be reached or sent an unusable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingRateError(ConversionError):
    """The provider succeeded but did not quote the requested pair."""

    def __init__(self, source_currency: str, target_currency: str):
        super().__init__(
            f"No exchange rate quoted for {source_currency}/{target_currency}"
        )
        self.source_currency = source_currency
        self.target_currency = target_currency


class NotFoundError(ConversionError):
    pass


class PersistenceError(ConversionError):
    pass

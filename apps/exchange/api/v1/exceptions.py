"""
DRF exception handler.
Turns domain failures into {"error": <code>, "detail": <message>} responses.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.exchange.domain.exceptions import (
    ConversionError,
    FutureDateError,
    InvalidAmountError,
    InvalidInputError,
    MissingRateError,
    NotFoundError,
    PersistenceError,
    ProviderError,
    TransportError,
)

logger = logging.getLogger(__name__)

# CurrencyLayer codes that mean the caller sent a bad currency
PROVIDER_CLIENT_ERRORS = {
    201: ("invalid_source_currency", "Invalid source currency!"),
    202: ("invalid_target_currency", "Invalid target currency!"),
}


def _error_response(error: str, detail, status_code: int) -> Response:
    return Response({"error": error, "detail": detail}, status=status_code)


def _provider_error_response(exc: ProviderError) -> Response:
    if exc.code in PROVIDER_CLIENT_ERRORS:
        error, detail = PROVIDER_CLIENT_ERRORS[exc.code]
        return _error_response(error, detail, status.HTTP_400_BAD_REQUEST)
    return _error_response(
        "provider_error",
        f"CurrencyLayer API error {exc.code}: {exc.info}",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _domain_error_response(exc: ConversionError) -> Response:
    if isinstance(exc, ProviderError):
        return _provider_error_response(exc)
    if isinstance(exc, InvalidAmountError):
        return _error_response("invalid_amount", f"Invalid input: {exc.message}", status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, FutureDateError):
        return _error_response("future_date", f"Invalid input: {exc.message}", status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, InvalidInputError):
        return _error_response("invalid_input", f"Invalid input: {exc.message}", status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, NotFoundError):
        return _error_response("not_found", exc.message, status.HTTP_404_NOT_FOUND)
    if isinstance(exc, MissingRateError):
        return _error_response("missing_rate", exc.message, status.HTTP_502_BAD_GATEWAY)
    if isinstance(exc, TransportError):
        return _error_response("provider_unavailable", exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if isinstance(exc, PersistenceError):
        return _error_response("persistence_error", exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _error_response("internal_error", exc.message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def exchange_exception_handler(exc, context):
    """REST_FRAMEWORK["EXCEPTION_HANDLER"] entry point."""
    if isinstance(exc, ConversionError):
        return _domain_error_response(exc)

    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("unhandled exception", exc_info=exc)
        return _error_response(
            "internal_error",
            "An unexpected error occurred.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        error = "invalid_input"
    elif isinstance(exc, NotFound):
        error = "not_found"
    else:
        error = getattr(exc, "default_code", "error")

    detail = response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data
    response.data = {"error": error, "detail": detail}
    return response

import pytest
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError

from apps.exchange.api.v1.exceptions import exchange_exception_handler
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


@pytest.mark.parametrize("exc,status_code,error", [
    (InvalidInputError("fromCurrency must be present"), status.HTTP_400_BAD_REQUEST, "invalid_input"),
    (InvalidAmountError("Amount must be greater than 0"), status.HTTP_400_BAD_REQUEST, "invalid_amount"),
    (FutureDateError("Transaction date cannot be in the future"), status.HTTP_400_BAD_REQUEST, "future_date"),
    (ProviderError(201, "Invalid source currency"), status.HTTP_400_BAD_REQUEST, "invalid_source_currency"),
    (ProviderError(202, "Invalid target currency"), status.HTTP_400_BAD_REQUEST, "invalid_target_currency"),
    (ProviderError(104, "Usage limit reached"), status.HTTP_500_INTERNAL_SERVER_ERROR, "provider_error"),
    (TransportError("Status: 503", status_code=503), status.HTTP_500_INTERNAL_SERVER_ERROR, "provider_unavailable"),
    (MissingRateError("USD", "BGN"), status.HTTP_502_BAD_GATEWAY, "missing_rate"),
    (NotFoundError("Transaction not found for the given ID"), status.HTTP_404_NOT_FOUND, "not_found"),
    (PersistenceError("Could not save"), status.HTTP_500_INTERNAL_SERVER_ERROR, "persistence_error"),
    (ConversionError("boom"), status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error"),
])
def test_domain_errors_mapping(exc, status_code, error):
    response = exchange_exception_handler(exc, {})

    assert response.status_code == status_code
    assert response.data["error"] == error


def test_provider_error_detail_includes_code_and_info():
    response = exchange_exception_handler(ProviderError(104, "Usage limit reached"), {})

    assert response.data["detail"] == "CurrencyLayer API error 104: Usage limit reached"


def test_invalid_input_detail_prefix():
    response = exchange_exception_handler(InvalidInputError("toCurrency must be present"), {})

    assert response.data["detail"] == "Invalid input: toCurrency must be present"


def test_validation_error_reshaped():
    response = exchange_exception_handler(ValidationError({"amount": ["A valid number is required."]}), {})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {
        "error": "invalid_input",
        "detail": {"amount": ["A valid number is required."]},
    }


def test_drf_not_found_reshaped():
    response = exchange_exception_handler(NotFound(), {})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["error"] == "not_found"


def test_unexpected_exception_is_internal_error():
    response = exchange_exception_handler(RuntimeError("kaboom"), {})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data == {"error": "internal_error", "detail": "An unexpected error occurred."}

"""
ViewSets for the exchange API v1.
Rate lookup and conversion, plus read-only lookups of stored conversions.
"""

import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from apps.exchange.api.v1.serializers import (
    ConversionByDateQuerySerializer,
    ConversionByIdQuerySerializer,
    ConversionPageSerializer,
    ConversionSummarySerializer,
    ConvertQuerySerializer,
    ExchangeRateQuerySerializer,
)
from apps.exchange.application.dto import ConversionSummaryDTO
from apps.exchange.domain.exceptions import MissingRateError
from apps.exchange.domain.services import ConversionQueryService, ConversionService

logger = logging.getLogger(__name__)


def _validated_query(serializer_class, request) -> dict:
    serializer = serializer_class(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


@extend_schema(tags=['Rates'])
class ExchangeViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("fromCurrency", OpenApiTypes.STR, required=True, description="Source currency code (e.g. USD)"),
            OpenApiParameter("toCurrency", OpenApiTypes.STR, required=True, description="Target currency code (e.g. EUR)"),
        ],
        responses={
            200: OpenApiResponse(OpenApiTypes.DOUBLE, description="Exchange rate retrieved successfully"),
            400: OpenApiResponse(description="Invalid request parameters"),
            500: OpenApiResponse(description="Internal server error"),
        },
        description="Retrieve the live exchange rate between two currencies using the CurrencyLayer API."
    )
    def exchange_rate(self, request):
        params = _validated_query(ExchangeRateQuerySerializer, request)
        logger.info("API call: exchange_rate from %s to %s", params["fromCurrency"], params["toCurrency"])

        rate = ConversionService().get_exchange_rate(params["fromCurrency"], params["toCurrency"])
        if rate is None:
            raise MissingRateError(params["fromCurrency"].upper(), params["toCurrency"].upper())

        return Response(rate)

    @extend_schema(
        parameters=[
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Amount to convert"),
            OpenApiParameter("fromCurrency", OpenApiTypes.STR, required=True, description="Source currency code"),
            OpenApiParameter("toCurrency", OpenApiTypes.STR, required=True, description="Target currency code"),
        ],
        responses={
            200: ConversionSummarySerializer,
            400: OpenApiResponse(description="Invalid input (e.g. negative amount)"),
            500: OpenApiResponse(description="CurrencyLayer API error or internal error"),
        },
        description="Convert an amount from one currency to another and return it with the transaction ID."
    )
    def convert(self, request):
        params = _validated_query(ConvertQuerySerializer, request)
        logger.info(
            "API call: convert amount=%s from %s to %s",
            params["amount"], params["fromCurrency"], params["toCurrency"],
        )

        record = ConversionService().convert(params["amount"], params["fromCurrency"], params["toCurrency"])

        serializer = ConversionSummarySerializer(ConversionSummaryDTO.from_record(record))
        return Response(serializer.data)


@extend_schema(tags=['Conversions'])
class ConversionViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("transactionId", OpenApiTypes.UUID, required=True, description="Transaction ID"),
        ],
        responses={
            200: ConversionSummarySerializer,
            400: OpenApiResponse(description="Invalid transaction ID"),
            404: OpenApiResponse(description="Conversion not found"),
        },
        description="Return a single currency conversion by its unique transaction ID."
    )
    @action(detail=False, methods=['get'], url_path='by-id')
    def by_id(self, request):
        params = _validated_query(ConversionByIdQuerySerializer, request)
        logger.info("API call: conversion by id=%s", params["transactionId"])

        result = ConversionQueryService().get_by_id(params["transactionId"])
        return Response(ConversionSummarySerializer(result).data)

    @extend_schema(
        parameters=[
            OpenApiParameter("transactionDateTime", OpenApiTypes.DATE, required=True, description="Transaction date (YYYY-MM-DD)"),
            OpenApiParameter("page", OpenApiTypes.INT, description="Page number, zero-based (default 0)"),
            OpenApiParameter("size", OpenApiTypes.INT, description="Page size (default 3)"),
        ],
        responses={
            200: ConversionPageSerializer,
            400: OpenApiResponse(description="Invalid date"),
            404: OpenApiResponse(description="No conversions found"),
        },
        description="Return a paginated list of conversions made on the given date, newest first."
    )
    @action(detail=False, methods=['get'], url_path='by-date')
    def by_date(self, request):
        params = _validated_query(ConversionByDateQuerySerializer, request)
        logger.info(
            "API call: conversions by date=%s, page=%s, size=%s",
            params["transactionDateTime"], params["page"], params["size"],
        )

        result = ConversionQueryService().get_by_date(
            params["transactionDateTime"],
            params["page"],
            params["size"],
        )
        return Response(ConversionPageSerializer(result).data)

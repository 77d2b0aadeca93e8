# ORM models live in the infrastructure layer; expose them here so Django loads them.
from apps.exchange.infrastructure.persistence.models import ConversionTransaction  # noqa: F401

"""Typed client for the Backstage catalog API."""

from .catalog import CatalogService
from .client import Client
from .config import ClientConfig, load_config
from .errors import BackstageError, InvalidArgumentError, RequestConstructionError
from .models import (
    ORDER_ASCENDING,
    ORDER_DESCENDING,
    ListEntityOptions,
    ListEntityOrder,
)

__all__ = [
    "BackstageError",
    "CatalogService",
    "Client",
    "ClientConfig",
    "InvalidArgumentError",
    "ListEntityOptions",
    "ListEntityOrder",
    "ORDER_ASCENDING",
    "ORDER_DESCENDING",
    "RequestConstructionError",
    "load_config",
]

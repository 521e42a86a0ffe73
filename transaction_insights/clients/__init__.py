"""Client modules for the local store and the remote dataset."""

from transaction_insights.clients.product_source_client import (
    ProductSourceClient,
    ProductSourceError,
)
from transaction_insights.clients.sqlite_client import SqliteClient

__all__ = [
    "ProductSourceClient",
    "ProductSourceError",
    "SqliteClient",
]

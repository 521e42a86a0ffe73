"""Seeding and query services."""

from transaction_insights.services.schema import (
    CREATE_TABLE_SQL,
    DatabaseInitializationError,
    initialize_database,
)
from transaction_insights.services.seed_service import ProductSeeder, SourceProduct
from transaction_insights.services.transaction_service import (
    PRICE_BUCKETS,
    TransactionService,
    normalize_month,
    parse_price_ceiling,
)

__all__ = [
    "CREATE_TABLE_SQL",
    "DatabaseInitializationError",
    "PRICE_BUCKETS",
    "ProductSeeder",
    "SourceProduct",
    "TransactionService",
    "initialize_database",
    "normalize_month",
    "parse_price_ceiling",
]

"""Data models module."""

from transaction_insights.models.analytics import (
    CategoryCount,
    CombinedData,
    PriceBucket,
    PriceRangeCount,
    Statistics,
)
from transaction_insights.models.product_record import ProductRecord
from transaction_insights.models.seed_result import SeedResult

__all__ = [
    "CategoryCount",
    "CombinedData",
    "PriceBucket",
    "PriceRangeCount",
    "ProductRecord",
    "SeedResult",
    "Statistics",
]

"""Aggregate result models for the monthly analytics queries."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Statistics:
    """Monthly sale totals."""

    total_sale_amount: float
    total_sold_items: int
    total_not_sold_items: int


@dataclass(frozen=True)
class PriceBucket:
    """One histogram interval; `upper` of None means unbounded."""

    lower: float
    upper: Optional[float]

    @property
    def label(self) -> str:
        upper = "Infinity" if self.upper is None else f"{self.upper:g}"
        return f"{self.lower:g} - {upper}"


@dataclass(frozen=True)
class PriceRangeCount:
    """Number of records in one price bucket."""

    price_range: str
    count: int


@dataclass(frozen=True)
class CategoryCount:
    """Number of records carrying one category label."""

    category: str
    count: int


@dataclass(frozen=True)
class CombinedData:
    """Statistics, bar chart and pie chart for the same month."""

    statistics: Statistics
    bar_chart_data: List[PriceRangeCount]
    pie_chart_data: List[CategoryCount]

"""Read-side queries over the products table.

Provides:
- Paginated listing with a free-text (and numeric price ceiling) search
- Monthly statistics, price histogram and category breakdown
- A combined view composing the three monthly queries

Months are matched on strftime('%m', dateOfSale), independent of year.
Every value coming from a request is bound as a query parameter.
"""

import logging
import math
from typing import List, Optional

from ..clients import SqliteClient
from ..models import (
    CategoryCount,
    CombinedData,
    PriceBucket,
    PriceRangeCount,
    ProductRecord,
    Statistics,
)
from .schema import PRODUCT_COLUMNS

logger = logging.getLogger(__name__)

MONTH_FILTER = "strftime('%m', dateOfSale) = ?"

PRICE_BUCKETS: List[PriceBucket] = [
    PriceBucket(0, 100),
    PriceBucket(101, 200),
    PriceBucket(201, 300),
    PriceBucket(301, 400),
    PriceBucket(401, 500),
    PriceBucket(501, 600),
    PriceBucket(601, 700),
    PriceBucket(701, 800),
    PriceBucket(801, 900),
    PriceBucket(901, None),
]

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


def normalize_month(month: Optional[str]) -> str:
    """Zero-pad a one-digit month key; anything else is returned stripped."""
    if month is None:
        return ""
    month = month.strip()
    if len(month) == 1 and month.isdigit():
        return f"0{month}"
    return month


def parse_price_ceiling(search: str) -> Optional[float]:
    """Return the search term as a finite number, or None if it isn't one."""
    try:
        value = float(search)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class TransactionService:
    """Listing and monthly analytics over the seeded products table."""

    def __init__(self, sqlite_client: SqliteClient):
        self._sqlite_client = sqlite_client

    def count_records(self, month: Optional[str] = None) -> int:
        """Count all records, or only those sold in `month`."""
        if month is None:
            rows = self._sqlite_client.execute_query("SELECT COUNT(*) FROM products")
        else:
            rows = self._sqlite_client.execute_query(
                f"SELECT COUNT(*) FROM products WHERE {MONTH_FILTER}",
                (normalize_month(month),),
            )
        return rows[0][0]

    def list_transactions(
        self,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        search: str = "",
    ) -> List[ProductRecord]:
        """Return one page of records, optionally filtered by `search`.

        A non-empty search term matches title or description as a
        case-insensitive substring. If the term is also a number N, records
        priced between 0 and N inclusive match too.

        Args:
            page: 1-based page number.
            per_page: Page size.
            search: Free-text term; empty means no filter.

        Returns:
            Up to `per_page` records in storage (id) order.

        Raises:
            ValueError: If page or per_page is below 1.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {per_page}")

        query = f"SELECT {PRODUCT_COLUMNS} FROM products"
        params: list = []

        if search:
            pattern = f"%{_escape_like(search)}%"
            conditions = [
                "title LIKE ? ESCAPE '\\'",
                "description LIKE ? ESCAPE '\\'",
            ]
            params.extend([pattern, pattern])

            # TODO: confirm with product whether a numeric term should also act as a price ceiling
            ceiling = parse_price_ceiling(search)
            if ceiling is not None:
                conditions.append("price BETWEEN 0 AND ?")
                params.append(ceiling)

            query += " WHERE " + " OR ".join(conditions)

        query += " ORDER BY id LIMIT ? OFFSET ?"
        params.extend([per_page, (page - 1) * per_page])

        rows = self._sqlite_client.execute_query(query, params)
        logger.debug(f"Listed {len(rows)} transactions (page={page}, per_page={per_page}, search={search!r})")
        return [ProductRecord.from_row(row) for row in rows]

    def get_statistics(self, month: str) -> Statistics:
        """Total sale amount plus sold/not-sold counts for `month`.

        The amount sums every matching record regardless of sold status.
        A month without records yields zeros.
        """
        rows = self._sqlite_client.execute_query(
            f"""SELECT COALESCE(SUM(price), 0),
                       COALESCE(SUM(CASE WHEN sold = 1 THEN 1 ELSE 0 END), 0),
                       COALESCE(SUM(CASE WHEN sold = 0 THEN 1 ELSE 0 END), 0)
                FROM products WHERE {MONTH_FILTER}""",
            (normalize_month(month),),
        )
        total_sale_amount, total_sold, total_not_sold = rows[0]
        return Statistics(
            total_sale_amount=float(total_sale_amount),
            total_sold_items=int(total_sold),
            total_not_sold_items=int(total_not_sold),
        )

    def get_bar_chart(self, month: str) -> List[PriceRangeCount]:
        """Record count per fixed price bucket for `month`, always ten entries.

        Each bucket covers (previous upper, upper], the first one [0, 100]
        and the last one has no upper bound.
        """
        month = normalize_month(month)
        bar_chart: List[PriceRangeCount] = []
        previous: Optional[PriceBucket] = None

        for bucket in PRICE_BUCKETS:
            conditions = [MONTH_FILTER]
            params: list = [month]

            if previous is None:
                conditions.append("price >= ?")
                params.append(bucket.lower)
            else:
                conditions.append("price > ?")
                params.append(previous.upper)

            if bucket.upper is not None:
                conditions.append("price <= ?")
                params.append(bucket.upper)

            rows = self._sqlite_client.execute_query(
                "SELECT COUNT(*) FROM products WHERE " + " AND ".join(conditions),
                params,
            )
            bar_chart.append(PriceRangeCount(price_range=bucket.label, count=rows[0][0]))
            previous = bucket

        return bar_chart

    def get_pie_chart(self, month: str) -> List[CategoryCount]:
        """Record count per distinct category for `month`."""
        rows = self._sqlite_client.execute_query(
            f"""SELECT category, COUNT(*) FROM products
                WHERE {MONTH_FILTER}
                GROUP BY category ORDER BY category""",
            (normalize_month(month),),
        )
        return [CategoryCount(category=row[0], count=row[1]) for row in rows]

    def get_combined_data(self, month: str) -> CombinedData:
        """Statistics, bar chart and pie chart for the same month."""
        return CombinedData(
            statistics=self.get_statistics(month),
            bar_chart_data=self.get_bar_chart(month),
            pie_chart_data=self.get_pie_chart(month),
        )

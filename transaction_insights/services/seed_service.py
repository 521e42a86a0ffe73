"""Seeds the products table from the remote transaction dataset.

Seeding is idempotent:
- Records whose id is already stored are skipped
- Duplicate ids inside one payload are inserted once
- Inserts use INSERT OR IGNORE, so a concurrent writer cannot cause duplicates
"""

import logging
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field, ValidationError

from ..clients import ProductSourceClient, SqliteClient
from ..models import ProductRecord, SeedResult

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

INSERT_PRODUCT_SQL = """
INSERT OR IGNORE INTO products (id, title, price, description, category, image, sold, dateOfSale)
VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""


class SourceProduct(BaseModel):
    """One product object as delivered by the remote dataset."""

    id: int = Field(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)
    title: str
    price: float
    description: str = ""
    category: str
    image: str = ""
    sold: bool
    dateOfSale: str

    def to_record(self) -> ProductRecord:
        return ProductRecord(**self.model_dump())


class ProductSeeder:
    """Inserts source products that are not yet present in the store."""

    def __init__(self, sqlite_client: SqliteClient, source_client: ProductSourceClient):
        """Initialize the seeder.

        Args:
            sqlite_client: Client for a store whose products table exists.
            source_client: Client for the remote dataset.
        """
        self._sqlite_client = sqlite_client
        self._source_client = source_client

    def _existing_ids(self) -> Set[int]:
        rows = self._sqlite_client.execute_query("SELECT id FROM products")
        return {row[0] for row in rows}

    def seed(self, products: Optional[List[Dict[str, Any]]] = None) -> SeedResult:
        """Fetch the dataset and insert every product not already stored.

        Args:
            products: Already-fetched source objects. Fetched from the
                source client when omitted.

        Returns:
            SeedResult with fetched/inserted/skipped/invalid counts.

        Raises:
            ProductSourceError: If the dataset cannot be fetched.
        """
        if products is None:
            products = self._source_client.fetch_products()

        existing_ids = self._existing_ids()
        new_rows = []
        skipped = 0
        invalid = 0

        for index, raw in enumerate(products):
            try:
                product = SourceProduct.model_validate(raw)
            except ValidationError as e:
                invalid += 1
                logger.warning(
                    f"Skipping invalid product at position {index}: "
                    f"{e.error_count()} validation error(s)"
                )
                continue

            if product.id in existing_ids:
                skipped += 1
                continue

            existing_ids.add(product.id)
            new_rows.append(product.to_record().as_row())

        inserted = 0
        if new_rows:
            inserted = self._sqlite_client.execute_many(INSERT_PRODUCT_SQL, new_rows)

        result = SeedResult(
            fetched=len(products),
            inserted=inserted,
            skipped=skipped,
            invalid=invalid,
        )
        logger.info(
            f"Product data seeded: {result.inserted} inserted, "
            f"{result.skipped} already present, {result.invalid} invalid"
        )
        return result


if __name__ == "__main__":
    from ..config import get_config
    from .schema import initialize_database

    config = get_config()
    logging.basicConfig(
        level=getattr(logging, config.logging.level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    with initialize_database(config.database.path) as client:
        seeder = ProductSeeder(
            client,
            ProductSourceClient(config.seed.source_url, config.seed.timeout_seconds),
        )
        print(seeder.seed())

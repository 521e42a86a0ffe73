"""Product record model for database representation."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ProductRecord:
    """One product transaction row of the products table."""

    id: int  # External identifier from the seed source
    title: str
    price: float
    description: str
    category: str
    image: str
    sold: bool
    dateOfSale: str  # ISO-8601 timestamp text, as delivered by the source

    @classmethod
    def from_row(cls, row: Tuple) -> "ProductRecord":
        """Build a record from a `SELECT id, title, ... dateOfSale` row."""
        return cls(
            id=row[0],
            title=row[1],
            price=row[2],
            description=row[3],
            category=row[4],
            image=row[5],
            sold=bool(row[6]),
            dateOfSale=row[7],
        )

    def as_row(self) -> Tuple:
        """Column values in table order, ready for parameter binding."""
        return (
            self.id,
            self.title,
            self.price,
            self.description,
            self.category,
            self.image,
            self.sold,
            self.dateOfSale,
        )

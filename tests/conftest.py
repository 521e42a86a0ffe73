"""Shared fixtures: a temporary database file and a small product dataset.

Sample dataset by month (strftime('%m', dateOfSale)):
- 03: ids 1, 2, 3, 6, 10, 11 (2 of them from 2022)
- 07: ids 4, 5, 12
- 11: ids 7, 8, 9
"""

import copy
import os
import tempfile

import pytest

from transaction_insights.config import (
    ApiConfig,
    AppConfig,
    DatabaseConfig,
    LoggingConfig,
    SeedConfig,
    ServerConfig,
)

SAMPLE_PRODUCTS = [
    {
        "id": 1,
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 22.3,
        "description": "Slim-fitting style, contrast raglan long sleeve",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "sold": False,
        "dateOfSale": "2021-03-15T10:00:00+05:30",
    },
    {
        "id": 2,
        "title": "Mens Cotton Jacket",
        "price": 55.99,
        "description": "great outerwear jackets for Spring/Autumn/Winter",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-03-10T12:00:00+05:30",
    },
    {
        "id": 3,
        "title": "John Hardy Women's Legends Naga Bracelet",
        "price": 695,
        "description": "From our Legends Collection, the Naga was inspired by the mythical water dragon",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_.jpg",
        "sold": True,
        "dateOfSale": "2021-03-20T09:00:00+05:30",
    },
    {
        "id": 4,
        "title": "Solid Gold Petite Micropave",
        "price": 168,
        "description": "Satisfaction Guaranteed. Return or exchange any order within 30 days.",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_.jpg",
        "sold": False,
        "dateOfSale": "2021-07-12T14:00:00+05:30",
    },
    {
        "id": 5,
        "title": "WD 2TB Elements Portable External Hard Drive",
        "price": 64,
        "description": "USB 3.0 and USB 2.0 compatibility, fast data transfers",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "sold": True,
        "dateOfSale": "2021-07-05T11:00:00+05:30",
    },
    {
        "id": 6,
        "title": "Samsung 49-Inch Gaming Monitor",
        "price": 999.99,
        "description": "49 INCH SUPER ULTRAWIDE 32:9 CURVED GAMING MONITOR",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/81Zt42ioCgL._AC_SX679_.jpg",
        "sold": False,
        "dateOfSale": "2021-03-08T16:00:00+05:30",
    },
    {
        "id": 7,
        "title": "Acer SB220Q 21.5 inches Full HD",
        "price": 599,
        "description": "Full HD widescreen IPS display and Radeon free Sync technology",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/81QpkIctqPL._AC_SX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-11-18T10:00:00+05:30",
    },
    {
        "id": 8,
        "title": "Rain Jacket Women Windbreaker",
        "price": 39.99,
        "description": "Lightweight perfet for trip or casual wear",
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/71HblAHs5xL._AC_UY879_-2.jpg",
        "sold": False,
        "dateOfSale": "2021-11-22T13:00:00+05:30",
    },
    {
        "id": 9,
        "title": "DANVOUY Womens T Shirt Casual Cotton Short",
        "price": 12.99,
        "description": "95%Cotton,5%Spandex, Features: Casual, Short Sleeve",
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/61pHAEJ4NML._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2021-11-14T15:00:00+05:30",
    },
    {
        "id": 10,
        "title": "SanDisk SSD PLUS 1TB Internal SSD",
        "price": 109,
        "description": "Easy upgrade for faster boot up, shutdown, application load",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61U7T1koQqL._AC_SX679_.jpg",
        "sold": False,
        "dateOfSale": "2021-03-25T08:00:00+05:30",
    },
    {
        "id": 11,
        "title": "White Gold Plated Princess",
        "price": 100.5,
        "description": "Classic Created Wedding Engagement Solitaire Diamond Promise Ring",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/71YAIFU48IL._AC_UL640_QL65_ML3_.jpg",
        "sold": True,
        "dateOfSale": "2021-03-17T12:00:00+05:30",
    },
    {
        "id": 12,
        "title": "Pierced Owl Rose Gold Plated Stainless Steel",
        "price": 10.99,
        "description": "Rose Gold Plated Double Flared Tunnel Plug Earrings",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/51UDEzMJVpL._AC_UL640_QL65_ML3_.jpg",
        "sold": False,
        "dateOfSale": "2021-07-19T12:00:00+05:30",
    },
]


class FakeSourceClient:
    """Stands in for ProductSourceClient; returns a fixed payload or raises."""

    def __init__(self, products=None, error=None):
        self.products = products if products is not None else []
        self.error = error
        self.calls = 0

    def fetch_products(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.products)


def make_config(db_path: str, seed_enabled: bool = True) -> AppConfig:
    """Build an AppConfig without touching YAML files or the environment."""
    return AppConfig(
        database=DatabaseConfig(path=db_path),
        seed=SeedConfig(
            enabled=seed_enabled,
            source_url="http://example.invalid/product_transaction.json",
            timeout_seconds=1,
        ),
        api=ApiConfig(title="Transaction Insights API (test)", cors_origins=["*"]),
        server=ServerConfig(host="127.0.0.1", port=3001),
        logging=LoggingConfig(level="WARNING"),
    )


@pytest.fixture
def temp_db_path():
    """Create a temporary database file for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    # Cleanup
    if os.path.exists(path):
        os.remove(path)


@pytest.fixture
def sample_products():
    """A fresh copy of the sample dataset."""
    return copy.deepcopy(SAMPLE_PRODUCTS)

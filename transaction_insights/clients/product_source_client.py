"""HTTP client for the remote product transaction dataset."""

import logging
from typing import Any, Dict, List

import requests

logger = logging.getLogger(__name__)


class ProductSourceError(Exception):
    """Custom exception for failures fetching the product dataset."""

    pass


class ProductSourceClient:
    """Fetches the JSON array of product objects the seeder inserts."""

    def __init__(self, source_url: str, timeout: float = 30):
        if not source_url:
            raise ValueError("source_url must not be empty")
        self.source_url = source_url
        self.timeout = timeout

    def fetch_products(self) -> List[Dict[str, Any]]:
        """
        Download the product dataset.

        Returns:
            The decoded JSON array, one dict per product.

        Raises:
            ProductSourceError: On network errors, non-2xx responses, or a
                body that is not a JSON array.
        """
        logger.info(f"Fetching product dataset from {self.source_url}")

        try:
            r = requests.get(self.source_url, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            raise ProductSourceError(
                f"Failed to fetch products from {self.source_url}: {e}"
            ) from e
        except ValueError as e:
            raise ProductSourceError(
                f"Product dataset at {self.source_url} is not valid JSON: {e}"
            ) from e

        if not isinstance(payload, list):
            raise ProductSourceError(
                f"Expected a JSON array from {self.source_url}, got {type(payload).__name__}"
            )

        logger.info(f"Fetched {len(payload)} products")
        return payload

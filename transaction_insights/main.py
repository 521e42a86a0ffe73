"""Run the Transaction Insights API with uvicorn.

    python -m transaction_insights.main
    uvicorn transaction_insights.main:app
"""

import logging
import sys

import uvicorn

from transaction_insights.api import create_app
from transaction_insights.config import get_config


def setup_logging(level: str) -> None:
    """Configure application-wide logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


config = get_config()
setup_logging(config.logging.level)
app = create_app(config)


def main() -> None:
    logging.getLogger(__name__).info(
        f"Server is running on http://{config.server.host}:{config.server.port}"
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()

"""API controllers."""

from transaction_insights.api.controller.transactions_controller import (
    get_transaction_service,
    router as transactions_router,
)

__all__ = ["get_transaction_service", "transactions_router"]

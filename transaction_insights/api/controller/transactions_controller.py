"""HTTP controller for transaction listing and monthly analytics."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from transaction_insights.models import CombinedData, ProductRecord, Statistics
from transaction_insights.services import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["transactions"])

# Keeps (page - 1) * perPage inside SQLite's 64-bit OFFSET
MAX_PAGINATION_VALUE = 2**31


class TransactionResponse(BaseModel):
    """One product record as returned by /transactions."""

    id: int
    title: str
    price: float
    description: str
    category: str
    image: str
    sold: bool
    dateOfSale: str

    @classmethod
    def from_record(cls, record: ProductRecord) -> "TransactionResponse":
        return cls(**vars(record))


class StatisticsResponse(BaseModel):
    """Monthly totals."""

    model_config = ConfigDict(populate_by_name=True)

    total_sale_amount: float = Field(alias="totalSaleAmount")
    total_sold_items: int = Field(alias="totalSoldItems")
    total_not_sold_items: int = Field(alias="totalNotSoldItems")

    @classmethod
    def from_statistics(cls, statistics: Statistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=statistics.total_sale_amount,
            total_sold_items=statistics.total_sold_items,
            total_not_sold_items=statistics.total_not_sold_items,
        )


class PriceRangeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price_range: str = Field(alias="priceRange")
    count: int


class CategoryResponse(BaseModel):
    category: str
    count: int


class CombinedDataResponse(BaseModel):
    """Statistics, bar chart and pie chart for one month."""

    model_config = ConfigDict(populate_by_name=True)

    statistics: StatisticsResponse
    bar_chart_data: List[PriceRangeResponse] = Field(alias="barChartData")
    pie_chart_data: List[CategoryResponse] = Field(alias="pieChartData")

    @classmethod
    def from_combined(cls, combined: CombinedData) -> "CombinedDataResponse":
        return cls(
            statistics=StatisticsResponse.from_statistics(combined.statistics),
            bar_chart_data=[
                PriceRangeResponse(price_range=item.price_range, count=item.count)
                for item in combined.bar_chart_data
            ],
            pie_chart_data=[
                CategoryResponse(category=item.category, count=item.count)
                for item in combined.pie_chart_data
            ],
        )


class ErrorResponse(BaseModel):
    error: str


def get_transaction_service(request: Request) -> TransactionService:
    """Resolve the service the application lifespan attached to app state."""
    return request.app.state.transaction_service


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/transactions",
    response_model=List[TransactionResponse],
    responses={500: {"model": ErrorResponse}},
)
def list_transactions(
    page: int = Query(default=1, ge=1, le=MAX_PAGINATION_VALUE),
    per_page: int = Query(default=10, ge=1, le=MAX_PAGINATION_VALUE, alias="perPage"),
    search: str = Query(default=""),
    service: TransactionService = Depends(get_transaction_service),
):
    """Paginated listing, filtered by title/description text or price ceiling."""
    try:
        records = service.list_transactions(page=page, per_page=per_page, search=search)
    except Exception as e:
        logger.exception(f"Error retrieving transactions: {e}")
        return _error("Failed to fetch transactions.")
    return [TransactionResponse.from_record(record) for record in records]


@router.get(
    "/statistics",
    response_model=StatisticsResponse,
    responses={500: {"model": ErrorResponse}},
)
def statistics(
    month: str = Query(default=""),
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        result = service.get_statistics(month)
    except Exception as e:
        logger.exception(f"Error retrieving statistics: {e}")
        return _error("Failed to fetch statistics.")
    return StatisticsResponse.from_statistics(result)


@router.get(
    "/bar-chart",
    response_model=List[PriceRangeResponse],
    responses={500: {"model": ErrorResponse}},
)
def bar_chart(
    month: str = Query(default=""),
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        buckets = service.get_bar_chart(month)
    except Exception as e:
        logger.exception(f"Error retrieving bar chart data: {e}")
        return _error("Failed to fetch bar chart data.")
    return [PriceRangeResponse(price_range=b.price_range, count=b.count) for b in buckets]


@router.get(
    "/pie-chart",
    response_model=List[CategoryResponse],
    responses={500: {"model": ErrorResponse}},
)
def pie_chart(
    month: str = Query(default=""),
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        categories = service.get_pie_chart(month)
    except Exception as e:
        logger.exception(f"Error retrieving pie chart data: {e}")
        return _error("Failed to fetch pie chart data.")
    return [CategoryResponse(category=c.category, count=c.count) for c in categories]


@router.get(
    "/combined-data",
    response_model=CombinedDataResponse,
    responses={500: {"model": ErrorResponse}},
)
def combined_data(
    month: str = Query(default=""),
    service: TransactionService = Depends(get_transaction_service),
):
    """Statistics, bar chart and pie chart for one month in a single response."""
    try:
        combined = service.get_combined_data(month)
    except Exception as e:
        logger.exception(f"Error combining data: {e}")
        return _error("Failed to combine data.")
    return CombinedDataResponse.from_combined(combined)

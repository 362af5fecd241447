from typing import Any

from fastapi import APIRouter, status

from boxoffice.api.deps import LedgerDep, SessionDep
from boxoffice.converters import order as order_converters
from boxoffice.exceptions.base import AppError
from boxoffice.exceptions.catalog_exceptions import (
    AddOnNotFoundError,
    RoomNotFoundError,
    ShowtimeNotFoundError,
)
from boxoffice.exceptions.purchase_exceptions import (
    InsufficientCapacityError,
    InvalidPurchaseError,
    PersistenceFailureError,
    ReservationTimeoutError,
    SoldOutError,
)
from boxoffice.schemas.order import OrderPublic
from boxoffice.schemas.purchase import PurchaseQuote, PurchaseRequest
from boxoffice.services import purchases as purchases_service

router = APIRouter(prefix="/purchases", tags=["purchases"])


def _error_response(*errors: type[AppError]) -> dict[int | str, dict[str, Any]]:
    # Errors sharing a status code are listed as separate examples of one response.
    responses: dict[int | str, dict[str, Any]] = {}
    for error in errors:
        response = responses.setdefault(
            error.status_code,
            {"description": "", "content": {"application/json": {"examples": {}}}},
        )
        descriptions = [d for d in (response["description"], error.openapi_description) if d]
        response["description"] = " ".join(descriptions)
        response["content"]["application/json"]["examples"][error.__name__] = {
            "value": error.openapi_example
        }
    return responses


@router.post(
    "/",
    response_model=OrderPublic,
    status_code=status.HTTP_201_CREATED,
    responses=_error_response(
        ShowtimeNotFoundError,
        RoomNotFoundError,
        AddOnNotFoundError,
        InsufficientCapacityError,
        SoldOutError,
        InvalidPurchaseError,
        ReservationTimeoutError,
        PersistenceFailureError,
    ),
)
def create_purchase(
    *,
    session: SessionDep,
    ledger: LedgerDep,
    request: PurchaseRequest,
) -> OrderPublic:
    order = purchases_service.purchase(session=session, ledger=ledger, request=request)
    return order_converters.to_public(order)


@router.post(
    "/quote",
    response_model=PurchaseQuote,
    responses=_error_response(
        ShowtimeNotFoundError,
        RoomNotFoundError,
        AddOnNotFoundError,
        InvalidPurchaseError,
        ReservationTimeoutError,
    ),
)
def quote_purchase(
    *,
    session: SessionDep,
    ledger: LedgerDep,
    request: PurchaseRequest,
) -> PurchaseQuote:
    return purchases_service.quote(session=session, ledger=ledger, request=request)

from fastapi import APIRouter

from boxoffice.api.deps import SessionDep
from boxoffice.schemas.order import OrderHistoryEntry
from boxoffice.services import purchases as purchases_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/")
def get_purchase_history(
    *,
    session: SessionDep,
    showtime_id: int | None = None,
) -> list[OrderHistoryEntry]:
    return purchases_service.get_purchase_history(
        session=session, showtime_id=showtime_id
    )

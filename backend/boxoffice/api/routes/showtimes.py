from fastapi import APIRouter

from boxoffice.api.deps import LedgerDep, SessionDep
from boxoffice.schemas.showtime import ShowtimeAvailability
from boxoffice.services import purchases as purchases_service

router = APIRouter(prefix="/showtimes", tags=["showtimes"])


@router.get("/{showtime_id}/availability", response_model=ShowtimeAvailability)
def get_showtime_availability(
    *, session: SessionDep, ledger: LedgerDep, showtime_id: int
) -> ShowtimeAvailability:
    return purchases_service.get_showtime_availability(
        session=session, ledger=ledger, showtime_id=showtime_id
    )

from fastapi import APIRouter

from boxoffice.api.deps import SessionDep
from boxoffice.schemas.add_on import AddOnPublic
from boxoffice.services import add_ons as add_ons_service

router = APIRouter(prefix="/add-ons", tags=["add-ons"])


@router.get("/")
def list_add_ons(*, session: SessionDep) -> list[AddOnPublic]:
    return add_ons_service.list_add_ons(session=session)

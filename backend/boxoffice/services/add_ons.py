from sqlmodel import Session

from boxoffice.converters import add_on as add_on_converters
from boxoffice.crud import add_on as add_on_crud
from boxoffice.schemas.add_on import AddOnPublic


def list_add_ons(*, session: Session) -> list[AddOnPublic]:
    """
    Get the add-ons that can be bought together with tickets.

    Parameters:
        session (Session): Database session.
    Returns:
        list[AddOnPublic]: The add-ons, ordered by name.
    """
    add_ons = add_on_crud.get_add_ons(session=session)
    return [add_on_converters.to_public(add_on) for add_on in add_ons]

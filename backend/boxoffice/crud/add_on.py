from sqlmodel import Session, col, select

from boxoffice.models.add_on import AddOn


def get_add_on_by_id(*, session: Session, add_on_id: int) -> AddOn | None:
    return session.get(AddOn, add_on_id)


def get_add_ons(*, session: Session) -> list[AddOn]:
    """
    Get every add-on on offer, ordered by name.

    Parameters:
        session (Session): The SQLAlchemy session to use.
    Returns:
        list[AddOn]: The add-ons, alphabetically.
    """
    stmt = select(AddOn).order_by(col(AddOn.name), col(AddOn.id))
    return list(session.exec(stmt).all())

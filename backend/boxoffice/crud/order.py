from sqlalchemy import func
from sqlmodel import Session, col, select

from boxoffice.models.order import Order, OrderCreate


def create_order(
    *,
    session: Session,
    order_create: OrderCreate,
) -> Order:
    """
    Add a new order to the session and flush it so the ID is generated.
    Committing is left to the caller.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        order_create (OrderCreate): The priced order to store.
    Returns:
        Order: The created Order object.
    Raises:
        IntegrityError: If the showtime or add-on referenced by the order does
        not exist, or a quantity violates a table constraint.
    """
    db_obj = Order(**order_create.model_dump())
    session.add(db_obj)
    session.flush()
    return db_obj


def get_orders(
    *,
    session: Session,
    showtime_id: int | None = None,
) -> list[Order]:
    """
    Get orders, newest first, optionally only those for one showtime.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        showtime_id (int | None): Restrict the result to this showtime.
    Returns:
        list[Order]: The matching orders.
    """
    stmt = select(Order)
    if showtime_id is not None:
        stmt = stmt.where(Order.showtime_id == showtime_id)
    stmt = stmt.order_by(col(Order.created_at).desc(), col(Order.id).desc())
    return list(session.exec(stmt).all())


def get_committed_quantity(*, session: Session, showtime_id: int) -> int:
    """
    Get the number of tickets already sold for a showtime.

    Parameters:
        session (Session): The SQLAlchemy session to use.
        showtime_id (int): The ID of the showtime.
    Returns:
        int: Sum of the ticket quantities of all orders for the showtime.
    """
    stmt = select(func.coalesce(func.sum(Order.quantity), 0)).where(
        Order.showtime_id == showtime_id
    )
    return int(session.exec(stmt).one())


def get_committed_quantities(*, session: Session) -> dict[int, int]:
    stmt = select(Order.showtime_id, func.sum(Order.quantity)).group_by(
        col(Order.showtime_id)
    )
    return {showtime_id: int(total) for showtime_id, total in session.exec(stmt).all()}

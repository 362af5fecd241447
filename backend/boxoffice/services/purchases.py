from functools import partial

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from boxoffice.converters import order as order_converters
from boxoffice.crud import add_on as add_on_crud
from boxoffice.crud import order as order_crud
from boxoffice.crud import room as room_crud
from boxoffice.crud import showtime as showtime_crud
from boxoffice.exceptions.catalog_exceptions import (
    AddOnNotFoundError,
    RoomNotFoundError,
    ShowtimeNotFoundError,
)
from boxoffice.exceptions.purchase_exceptions import (
    InvalidPurchaseError,
    PersistenceFailureError,
)
from boxoffice.models.add_on import AddOn
from boxoffice.models.order import Order, OrderCreate
from boxoffice.models.room import Room
from boxoffice.models.showtime import Showtime
from boxoffice.schemas.order import OrderHistoryEntry
from boxoffice.schemas.purchase import (
    MAX_QUANTITY_PER_PURCHASE,
    PurchaseQuote,
    PurchaseRequest,
)
from boxoffice.schemas.showtime import ShowtimeAvailability
from boxoffice.services import pricing
from boxoffice.services.ledger import CapacityLedger, CommittedLoader


def _check_quantities(request: PurchaseRequest) -> None:
    # Requests built with model_construct() skip field validation.
    if not 1 <= request.quantity <= MAX_QUANTITY_PER_PURCHASE:
        raise InvalidPurchaseError(
            f"Ticket quantity must be between 1 and {MAX_QUANTITY_PER_PURCHASE}."
        )
    if request.add_on_id is None:
        return
    if request.add_on_quantity is None or not (
        1 <= request.add_on_quantity <= MAX_QUANTITY_PER_PURCHASE
    ):
        raise InvalidPurchaseError(
            f"Add-on quantity must be between 1 and {MAX_QUANTITY_PER_PURCHASE}."
        )


def _get_showtime_and_room(
    *, session: Session, showtime_id: int
) -> tuple[Showtime, Room]:
    showtime = showtime_crud.get_showtime_by_id(session=session, showtime_id=showtime_id)
    if showtime is None:
        raise ShowtimeNotFoundError(showtime_id)
    room = room_crud.get_room_by_id(session=session, room_id=showtime.room_id)
    if room is None:
        raise RoomNotFoundError(showtime.room_id)
    return showtime, room


def _get_add_on(*, session: Session, add_on_id: int | None) -> AddOn | None:
    if add_on_id is None:
        return None
    add_on = add_on_crud.get_add_on_by_id(session=session, add_on_id=add_on_id)
    if add_on is None:
        raise AddOnNotFoundError(add_on_id)
    return add_on


def _committed_loader(*, session: Session, showtime_id: int) -> CommittedLoader:
    return partial(
        order_crud.get_committed_quantity,
        session=session,
        showtime_id=showtime_id,
    )


def _price(
    *, showtime: Showtime, add_on: AddOn | None, request: PurchaseRequest
) -> pricing.PriceBreakdown:
    return pricing.price_order(
        base_price=showtime.base_price,
        ticket_type=request.ticket_type,
        quantity=request.quantity,
        add_on_unit_price=add_on.unit_price if add_on else None,
        add_on_quantity=request.add_on_quantity,
    )


def purchase(
    *,
    session: Session,
    ledger: CapacityLedger,
    request: PurchaseRequest,
) -> Order:
    """
    Reserve seats for a purchase, price it and store the order.

    Seats are reserved before the order is written. If writing fails the
    reservation is released again, so a failed write never costs seats.

    Parameters:
        session (Session): Database session.
        ledger (CapacityLedger): The application's seat ledger.
        request (PurchaseRequest): The validated purchase.
    Returns:
        Order: The committed order.
    Raises:
        InvalidPurchaseError: If a quantity is out of range.
        ShowtimeNotFoundError: If the showtime does not exist.
        RoomNotFoundError: If the showtime's room does not exist.
        AddOnNotFoundError: If the selected add-on does not exist.
        SoldOutError: If the showtime has no seats left.
        InsufficientCapacityError: If fewer seats are left than requested.
        ReservationTimeoutError: If the showtime was too busy to reserve in time.
        PersistenceFailureError: If the order could not be stored.
    """
    _check_quantities(request)
    showtime, room = _get_showtime_and_room(
        session=session, showtime_id=request.showtime_id
    )
    add_on = _get_add_on(session=session, add_on_id=request.add_on_id)

    reservation = ledger.admit(
        showtime_id=showtime.id,
        quantity=request.quantity,
        capacity=room.capacity,
        load_committed=_committed_loader(session=session, showtime_id=showtime.id),
    )

    try:
        price = _price(showtime=showtime, add_on=add_on, request=request)
        order_create = OrderCreate(
            showtime_id=showtime.id,
            ticket_type=request.ticket_type,
            quantity=request.quantity,
            add_on_id=add_on.id if add_on else None,
            add_on_quantity=request.add_on_quantity if add_on else 0,
            ticket_subtotal=price.ticket_subtotal,
            add_on_subtotal=price.add_on_subtotal,
            total=price.total,
        )
        order = order_crud.create_order(session=session, order_create=order_create)
        session.commit()
    except Exception as e:
        ledger.release(reservation)
        logger.exception(
            f"Storing order for showtime {reservation.showtime_id} failed, "
            f"released {reservation.quantity} seat(s)"
        )
        try:
            session.rollback()
        except SQLAlchemyError:
            logger.exception(
                f"Rolling back the order for showtime {reservation.showtime_id} failed"
            )
        raise PersistenceFailureError(reservation.showtime_id) from e

    session.refresh(order)
    logger.info(
        f"Order {order.id}: {request.quantity}x {request.ticket_type.value} for "
        f"showtime {reservation.showtime_id}, total {pricing.format_money(price.total)}, "
        f"{reservation.available_after} seat(s) left"
    )
    return order


def quote(
    *,
    session: Session,
    ledger: CapacityLedger,
    request: PurchaseRequest,
) -> PurchaseQuote:
    """
    Price a purchase without reserving anything.

    Parameters:
        session (Session): Database session.
        ledger (CapacityLedger): The application's seat ledger.
        request (PurchaseRequest): The purchase to price.
    Returns:
        PurchaseQuote: Line items, the rounded total and the seats left right now.
    Raises:
        InvalidPurchaseError, ShowtimeNotFoundError, RoomNotFoundError,
        AddOnNotFoundError, ReservationTimeoutError
    """
    _check_quantities(request)
    showtime, room = _get_showtime_and_room(
        session=session, showtime_id=request.showtime_id
    )
    add_on = _get_add_on(session=session, add_on_id=request.add_on_id)

    price = _price(showtime=showtime, add_on=add_on, request=request)
    seats_available = ledger.available(
        showtime_id=showtime.id,
        capacity=room.capacity,
        load_committed=_committed_loader(session=session, showtime_id=showtime.id),
    )

    return PurchaseQuote(
        showtime_id=showtime.id,
        ticket_type=request.ticket_type,
        quantity=request.quantity,
        add_on_id=add_on.id if add_on else None,
        add_on_quantity=request.add_on_quantity if add_on else 0,
        ticket_unit_price=pricing.round_money(price.ticket_unit_price),
        ticket_subtotal=pricing.round_money(price.ticket_subtotal),
        add_on_subtotal=pricing.round_money(price.add_on_subtotal),
        total=pricing.round_money(price.total),
        seats_available=seats_available,
    )


def get_showtime_availability(
    *,
    session: Session,
    ledger: CapacityLedger,
    showtime_id: int,
) -> ShowtimeAvailability:
    """
    Get how many seats of a showtime are sold and how many are left.

    Raises:
        ShowtimeNotFoundError: If the showtime does not exist.
        RoomNotFoundError: If the showtime's room does not exist.
    """
    showtime, room = _get_showtime_and_room(session=session, showtime_id=showtime_id)
    available = ledger.available(
        showtime_id=showtime.id,
        capacity=room.capacity,
        load_committed=_committed_loader(session=session, showtime_id=showtime.id),
    )
    return ShowtimeAvailability(
        showtime_id=showtime.id,
        capacity=room.capacity,
        sold=room.capacity - available,
        available=available,
        sold_out=available == 0,
    )


def get_purchase_history(
    *,
    session: Session,
    showtime_id: int | None = None,
) -> list[OrderHistoryEntry]:
    orders = order_crud.get_orders(session=session, showtime_id=showtime_id)
    return [order_converters.to_history_entry(order) for order in orders]


def init_ledger(*, session: Session, ledger: CapacityLedger) -> None:
    """
    Load the committed totals of every showtime with orders into the ledger.
    """
    totals = order_crud.get_committed_quantities(session=session)
    ledger.rebuild(totals)
    logger.info(f"Seat ledger rebuilt for {len(totals)} showtime(s)")

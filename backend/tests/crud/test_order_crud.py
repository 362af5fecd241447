import datetime as dt
from decimal import Decimal

from sqlmodel import Session

from boxoffice import crud
from boxoffice.core.enums import TicketType
from boxoffice.models.order import OrderCreate


def test_create_order_assigns_id_without_committing(
    *, db_session: Session, showtime_factory
):
    showtime = showtime_factory()
    order_create = OrderCreate(
        showtime_id=showtime.id,
        ticket_type=TicketType.HALF,
        quantity=3,
        add_on_id=None,
        add_on_quantity=0,
        ticket_subtotal=Decimal("30.00"),
        add_on_subtotal=Decimal("0"),
        total=Decimal("30.00"),
    )

    order = crud.create_order(session=db_session, order_create=order_create)
    assert order.id is not None
    assert isinstance(order.created_at, dt.datetime)

    db_session.rollback()
    assert crud.get_orders(session=db_session) == []


def test_get_orders_newest_first_and_filtered(
    *, db_session: Session, showtime_factory, order_factory
):
    showtime = showtime_factory()
    other_showtime = showtime_factory()
    first = order_factory(showtime=showtime, created_at=dt.datetime(2026, 10, 1, 19, 0))
    second = order_factory(showtime=showtime, created_at=dt.datetime(2026, 10, 2, 19, 0))
    elsewhere = order_factory(
        showtime=other_showtime, created_at=dt.datetime(2026, 10, 3, 19, 0)
    )

    assert crud.get_orders(session=db_session) == [elsewhere, second, first]
    assert crud.get_orders(session=db_session, showtime_id=showtime.id) == [
        second,
        first,
    ]


def test_committed_quantities(*, db_session: Session, showtime_factory, order_factory):
    showtime = showtime_factory()
    other_showtime = showtime_factory()
    empty_showtime = showtime_factory()
    order_factory(showtime=showtime, quantity=4)
    order_factory(showtime=showtime, quantity=6)
    order_factory(showtime=other_showtime, quantity=1)

    assert crud.get_committed_quantity(session=db_session, showtime_id=showtime.id) == 10
    assert crud.get_committed_quantity(session=db_session, showtime_id=empty_showtime.id) == 0
    assert crud.get_committed_quantities(session=db_session) == {
        showtime.id: 10,
        other_showtime.id: 1,
    }


def test_created_at_is_stored_as_local_naive_time(*, db_session: Session, showtime_factory):
    showtime = showtime_factory()
    order_create = OrderCreate(
        showtime_id=showtime.id,
        ticket_type=TicketType.FULL,
        quantity=1,
        add_on_quantity=0,
        ticket_subtotal=Decimal("20.00"),
        add_on_subtotal=Decimal("0"),
        total=Decimal("20.00"),
    )

    order = crud.create_order(session=db_session, order_create=order_create)
    db_session.commit()
    db_session.refresh(order)

    assert order.created_at.tzinfo is None
    assert crud.get_orders(session=db_session) == [order]

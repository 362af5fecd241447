from decimal import Decimal

from sqlmodel import Session

from boxoffice.converters import order as order_converters
from boxoffice.core.enums import TicketType


def test_to_public_rounds_amounts(*, showtime_factory, order_factory):
    showtime = showtime_factory(base_price=Decimal("15.25"))
    order = order_factory(showtime=showtime, ticket_type=TicketType.HALF, quantity=3)

    public = order_converters.to_public(order)

    assert order.ticket_subtotal == Decimal("22.875")
    assert public.id == order.id
    assert public.ticket_subtotal == Decimal("22.88")
    assert public.add_on_subtotal == Decimal("0.00")
    assert public.total == Decimal("22.88")
    assert public.ticket_type is TicketType.HALF


def test_to_public_reloads_expired_order(
    *, db_session: Session, showtime_factory, order_factory, add_on_factory
):
    soda = add_on_factory(name="Soda", unit_price=Decimal("6.00"))
    order = order_factory(
        showtime=showtime_factory(base_price=Decimal("20.00")),
        quantity=2,
        add_on=soda,
    )
    db_session.expire(order)

    public = order_converters.to_public(order)

    assert public.showtime_id == order.showtime_id
    assert public.quantity == 2
    assert public.add_on_id == soda.id
    assert public.add_on_quantity == 1
    assert public.total == Decimal("46.00")
    assert public.created_at == order.created_at


def test_describe_add_on(*, order_factory, add_on_factory):
    nachos = add_on_factory(name="Nachos")

    assert order_converters.describe_add_on(order_factory()) is None
    assert (
        order_converters.describe_add_on(
            order_factory(add_on=nachos, add_on_quantity=3)
        )
        == "3x Nachos"
    )


def test_to_history_entry(
    *, movie_factory, room_factory, showtime_factory, order_factory, add_on_factory
):
    showtime = showtime_factory(
        movie=movie_factory(title="Bacurau"),
        room=room_factory(label="Sala 1"),
        base_price=Decimal("30.00"),
    )
    soda = add_on_factory(name="Soda", unit_price=Decimal("6.00"))
    order = order_factory(showtime=showtime, quantity=2, add_on=soda)

    entry = order_converters.to_history_entry(order)

    assert entry.movie_title == "Bacurau"
    assert entry.room_label == "Sala 1"
    assert entry.starts_at == showtime.starts_at
    assert entry.ticket_type_label == "Full"
    assert entry.add_on_description == "1x Soda"
    assert entry.total == Decimal("66.00")
    assert entry.total_display == "R$ 66.00"

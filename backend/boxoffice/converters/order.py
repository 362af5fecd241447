from boxoffice.models.order import Order
from boxoffice.schemas.order import OrderHistoryEntry, OrderPublic
from boxoffice.services.pricing import format_money, round_money


def to_public(order: Order) -> OrderPublic:
    """
    Converts an Order to an OrderPublic, rounding the amounts for display.

    Parameters:
        order (Order): The stored order.
    Returns:
        OrderPublic: The order as returned to the buyer.
    """
    return OrderPublic(
        id=order.id,
        showtime_id=order.showtime_id,
        ticket_type=order.ticket_type,
        quantity=order.quantity,
        add_on_id=order.add_on_id,
        add_on_quantity=order.add_on_quantity,
        created_at=order.created_at,
        ticket_subtotal=round_money(order.ticket_subtotal),
        add_on_subtotal=round_money(order.add_on_subtotal),
        total=round_money(order.total),
    )


def describe_add_on(order: Order) -> str | None:
    if order.add_on is None or order.add_on_quantity <= 0:
        return None
    return f"{order.add_on_quantity}x {order.add_on.name}"


def to_history_entry(order: Order) -> OrderHistoryEntry:
    """
    Converts an Order to a row of the purchase history, resolving the movie,
    room and add-on it refers to.

    Parameters:
        order (Order): The stored order, with its showtime loaded.
    Returns:
        OrderHistoryEntry: The history row.
    """
    showtime = order.showtime
    return OrderHistoryEntry(
        id=order.id,
        showtime_id=order.showtime_id,
        movie_title=showtime.movie.title,
        room_label=showtime.room.label,
        starts_at=showtime.starts_at,
        ticket_type=order.ticket_type,
        ticket_type_label=order.ticket_type.label,
        quantity=order.quantity,
        add_on_description=describe_add_on(order),
        total=round_money(order.total),
        total_display=format_money(order.total),
        created_at=order.created_at,
    )

import datetime as dt
from decimal import Decimal

from sqlmodel import SQLModel

from boxoffice.core.enums import TicketType
from boxoffice.models.order import OrderBase

__all__ = [
    "OrderPublic",
    "OrderHistoryEntry",
]


class OrderPublic(OrderBase):
    id: int
    ticket_subtotal: Decimal
    add_on_subtotal: Decimal
    total: Decimal
    created_at: dt.datetime


# One row of the customer's purchase history
class OrderHistoryEntry(SQLModel):
    id: int
    showtime_id: int
    movie_title: str
    room_label: str
    starts_at: dt.datetime
    ticket_type: TicketType
    ticket_type_label: str
    quantity: int
    add_on_description: str | None
    total: Decimal
    total_display: str
    created_at: dt.datetime

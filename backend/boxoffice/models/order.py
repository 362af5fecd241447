import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field, Relationship, SQLModel

from boxoffice.core.enums import TicketType
from boxoffice.utils import now_local_naive

if TYPE_CHECKING:
    from .add_on import AddOn
    from .showtime import Showtime

__all__ = [
    "OrderBase",
    "OrderCreate",
    "Order",
]


# Half-price tickets on a two-decimal base price need a third decimal to stay exact.
MONEY_MAX_DIGITS = 12
MONEY_DECIMAL_PLACES = 3


class OrderBase(SQLModel):
    showtime_id: int = Field(foreign_key="showtime.id", index=True)
    ticket_type: TicketType
    quantity: int = Field(ge=1)
    add_on_id: int | None = Field(default=None, foreign_key="add_on.id")
    # Zero when no add-on was bought.
    add_on_quantity: int = Field(default=0, ge=0)


class OrderCreate(OrderBase):
    ticket_subtotal: Decimal = Field(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    add_on_subtotal: Decimal = Field(
        max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    total: Decimal = Field(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)


class Order(OrderCreate, table=True):
    __tablename__ = "ticket_order"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_ticket_order_quantity_positive"),
        CheckConstraint("add_on_quantity >= 0", name="ck_ticket_order_add_on_quantity"),
    )

    id: int | None = Field(default=None, primary_key=True)
    created_at: dt.datetime = Field(default_factory=now_local_naive, index=True)
    showtime: "Showtime" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    add_on: Optional["AddOn"] = Relationship(sa_relationship_kwargs={"lazy": "joined"})

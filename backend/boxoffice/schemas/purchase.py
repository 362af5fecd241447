from decimal import Decimal
from typing import Any, Self

from pydantic import field_validator, model_validator
from sqlmodel import Field, SQLModel

from boxoffice.core.enums import TicketType

__all__ = [
    "MAX_QUANTITY_PER_PURCHASE",
    "PurchaseRequest",
    "PurchaseQuote",
]

MAX_QUANTITY_PER_PURCHASE = 20


class PurchaseRequest(SQLModel):
    showtime_id: int
    ticket_type: TicketType
    quantity: int = Field(ge=1, le=MAX_QUANTITY_PER_PURCHASE)
    add_on_id: int | None = None
    add_on_quantity: int | None = Field(default=None, ge=1, le=MAX_QUANTITY_PER_PURCHASE)

    @field_validator("add_on_id", "add_on_quantity", mode="before")
    @classmethod
    def parse_empty_str_to_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @model_validator(mode="after")
    def check_add_on_quantity(self) -> Self:
        # A quantity without a selected add-on is meaningless and is dropped.
        if self.add_on_id is None:
            self.add_on_quantity = None
        elif self.add_on_quantity is None:
            raise ValueError("add_on_quantity is required when an add-on is selected")
        return self


class PurchaseQuote(SQLModel):
    showtime_id: int
    ticket_type: TicketType
    quantity: int
    add_on_id: int | None
    add_on_quantity: int
    ticket_unit_price: Decimal
    ticket_subtotal: Decimal
    add_on_subtotal: Decimal
    total: Decimal
    seats_available: int

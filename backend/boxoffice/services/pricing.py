from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from boxoffice.core.enums import TicketType

__all__ = [
    "TICKET_TYPE_FACTORS",
    "PriceBreakdown",
    "price_order",
    "round_money",
    "format_money",
]

TICKET_TYPE_FACTORS: dict[TicketType, Decimal] = {
    TicketType.FULL: Decimal("1"),
    TicketType.HALF: Decimal("0.5"),
}

_CENTS = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class PriceBreakdown:
    ticket_unit_price: Decimal
    ticket_subtotal: Decimal
    add_on_subtotal: Decimal

    @property
    def total(self) -> Decimal:
        return self.ticket_subtotal + self.add_on_subtotal


def price_order(
    *,
    base_price: Decimal,
    ticket_type: TicketType,
    quantity: int,
    add_on_unit_price: Decimal | None = None,
    add_on_quantity: int | None = None,
) -> PriceBreakdown:
    """
    Price an admitted purchase. Amounts are exact; nothing is rounded here.

    Parameters:
        base_price (Decimal): The showtime's full ticket price.
        ticket_type (TicketType): Full or half price.
        quantity (int): Number of tickets.
        add_on_unit_price (Decimal | None): Price of the selected add-on, or
            None when no add-on was selected.
        add_on_quantity (int | None): Number of add-ons. Ignored when no
            add-on was selected.
    Returns:
        PriceBreakdown: The ticket and add-on line items.
    """
    ticket_unit_price = Decimal(base_price) * TICKET_TYPE_FACTORS[ticket_type]
    ticket_subtotal = ticket_unit_price * quantity

    add_on_subtotal = ZERO
    if add_on_unit_price is not None:
        add_on_subtotal = Decimal(add_on_unit_price) * (add_on_quantity or 0)

    return PriceBreakdown(
        ticket_unit_price=ticket_unit_price,
        ticket_subtotal=ticket_subtotal,
        add_on_subtotal=add_on_subtotal,
    )


def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half up. Only for presenting amounts."""
    return Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"R$ {round_money(amount)}"

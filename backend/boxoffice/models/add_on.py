from decimal import Decimal

from sqlmodel import Field, SQLModel

__all__ = [
    "AddOnBase",
    "AddOn",
]


class AddOnBase(SQLModel):
    name: str = Field(description="Name of the snack, e.g. 'Popcorn'")
    unit_price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)


class AddOn(AddOnBase, table=True):
    __tablename__ = "add_on"

    id: int | None = Field(default=None, primary_key=True)

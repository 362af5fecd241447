from sqlmodel import SQLModel

__all__ = [
    "ShowtimeAvailability",
]


class ShowtimeAvailability(SQLModel):
    showtime_id: int
    capacity: int
    sold: int
    available: int
    sold_out: bool

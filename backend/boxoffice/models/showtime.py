import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .movie import Movie
    from .room import Room

__all__ = [
    "ShowtimeBase",
    "Showtime",
]


# Shared properties
class ShowtimeBase(SQLModel):
    starts_at: dt.datetime = Field(index=True)
    base_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class Showtime(ShowtimeBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    movie_id: int = Field(foreign_key="movie.id", index=True)
    movie: "Movie" = Relationship(sa_relationship_kwargs={"lazy": "joined"})
    room_id: int = Field(foreign_key="room.id")
    room: "Room" = Relationship(sa_relationship_kwargs={"lazy": "joined"})

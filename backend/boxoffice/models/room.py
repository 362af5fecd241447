from sqlmodel import Field, SQLModel

__all__ = [
    "RoomBase",
    "Room",
]


class RoomBase(SQLModel):
    label: str = Field(description="Display label of the room, e.g. 'Sala 3'")
    capacity: int = Field(ge=0, description="Number of seats that can be sold per showtime")


class Room(RoomBase, table=True):
    id: int | None = Field(default=None, primary_key=True)

from .add_on import AddOn, AddOnBase
from .movie import Movie, MovieBase
from .order import Order, OrderBase, OrderCreate
from .room import Room, RoomBase
from .showtime import Showtime, ShowtimeBase

__all__ = [
    "AddOn",
    "AddOnBase",
    "Movie",
    "MovieBase",
    "Order",
    "OrderBase",
    "OrderCreate",
    "Room",
    "RoomBase",
    "Showtime",
    "ShowtimeBase",
]

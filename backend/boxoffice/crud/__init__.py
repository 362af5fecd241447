from .add_on import get_add_on_by_id, get_add_ons
from .order import (
    create_order,
    get_committed_quantities,
    get_committed_quantity,
    get_orders,
)
from .room import get_room_by_id
from .showtime import get_showtime_by_id

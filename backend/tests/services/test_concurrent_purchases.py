import datetime as dt
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from pytest_mock import MockerFixture

from boxoffice.exceptions.purchase_exceptions import (
    InsufficientCapacityError,
    SoldOutError,
)
from boxoffice.models.order import Order, OrderCreate
from boxoffice.models.room import Room
from boxoffice.models.showtime import Showtime
from boxoffice.schemas.purchase import PurchaseRequest
from boxoffice.services import purchases as purchases_service
from boxoffice.services.ledger import CapacityLedger


def test_concurrent_purchases_never_oversell(mocker: MockerFixture):
    showtime = Showtime(
        id=1,
        movie_id=1,
        room_id=1,
        starts_at=dt.datetime(2026, 11, 1, 20, 0),
        base_price=Decimal("20.00"),
    )
    room = Room(id=1, label="Sala 1", capacity=50)
    stored: list[Order] = []

    def create_order(*, session, order_create: OrderCreate) -> Order:
        order = Order(**order_create.model_dump())
        stored.append(order)
        return order

    mocker.patch("boxoffice.crud.showtime.get_showtime_by_id", return_value=showtime)
    mocker.patch("boxoffice.crud.room.get_room_by_id", return_value=room)
    mocker.patch("boxoffice.crud.order.get_committed_quantity", return_value=0)
    mocker.patch("boxoffice.crud.order.create_order", side_effect=create_order)

    ledger = CapacityLedger()
    request = PurchaseRequest(showtime_id=1, ticket_type="full", quantity=5)

    def buy() -> str:
        try:
            purchases_service.purchase(
                session=mocker.MagicMock(), ledger=ledger, request=request
            )
        except (SoldOutError, InsufficientCapacityError) as e:
            return type(e).__name__
        return "ok"

    with ThreadPoolExecutor(max_workers=20) as pool:
        results = list(pool.map(lambda _: buy(), range(20)))

    assert results.count("ok") == 10
    assert results.count("SoldOutError") == 10
    assert len(stored) == 10
    assert sum(order.quantity for order in stored) == 50
    assert ledger.committed(1) == 50

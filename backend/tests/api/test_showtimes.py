from fastapi.testclient import TestClient

from boxoffice.core.config import settings


def test_showtime_availability(
    *, client: TestClient, room_factory, showtime_factory, order_factory
):
    showtime = showtime_factory(room=room_factory(capacity=40))
    order_factory(showtime=showtime, quantity=15)

    response = client.get(
        f"{settings.API_V1_STR}/showtimes/{showtime.id}/availability"
    )

    assert response.status_code == 200
    assert response.json() == {
        "showtime_id": showtime.id,
        "capacity": 40,
        "sold": 15,
        "available": 25,
        "sold_out": False,
    }


def test_showtime_availability_unknown_showtime(*, client: TestClient):
    response = client.get(f"{settings.API_V1_STR}/showtimes/404/availability")

    assert response.status_code == 404

from decimal import Decimal

from fastapi.testclient import TestClient

from boxoffice.core.config import settings


def test_list_add_ons(*, client: TestClient, add_on_factory):
    add_on_factory(name="Soda", unit_price=Decimal("6.50"))
    add_on_factory(name="Popcorn", unit_price=Decimal("8.00"))

    response = client.get(f"{settings.API_V1_STR}/add-ons/")

    assert response.status_code == 200
    assert [(a["name"], a["unit_price"]) for a in response.json()] == [
        ("Popcorn", "8.00"),
        ("Soda", "6.50"),
    ]

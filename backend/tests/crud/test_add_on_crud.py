from decimal import Decimal

from sqlmodel import Session

from boxoffice import crud


def test_get_add_ons_alphabetical(*, db_session: Session, add_on_factory):
    soda = add_on_factory(name="Soda")
    candy = add_on_factory(name="Candy", unit_price=Decimal("4.50"))
    popcorn = add_on_factory(name="Popcorn")

    assert crud.get_add_ons(session=db_session) == [candy, popcorn, soda]


def test_get_add_on_by_id(*, db_session: Session, add_on_factory):
    popcorn = add_on_factory(name="Popcorn")

    assert crud.get_add_on_by_id(session=db_session, add_on_id=popcorn.id) is popcorn
    assert crud.get_add_on_by_id(session=db_session, add_on_id=popcorn.id + 1) is None

from sqlmodel import Session

from boxoffice.models.room import Room


def get_room_by_id(*, session: Session, room_id: int) -> Room | None:
    return session.get(Room, room_id)

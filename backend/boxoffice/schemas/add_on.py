from boxoffice.models.add_on import AddOnBase

__all__ = [
    "AddOnPublic",
]


class AddOnPublic(AddOnBase):
    id: int

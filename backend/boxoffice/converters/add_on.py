from boxoffice.models.add_on import AddOn
from boxoffice.schemas.add_on import AddOnPublic


def to_public(add_on: AddOn) -> AddOnPublic:
    return AddOnPublic.model_validate(add_on)

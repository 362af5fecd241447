from enum import Enum, unique


@unique
class TicketType(str, Enum):
    FULL = "full"
    HALF = "half"

    @property
    def label(self) -> str:
        return "Half" if self is TicketType.HALF else "Full"

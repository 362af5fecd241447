from fastapi import status

from .base import AppError


class InvalidPurchaseError(AppError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    openapi_description = "Returned when a purchase carries out-of-range quantities."
    openapi_example = {"detail": "Ticket quantity must be between 1 and 20."}


class SoldOutError(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = "Returned when the showtime has no seats left."
    openapi_example = {"detail": "Showtime with ID 123 is sold out."}

    def __init__(self, showtime_id: int):
        self.showtime_id = showtime_id
        detail = f"Showtime with ID {showtime_id} is sold out."
        super().__init__(detail)


class InsufficientCapacityError(AppError):
    status_code = status.HTTP_409_CONFLICT
    openapi_description = (
        "Returned when fewer seats are left than requested. "
        "The response carries the number of seats still available."
    )
    openapi_example = {
        "detail": "Only 3 seat(s) left for showtime with ID 123, 5 requested.",
        "available": 3,
        "requested": 5,
    }

    def __init__(self, showtime_id: int, available: int, requested: int):
        self.showtime_id = showtime_id
        self.available = available
        self.requested = requested
        detail = (
            f"Only {available} seat(s) left for showtime with ID {showtime_id}, "
            f"{requested} requested."
        )
        super().__init__(detail)

    def extra_content(self) -> dict[str, object]:
        return {"available": self.available, "requested": self.requested}


class ReservationTimeoutError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retry_after = 1
    openapi_description = (
        "Returned when the showtime is too busy to take the reservation in time. "
        "Nothing was reserved; the request can be retried."
    )
    openapi_example = {"detail": "Showtime with ID 123 is busy, please try again."}

    def __init__(self, showtime_id: int):
        self.showtime_id = showtime_id
        detail = f"Showtime with ID {showtime_id} is busy, please try again."
        super().__init__(detail)


class PersistenceFailureError(AppError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retry_after = 1
    openapi_description = (
        "Returned when the order could not be saved. "
        "The seats were released; the request can be retried."
    )
    openapi_example = {"detail": "Could not save the order for showtime with ID 123."}

    def __init__(self, showtime_id: int):
        self.showtime_id = showtime_id
        detail = f"Could not save the order for showtime with ID {showtime_id}."
        super().__init__(detail)

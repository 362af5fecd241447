from fastapi import status

from .base import AppError


class ShowtimeNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the requested showtime does not exist."
    openapi_example = {"detail": "Showtime with ID 123 not found."}

    def __init__(self, showtime_id: int):
        self.showtime_id = showtime_id
        detail = f"Showtime with ID {showtime_id} not found."
        super().__init__(detail)


class RoomNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the room of a showtime does not exist."
    openapi_example = {"detail": "Room with ID 7 not found."}

    def __init__(self, room_id: int):
        self.room_id = room_id
        detail = f"Room with ID {room_id} not found."
        super().__init__(detail)


class AddOnNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    openapi_description = "Returned when the selected add-on does not exist."
    openapi_example = {"detail": "Add-on with ID 3 not found."}

    def __init__(self, add_on_id: int):
        self.add_on_id = add_on_id
        detail = f"Add-on with ID {add_on_id} not found."
        super().__init__(detail)

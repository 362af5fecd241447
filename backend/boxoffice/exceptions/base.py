from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"
    # Set on errors the client may safely retry after a short wait.
    retry_after: int | None = None
    openapi_description: str = "An unexpected error occurred."
    openapi_example: dict[str, object] = {"detail": "An unexpected error occurred"}

    def __init__(self, detail: str | None = None):
        if detail:
            self.detail = detail
        super().__init__(self.detail)

    def extra_content(self) -> dict[str, object]:
        """Additional fields rendered next to ``detail`` in the error response."""
        return {}

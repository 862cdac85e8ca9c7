from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


class JoblyError(HTTPException):
    """Base for errors rendered as ``{"error": {"message", "status"}}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: Any = "Internal Server Error"
    default_headers: dict[str, str] | None = None

    def __init__(self, message: Any = None, headers: dict[str, str] | None = None):
        super().__init__(
            status_code=type(self).status_code,
            detail=self.default_message if message is None else message,
            headers=headers if headers is not None else self.default_headers,
        )

    @property
    def message(self) -> Any:
        return self.detail


class BadRequestError(JoblyError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class ValidationError(BadRequestError):
    """Schema violations; ``message`` is a list of strings."""

    def __init__(self, messages: list[str]):
        super().__init__(list(messages))


class UnauthorizedError(JoblyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"
    default_headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(JoblyError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"

from __future__ import annotations


# PUBLIC_INTERFACE
class TodoServiceError(Exception):
    """
    Base class for errors the API maps onto an HTTP status code.

    The message is sent to the client as a plain-text body, except for
    server-side failures where a generic body is used instead.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# PUBLIC_INTERFACE
class ValidationError(TodoServiceError):
    """Client input was malformed, missing, or of the wrong type."""

    status_code = 400


# PUBLIC_INTERFACE
class NotFoundError(TodoServiceError):
    """The referenced todo id has no row."""

    status_code = 404


# PUBLIC_INTERFACE
class StorageError(TodoServiceError):
    """The storage medium is unwritable, corrupt, or violated a constraint."""

    status_code = 500

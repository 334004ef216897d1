"""
Transformation errors

Hierarchy::

    TransformError
    ├── CoordinateValidationError   easting or northing missing, no request made
    ├── RequestFailedError          REFRAME answered with a non-2xx status
    ├── UnexpectedTransformError    connection, parsing or any other failure
    └── MalformedResponseError      2xx body without usable easting/northing

Every kind carries one fixed, human-readable ``user_message``. The
underlying cause (status code, exception text) goes to the log only.
"""

from typing import Optional

VALIDATION_MESSAGE = "Please enter both an easting and a northing value."
REQUEST_FAILED_MESSAGE = "Transformation failed. Please try again."
UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again later."
MALFORMED_MESSAGE = "The transformation service returned an incomplete result."


class TransformError(Exception):
    """Base class for all transformation failures."""

    user_message = UNEXPECTED_MESSAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class CoordinateValidationError(TransformError):
    user_message = VALIDATION_MESSAGE


class RequestFailedError(TransformError):
    user_message = REQUEST_FAILED_MESSAGE

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedTransformError(TransformError):
    user_message = UNEXPECTED_MESSAGE


class MalformedResponseError(TransformError):
    user_message = MALFORMED_MESSAGE

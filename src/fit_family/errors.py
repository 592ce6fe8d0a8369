"""Domain errors and their HTTP mapping.

Every error raised by a service derives from :class:`FitFamilyError`. The
class attributes carry the HTTP status and the short title rendered in the
``error`` field of the response body; the instance message becomes the
``message`` field.
"""

from http import HTTPStatus


class FitFamilyError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = HTTPStatus.BAD_REQUEST
    title: str = "Bad Request"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateEmailError(FitFamilyError):
    status_code = HTTPStatus.CONFLICT
    title = "Duplicate Email"


class InvalidCredentialsError(FitFamilyError):
    status_code = HTTPStatus.UNAUTHORIZED
    title = "Authentication Failed"


class InvalidTokenError(FitFamilyError):
    status_code = HTTPStatus.FORBIDDEN
    title = "Access Denied"


class UserNotFoundError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "User Not Found"


class AlreadyInFamilyError(FitFamilyError):
    status_code = HTTPStatus.CONFLICT
    title = "Family Conflict"


class InvalidJoinCodeError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "Invalid Join Code"


class FamilyNotFoundError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "Family Not Found"


class JoinCodeExhaustedError(FitFamilyError):
    status_code = HTTPStatus.SERVICE_UNAVAILABLE
    title = "Join Code Unavailable"


class FoodNotFoundError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "Food Not Found"


class PortionNotFoundError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "Food Portion Not Found"


class InvalidPortionError(FitFamilyError):
    status_code = HTTPStatus.BAD_REQUEST
    title = "Invalid Food Portion"


class LogNotFoundError(FitFamilyError):
    status_code = HTTPStatus.NOT_FOUND
    title = "Food Log Not Found"


class JoinCodeTakenError(Exception):
    """Raised by family repositories when a join code is already stored."""

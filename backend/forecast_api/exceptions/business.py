"""Business logic exceptions."""

from .base import ForecastApiError


class ResourceNotFoundError(ForecastApiError):
    """Raised when a requested resource cannot be found."""

    pass


class BadRequestError(ForecastApiError):
    """Raised when a request identifier is malformed or inconsistent.

    This exception is raised when:
    - The path identifier is the empty (all-zero) UUID
    - The path identifier and the body identifier disagree
    """

    pass

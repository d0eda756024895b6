class TrackerError(Exception):
    """Base exception for service-level failures."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(TrackerError):
    """Resource not found."""

    status_code = 404


class ForbiddenError(TrackerError):
    """Resource belongs to another user."""

    status_code = 403


class ConflictError(TrackerError):
    """Request conflicts with the current state of the resource."""

    status_code = 409

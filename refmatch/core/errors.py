"""Domain error taxonomy.

Services raise these; the handlers registered in ``refmatch.main`` turn them
into ``{"error": ...}`` JSON bodies. Raw store exceptions never cross the API
boundary.
"""


class RefError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(RefError):
    status_code = 400


class NotFoundError(RefError):
    status_code = 404


class ConflictError(RefError):
    status_code = 409


class UnauthorizedError(RefError):
    status_code = 401


class TransientStoreError(RefError):
    """The backing store timed out or was unreachable. Safe to retry."""
    status_code = 503

"""Domain Exceptions"""


class ReservationError(Exception):
    """Base class for reservation domain errors"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReservationError):
    """Malformed or semantically invalid reservation input"""

    status_code = 400


class NotFoundError(ReservationError):
    """Unknown room or reservation"""

    status_code = 404


class ConflictError(ReservationError):
    """Requested slot overlaps an existing reservation"""

    status_code = 409


class StorageError(ReservationError):
    """Backing store unreadable or unwritable"""

    status_code = 500

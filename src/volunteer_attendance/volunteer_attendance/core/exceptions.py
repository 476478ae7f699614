class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeRange(DomainError):
    """Raised when a check-out time precedes its check-in time."""

    def __init__(self, check_in, check_out):
        super().__init__(f"check-out {check_out} is before check-in {check_in}")
        self.check_in = check_in
        self.check_out = check_out


class NotFoundError(DomainError):
    """Raised when a referenced volunteer does not exist."""


class ConflictError(DomainError):
    """Raised when the same punch has already been recorded."""

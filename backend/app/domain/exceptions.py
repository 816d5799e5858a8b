class DomainError(Exception):
    """Base class for errors surfaced to the API caller."""

    status_code = 400


class ValidationError(DomainError):
    """Payload has no safe default to fall back on."""


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409


class InvariantViolation(DomainError):
    pass


class SanitizationFailure(Exception):
    """
    Raised inside the sanitizer only.
    Callers never see it: the sanitizer degrades to stripped text instead.
    """

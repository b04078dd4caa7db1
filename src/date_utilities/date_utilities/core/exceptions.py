class DomainError(Exception):
    """Base exception for date utility failures."""


class ValidationError(DomainError):
    """Raised when input data is invalid."""


class InvalidArgument(ValidationError):
    """Raised for an absent, empty or malformed argument.

    Covers missing values, empty strings, malformed format patterns, text that
    does not match its pattern and parsed values lacking the fields needed for
    the requested type.
    """

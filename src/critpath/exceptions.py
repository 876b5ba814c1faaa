"""Custom exceptions for critpath."""


class CritpathError(Exception):
    """Base exception for all critpath errors."""

    pass


class ValidationError(CritpathError):
    """Raised when validation fails."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a weight matrix or activity list is malformed.

    Covers non-square matrices, negative weights, self-loops and
    references to stages that do not exist.
    """

    pass


class ParseError(CritpathError):
    """Raised when a project file cannot be read."""

    pass

"""Custom exceptions for the samentity package."""


class SamEntityError(Exception):
    """Base exception for all samentity errors."""


class ParseError(SamEntityError):
    """Raised when a payload cannot be decoded into the Entity schema.

    Covers malformed JSON, a non-object top level, and values whose type
    does not match the declared field. The underlying
    ``pydantic.ValidationError`` is available as ``__cause__``.
    """

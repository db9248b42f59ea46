"""Errors raised when decoding names and versions."""


class DecodeError(ValueError):
    """Encoded data could not be turned into a valid value."""


class TypeMismatch(DecodeError):
    """The encoded value has the wrong type (e.g. a number, not a string)."""


class FormatMismatch(DecodeError):
    """The encoded value has the right type but is not well formed."""

"""Codecs: wire and file encodings for names and versions.

Every decoder goes through the same parsers as interactive input, so a
value that decodes is always a valid name or version.
"""

from pkgid.codec.errors import DecodeError, FormatMismatch, TypeMismatch

__all__ = ["DecodeError", "FormatMismatch", "TypeMismatch"]

"""Binary encoding for names, versions, and packages.

Layout:
- integers are 8-byte big-endian signed
- a string is its character count (as an integer) followed by each
  character encoded as UTF-8
- a name is its user then its project; a version is major, minor, patch;
  a package is its name then its version

Decoded fields are re-checked with the regular parsers before a value is
returned.
"""

from __future__ import annotations

import struct

from pkgid.codec.errors import DecodeError, FormatMismatch
from pkgid.package.models import Package
from pkgid.package.name import Name, name_from_string
from pkgid.package.version import Version, version_from_string

_INT = struct.Struct(">q")


class _Writer:
    def __init__(self):
        self.buf = bytearray()

    def put_int(self, value: int) -> None:
        self.buf += _INT.pack(value)

    def put_string(self, value: str) -> None:
        self.put_int(len(value))
        self.buf += value.encode("utf-8")

    def put_name(self, name: Name) -> None:
        self.put_string(name.user)
        self.put_string(name.project)

    def put_version(self, version: Version) -> None:
        self.put_int(version.major)
        self.put_int(version.minor)
        self.put_int(version.patch)


class _Reader:
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.pos = 0

    def _take(self, size: int) -> bytes:
        end = self.pos + size
        if end > len(self.data):
            raise DecodeError(
                f"Unexpected end of input: needed {size} byte(s) at offset {self.pos}"
            )
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def get_int(self) -> int:
        return _INT.unpack(self._take(_INT.size))[0]

    def get_char(self) -> str:
        lead = self.data[self.pos] if self.pos < len(self.data) else 0
        if lead < 0x80:
            width = 1
        elif lead < 0xE0:
            width = 2
        elif lead < 0xF0:
            width = 3
        else:
            width = 4
        raw = self._take(width)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Invalid UTF-8 character at offset {self.pos - width}") from e

    def get_string(self) -> str:
        count = self.get_int()
        if count < 0:
            raise DecodeError(f"Negative string length: {count}")
        return "".join(self.get_char() for _ in range(count))

    def get_name(self) -> Name:
        user = self.get_string()
        project = self.get_string()
        result = name_from_string(f"{user}/{project}")
        if not result.ok:
            raise FormatMismatch(
                f"Ran into an invalid package name: {user}/{project}\n\n{result.message}"
            )
        return result.name

    def get_version(self) -> Version:
        major, minor, patch = self.get_int(), self.get_int(), self.get_int()
        version = version_from_string(f"{major}.{minor}.{patch}")
        if version is None:
            raise FormatMismatch(f"Invalid version number: {major}.{minor}.{patch}")
        return version

    def finish(self) -> None:
        if self.pos != len(self.data):
            raise DecodeError(f"{len(self.data) - self.pos} trailing byte(s) after value")


def encode_name(name: Name) -> bytes:
    writer = _Writer()
    writer.put_name(name)
    return bytes(writer.buf)


def decode_name(data: bytes) -> Name:
    reader = _Reader(data)
    name = reader.get_name()
    reader.finish()
    return name


def encode_version(version: Version) -> bytes:
    writer = _Writer()
    writer.put_version(version)
    return bytes(writer.buf)


def decode_version(data: bytes) -> Version:
    reader = _Reader(data)
    version = reader.get_version()
    reader.finish()
    return version


def encode_package(package: Package) -> bytes:
    writer = _Writer()
    writer.put_name(package.name)
    writer.put_version(package.version)
    return bytes(writer.buf)


def decode_package(data: bytes) -> Package:
    reader = _Reader(data)
    package = Package(reader.get_name(), reader.get_version())
    reader.finish()
    return package

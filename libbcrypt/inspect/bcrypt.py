"""
Parsing of the modular crypt format used by bcrypt::

    $2<v>$<cost>$<payload>

``<v>`` is empty for the original format (59 chars total) or one of
``a``, ``b``, ``x``, ``y`` for the later revisions (60 chars total).
``<cost>`` is two ascii digits, and ``<payload>`` is the 22 char salt
followed by the 31 char digest, in bcrypt's base64 alphabet.
"""

from __future__ import annotations

import dataclasses
import logging

from libbcrypt._utils.binary import bcrypt64_charset, digit_charset
from libbcrypt._utils.bytes import StrOrBytes, as_str
from libbcrypt.errors import MalformedHashError

log = logging.getLogger(__name__)

__all__ = [
    "HashFormatDescriptor",
    "HashInformation",
    "format_descriptor",
    "get_hash_information",
    "get_work_factor",
    "inspect_bcrypt_hash",
    "is_valid_hash",
    "validate_hash",
]

BCRYPT_PREFIX = "$2"
HASH_LENGTHS = (59, 60)
VERSION_CHARS = frozenset("abxy")
SALT_SIZE = 22


@dataclasses.dataclass(frozen=True)
class HashFormatDescriptor:
    """Offsets of each field, for a given width of the version field."""

    version_length: int
    workfactor_offset: int
    setting_length: int
    hash_offset: int


def format_descriptor(version_length: int) -> HashFormatDescriptor:
    if version_length not in (1, 2):
        msg = f"version length must be 1 or 2, got {version_length}"
        raise ValueError(msg)

    # leading "$", the version, then the "$" in front of the cost
    workfactor_offset = 1 + version_length + 1
    setting_length = workfactor_offset + 2
    return HashFormatDescriptor(
        version_length=version_length,
        workfactor_offset=workfactor_offset,
        setting_length=setting_length,
        hash_offset=setting_length + 1,
    )


@dataclasses.dataclass(frozen=True)
class HashInformation:
    setting: str
    version: str
    work_factor: str
    hash: str

    @property
    def rounds(self) -> int:
        return _decode_work_factor(self.work_factor)

    @property
    def salt(self) -> str:
        return self.hash[:SALT_SIZE]

    @property
    def digest(self) -> str:
        return self.hash[SALT_SIZE:]

    @property
    def bcrypt_salt(self) -> bytes:
        return f"{self.setting}${self.salt}".encode()

    def as_str(self) -> str:
        return f"{self.setting}${self.hash}"


def _reject(reason: str) -> None:
    log.debug("not a bcrypt hash: %s", reason)
    return None


def _validate(hash: str) -> HashFormatDescriptor | None:
    if len(hash) not in HASH_LENGTHS:
        return _reject("incorrect hash length")

    if not hash.startswith(BCRYPT_PREFIX):
        return _reject("missing $2 prefix")

    offset = len(BCRYPT_PREFIX)
    if hash[offset] in VERSION_CHARS:
        offset += 1
        format = format_descriptor(version_length=2)
    else:
        # anything else is read as the old format, so an unknown
        # version char ends up failing the delimiter check below
        format = format_descriptor(version_length=1)

    if hash[offset] != "$":
        return _reject("missing delimiter after version")
    offset += 1

    if hash[offset] not in digit_charset or hash[offset + 1] not in digit_charset:
        return _reject("cost factor is not two digits")
    offset += 2

    if hash[offset] != "$":
        return _reject("missing delimiter after cost factor")
    offset += 1

    if not all(char in bcrypt64_charset for char in hash[offset:]):
        return _reject("invalid character in payload")

    return format


def validate_hash(hash: StrOrBytes) -> HashFormatDescriptor | None:
    """
    Checks that ``hash`` is structurally a bcrypt hash.

    :returns: descriptor of the detected format, or ``None`` if the hash is invalid.
    """
    try:
        text = as_str(hash)
    except UnicodeDecodeError:
        return _reject("not valid utf-8")
    return _validate(text)


def is_valid_hash(hash: StrOrBytes) -> bool:
    return validate_hash(hash) is not None


def _split(hash: str, format: HashFormatDescriptor) -> HashInformation:
    return HashInformation(
        setting=hash[: format.setting_length],
        version=hash[1 : 1 + format.version_length],
        work_factor=hash[format.workfactor_offset : format.workfactor_offset + 2],
        hash=hash[format.hash_offset :],
    )


def inspect_bcrypt_hash(hash: StrOrBytes) -> HashInformation | None:
    format = validate_hash(hash)
    if format is None:
        return None
    return _split(as_str(hash), format)


def get_hash_information(hash: StrOrBytes) -> HashInformation:
    """
    Splits a bcrypt hash into its setting, version, cost factor and payload.

    :raises MalformedHashError: if ``hash`` is not a valid bcrypt hash.
    """
    info = inspect_bcrypt_hash(hash)
    if info is None:
        raise MalformedHashError
    return info


def _decode_work_factor(digits: str) -> int:
    return 10 * (ord(digits[0]) - ord("0")) + (ord(digits[1]) - ord("0"))


def get_work_factor(hash: StrOrBytes) -> int:
    """
    Reads the cost factor of a bcrypt hash.

    No range check is made beyond the field being two digits, so
    the result is anywhere in 0 - 99.

    :raises MalformedHashError: if ``hash`` is not a valid bcrypt hash.
    """
    format = validate_hash(hash)
    if format is None:
        raise MalformedHashError

    offset = format.workfactor_offset
    return _decode_work_factor(as_str(hash)[offset : offset + 2])

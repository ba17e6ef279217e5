"""libbcrypt - parsing and rehash policies for bcrypt hash strings"""

from libbcrypt.context import CryptContext
from libbcrypt.errors import MalformedHashError
from libbcrypt.inspect.bcrypt import (
    HashFormatDescriptor,
    HashInformation,
    format_descriptor,
    get_hash_information,
    get_work_factor,
    inspect_bcrypt_hash,
    is_valid_hash,
    validate_hash,
)
from libbcrypt.policies.abc import HashPolicy
from libbcrypt.policies.bcrypt import BcryptPolicy

__version__ = "0.1.0"

__all__ = [
    "BcryptPolicy",
    "CryptContext",
    "HashFormatDescriptor",
    "HashInformation",
    "HashPolicy",
    "MalformedHashError",
    "format_descriptor",
    "get_hash_information",
    "get_work_factor",
    "inspect_bcrypt_hash",
    "is_valid_hash",
    "validate_hash",
]

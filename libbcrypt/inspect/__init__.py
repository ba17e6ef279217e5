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

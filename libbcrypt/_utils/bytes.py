from typing import Union

StrOrBytes = Union[str, bytes]


def as_str(value: StrOrBytes) -> str:
    return value.decode("utf8") if isinstance(value, bytes) else value

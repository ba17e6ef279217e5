from typing import Protocol

from libbcrypt._utils.bytes import StrOrBytes

__all__ = ["HashPolicy"]


class HashPolicy(Protocol):
    def identify(self, hash: StrOrBytes) -> bool: ...

    def needs_update(self, hash: StrOrBytes) -> bool:
        """Checks if hash needs to be updated, returns True if hash is not recognized."""
        ...

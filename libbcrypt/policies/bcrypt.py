from __future__ import annotations

from typing import Literal, get_args

from libbcrypt._utils.bytes import StrOrBytes
from libbcrypt._utils.validation import validate_choice, validate_rounds
from libbcrypt.inspect.bcrypt import inspect_bcrypt_hash, is_valid_hash
from libbcrypt.policies.abc import HashPolicy

BcryptPrefix = Literal["2b", "2a", "2y"]

# log2 cost limits of the bcrypt algorithm
MIN_ROUNDS = 4
MAX_ROUNDS = 31

__all__ = ["BcryptPolicy"]


class BcryptPolicy(HashPolicy):
    """
    Decides whether a stored bcrypt hash still matches the wanted
    variant and cost, or should be rehashed on next login.
    """

    def __init__(
        self,
        rounds: int = 12,
        prefix: BcryptPrefix = "2b",
    ) -> None:
        validate_rounds(rounds, min=MIN_ROUNDS, max=MAX_ROUNDS)
        validate_choice("prefix", prefix, get_args(BcryptPrefix))
        self._rounds = rounds
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rounds={self._rounds}, prefix={self.prefix!r})"

    @property
    def rounds(self) -> int:
        return self._rounds

    def identify(self, hash: StrOrBytes) -> bool:
        return is_valid_hash(hash)

    def needs_update(self, hash: StrOrBytes) -> bool:
        info = inspect_bcrypt_hash(hash)
        if info is None:
            return True
        # higher cost than configured is kept as is
        return info.version != self.prefix or info.rounds < self._rounds

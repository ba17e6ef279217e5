from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Literal

import typing_extensions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libbcrypt._utils.bytes import StrOrBytes
    from libbcrypt.policies.abc import HashPolicy

log = logging.getLogger(__name__)


class CryptContext:
    """
    Ordered collection of hash policies.

    The first scheme is the default one, with ``deprecated="auto"``
    every other scheme is only kept around to recognize old hashes.
    """

    def __init__(
        self,
        schemes: Sequence[HashPolicy],
        deprecated: Literal["auto"] = "auto",
    ) -> None:
        self._schemes = schemes
        self._deprecated = deprecated

        self._validate_init()

    def identify(self, hash: StrOrBytes) -> HashPolicy | None:
        for scheme in self._schemes:
            if scheme.identify(hash):
                return scheme
        return None

    def needs_update(self, hash: StrOrBytes) -> bool:
        for scheme in self._active_schemes:
            if scheme.identify(hash):
                result = scheme.needs_update(hash)
                log.debug("%r decided needs_update=%s", scheme, result)
                return result
        log.debug("hash not recognized by any active scheme")
        return True

    def _validate_init(self) -> None:
        if not self._schemes:
            raise ValueError("At least one scheme must be supplied")

    @functools.cached_property
    def _deprecated_schemes(self) -> Sequence[HashPolicy]:
        if self._deprecated == "auto":
            return self._schemes[1:]

        typing_extensions.assert_never(self._deprecated)

    @functools.cached_property
    def _active_schemes(self) -> Sequence[HashPolicy]:
        return [
            scheme for scheme in self._schemes if scheme not in self._deprecated_schemes
        ]

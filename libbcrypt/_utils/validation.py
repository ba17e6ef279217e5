from __future__ import annotations

from collections.abc import Collection


def validate_rounds(rounds: int, min: int, max: int) -> None:
    if rounds < min or rounds > max:
        msg = f"rounds must be between {min} - {max}"
        raise ValueError(msg)


def validate_choice(name: str, value: str, choices: Collection[str]) -> None:
    if value not in choices:
        msg = f"{name} must be one of {', '.join(sorted(choices))}, got {value!r}"
        raise ValueError(msg)

"""Experience sources: raw numbers and player records from the Hypixel API."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable

from bedwars_level.errors import InvalidInputError


@runtime_checkable
class ExperienceSource(Protocol):
    """Anything that can report BedWars experience.

    `experience` is the field the API fills today; `legacy_experience` is the
    older field some records still carry. Either may be None.
    """

    @property
    def experience(self) -> Any: ...

    @property
    def legacy_experience(self) -> Any: ...


@dataclass(frozen=True)
class PlayerRecord:
    experience: Any = None
    legacy_experience: Any = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> PlayerRecord:
        """Build a record from a player payload.

        Accepts the bare player object or a full API response wrapping it
        under "player". Missing sections leave the fields as None.
        """
        player = payload.get("player", payload)
        if not isinstance(player, Mapping):
            return cls()
        stats = player.get("stats")
        if not isinstance(stats, Mapping):
            return cls()
        bedwars = stats.get("Bedwars")
        if not isinstance(bedwars, Mapping):
            return cls()
        return cls(
            experience=bedwars.get("Experience"),
            legacy_experience=bedwars.get("Experience_new"),
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate(value: Any) -> float | int:
    if not _is_number(value) or math.isnan(value):
        raise InvalidInputError("Data supplied does not contain player Bedwars experience.")
    if math.isinf(value):
        raise InvalidInputError(f"Bedwars experience must be finite, got {value!r}.")
    if value < 0:
        raise InvalidInputError(f"Bedwars experience must not be negative, got {value!r}.")
    return value


def extract_experience(source: ExperienceSource | float | int) -> float | int:
    """Return the experience held by a number or an ExperienceSource.

    The current field wins when it holds a number; the legacy field is only
    consulted when the current one is absent.
    """
    if _is_number(source):
        return _validate(source)
    if not isinstance(source, ExperienceSource):
        raise InvalidInputError(
            f"Expected a number or an experience source, got {type(source).__name__}."
        )
    value = source.experience
    if value is None:
        value = source.legacy_experience
    return _validate(value)

"""Exceptions raised by bedwars-level."""

from __future__ import annotations


class BedwarsLevelError(Exception):
    """Base class for every error raised by bedwars-level."""


class InvalidInputError(BedwarsLevelError, TypeError):
    """Experience is missing, not a number, NaN, infinite or negative."""


class UnknownColorError(BedwarsLevelError, KeyError):
    """A symbolic color has no registered hex value."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class RenderError(BedwarsLevelError, ValueError):
    """A level has more digits than a prestige band can color."""

"""High-level prestige bands: per-digit color gradients for levels 1000 and up.

Names for the bands are not known yet and stay empty.
"""

from __future__ import annotations

from dataclasses import dataclass

from bedwars_level.formatting import MinecraftFormatting as MF

DIGIT_COLOR_COUNT = 4


@dataclass(frozen=True)
class BracketColors:
    beginning: MF
    end: MF
    star: MF


@dataclass(frozen=True)
class PrestigeBand:
    threshold: int
    digit_colors: tuple[MF, MF, MF, MF]
    bracket_colors: BracketColors
    name: str = ""


# Ordered by threshold, highest first.
# TODO: add prestige names and the 3100-5000 bands once their colors are confirmed.
PRESTIGE_BANDS: tuple[PrestigeBand, ...] = (
    PrestigeBand(
        threshold=3000,
        digit_colors=(MF.YELLOW, MF.GOLD, MF.GOLD, MF.RED),
        bracket_colors=BracketColors(beginning=MF.YELLOW, end=MF.DARK_RED, star=MF.DARK_RED),
    ),
    PrestigeBand(
        threshold=2900,
        digit_colors=(MF.AQUA, MF.DARK_AQUA, MF.DARK_AQUA, MF.BLUE),
        bracket_colors=BracketColors(beginning=MF.AQUA, end=MF.BLUE, star=MF.BLUE),
    ),
    PrestigeBand(
        threshold=2800,
        digit_colors=(MF.GREEN, MF.DARK_GREEN, MF.DARK_GREEN, MF.GOLD),
        bracket_colors=BracketColors(beginning=MF.GREEN, end=MF.YELLOW, star=MF.GOLD),
    ),
    PrestigeBand(
        threshold=2700,
        digit_colors=(MF.YELLOW, MF.WHITE, MF.WHITE, MF.DARK_GRAY),
        bracket_colors=BracketColors(beginning=MF.YELLOW, end=MF.DARK_GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=2600,
        digit_colors=(MF.DARK_RED, MF.RED, MF.RED, MF.LIGHT_PURPLE),
        bracket_colors=BracketColors(beginning=MF.DARK_RED, end=MF.DARK_PURPLE, star=MF.LIGHT_PURPLE),
    ),
    PrestigeBand(
        threshold=2500,
        digit_colors=(MF.WHITE, MF.GREEN, MF.GREEN, MF.DARK_GREEN),
        bracket_colors=BracketColors(beginning=MF.WHITE, end=MF.DARK_GREEN, star=MF.DARK_GREEN),
    ),
    PrestigeBand(
        threshold=2400,
        digit_colors=(MF.AQUA, MF.WHITE, MF.WHITE, MF.GRAY),
        bracket_colors=BracketColors(beginning=MF.AQUA, end=MF.DARK_GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=2300,
        digit_colors=(MF.DARK_PURPLE, MF.LIGHT_PURPLE, MF.LIGHT_PURPLE, MF.GOLD),
        bracket_colors=BracketColors(beginning=MF.DARK_PURPLE, end=MF.YELLOW, star=MF.YELLOW),
    ),
    PrestigeBand(
        threshold=2200,
        digit_colors=(MF.GOLD, MF.WHITE, MF.WHITE, MF.AQUA),
        bracket_colors=BracketColors(beginning=MF.GOLD, end=MF.DARK_AQUA, star=MF.DARK_AQUA),
    ),
    PrestigeBand(
        threshold=2100,
        digit_colors=(MF.WHITE, MF.YELLOW, MF.YELLOW, MF.GOLD),
        bracket_colors=BracketColors(beginning=MF.WHITE, end=MF.GOLD, star=MF.GOLD),
    ),
    PrestigeBand(
        threshold=2000,
        digit_colors=(MF.GRAY, MF.WHITE, MF.WHITE, MF.GRAY),
        bracket_colors=BracketColors(beginning=MF.DARK_GRAY, end=MF.DARK_GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=1900,
        digit_colors=(MF.DARK_PURPLE, MF.DARK_PURPLE, MF.DARK_PURPLE, MF.DARK_PURPLE),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=1800,
        digit_colors=(MF.BLUE, MF.BLUE, MF.BLUE, MF.BLUE),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=1700,
        digit_colors=(MF.LIGHT_PURPLE, MF.LIGHT_PURPLE, MF.LIGHT_PURPLE, MF.LIGHT_PURPLE),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_PURPLE),
    ),
    PrestigeBand(
        threshold=1600,
        digit_colors=(MF.DARK_RED, MF.DARK_RED, MF.DARK_RED, MF.DARK_RED),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_RED),
    ),
    PrestigeBand(
        threshold=1500,
        digit_colors=(MF.DARK_AQUA, MF.DARK_AQUA, MF.DARK_AQUA, MF.DARK_AQUA),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.BLUE),
    ),
    PrestigeBand(
        threshold=1400,
        digit_colors=(MF.DARK_GREEN, MF.DARK_GREEN, MF.DARK_GREEN, MF.DARK_GREEN),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_GREEN),
    ),
    PrestigeBand(
        threshold=1300,
        digit_colors=(MF.AQUA, MF.AQUA, MF.AQUA, MF.AQUA),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_AQUA),
    ),
    PrestigeBand(
        threshold=1200,
        digit_colors=(MF.YELLOW, MF.YELLOW, MF.YELLOW, MF.YELLOW),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.GOLD),
    ),
    PrestigeBand(
        threshold=1100,
        digit_colors=(MF.WHITE, MF.WHITE, MF.WHITE, MF.WHITE),
        bracket_colors=BracketColors(beginning=MF.GRAY, end=MF.GRAY, star=MF.DARK_GRAY),
    ),
    PrestigeBand(
        threshold=1000,
        digit_colors=(MF.GOLD, MF.YELLOW, MF.GREEN, MF.AQUA),
        bracket_colors=BracketColors(beginning=MF.RED, end=MF.DARK_PURPLE, star=MF.LIGHT_PURPLE),
    ),
)


def select_band(level: int) -> PrestigeBand | None:
    """Return the band with the highest threshold not above level, or None below 1000."""
    for band in PRESTIGE_BANDS:
        if band.threshold <= level:
            return band
    return None

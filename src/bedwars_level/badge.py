"""SVG badge generation for bedwars-level.

Generates a shields.io-style flat badge showing the colored level.
Pure functions, no side effects, no external dependencies.
"""

from __future__ import annotations

from html import escape
from typing import Iterable

from bedwars_level.colorize import ColoredValue

_LABEL = "bedwars"
_LABEL_BG = "555555"
_VALUE_BG = "1f1f1f"
_FONT_SIZE = 11
_FONT_FAMILY = "DejaVu Sans,Verdana,Geneva,sans-serif"


def _text_width(text: str) -> int:
    """Estimate pixel width of text at 11px DejaVu Sans."""
    widths = {
        "f": 4, "i": 4, "j": 4, "l": 4, "r": 4, "t": 5,
        "m": 10, "w": 9, "W": 10, "M": 10,
        " ": 4, ".": 4, ",": 4, ":": 4, "/": 5,
        "[": 4, "]": 4, "1": 6,
    }
    return sum(widths.get(ch, 7) for ch in text)


def _tspans(colours: list[ColoredValue]) -> str:
    return "".join(
        f'<tspan fill="{c.hex}">{escape(str(c.value))}</tspan>' for c in colours
    )


def generate_badge_svg(colours: Iterable[ColoredValue], prestige_name: str = "") -> str:
    """Generate a shields.io flat-style SVG badge string.

    Layout: [bedwars | [1234✪]] with every value filled in its own color.
    """
    colours = list(colours)
    value_text = "".join(str(c.value) for c in colours)

    label_w = _text_width(_LABEL) + 20
    value_w = _text_width(value_text) + 20
    total_w = label_w + value_w
    height = 20

    label_cx = label_w // 2
    value_cx = label_w + value_w // 2

    tooltip = f"BedWars level {escape(value_text)}"
    if prestige_name:
        tooltip += f" ({escape(prestige_name)})"

    svg = f'''<svg xmlns="http://www.w3.org/2000/svg" width="{total_w}" height="{height}" role="img" aria-label="{tooltip}">
  <title>{tooltip}</title>
  <linearGradient id="s" x2="0" y2="100%">
    <stop offset="0" stop-color="#bbb" stop-opacity=".1"/>
    <stop offset="1" stop-opacity=".1"/>
  </linearGradient>
  <clipPath id="r">
    <rect width="{total_w}" height="{height}" rx="3" fill="#fff"/>
  </clipPath>
  <g clip-path="url(#r)">
    <rect width="{label_w}" height="{height}" fill="#{_LABEL_BG}"/>
    <rect x="{label_w}" width="{value_w}" height="{height}" fill="#{_VALUE_BG}"/>
    <rect width="{total_w}" height="{height}" fill="url(#s)"/>
  </g>
  <g text-anchor="middle" font-family="{_FONT_FAMILY}" text-rendering="geometricPrecision" font-size="{_FONT_SIZE}">
    <text aria-hidden="true" x="{label_cx}.5" y="15" fill="#010101" fill-opacity=".3">{_LABEL}</text>
    <text x="{label_cx}.5" y="14" fill="#fff">{_LABEL}</text>
    <text x="{value_cx}.5" y="14">{_tspans(colours)}</text>
  </g>
</svg>
'''
    return svg

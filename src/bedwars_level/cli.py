"""CLI commands for bedwars-level."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Mapping

from bedwars_level.badge import generate_badge_svg
from bedwars_level.colorize import HighLevelInfo, colorize_high_level
from bedwars_level.config import get_display_options, set_display_options
from bedwars_level.display import (
    print_badge_result,
    print_config,
    print_error,
    print_level,
)
from bedwars_level.errors import BedwarsLevelError
from bedwars_level.levels import compute_level, level_progress
from bedwars_level.player import PlayerRecord, extract_experience

logger = logging.getLogger(__name__)


def _parse_experience(raw: str) -> float:
    """argparse type for experience: accepts integers and decimals."""
    try:
        return float(raw) if any(ch in raw for ch in ".eE") else int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid experience value: {raw!r}") from None


def _add_display_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--brackets", action=argparse.BooleanOptionalAction, default=None,
        help="Wrap the level in brackets",
    )
    parser.add_argument(
        "--icon", action=argparse.BooleanOptionalAction, default=None,
        help="Append the prestige icon",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bedwars-level",
        description="BedWars level and prestige from experience",
    )
    subparsers = parser.add_subparsers(dest="command")

    level_parser = subparsers.add_parser("level", help="Show the level for an experience value")
    level_parser.add_argument("experience", type=_parse_experience, help="BedWars experience")
    _add_display_flags(level_parser)
    level_parser.add_argument("--json", action="store_true", help="Print JSON instead of a panel")

    player_parser = subparsers.add_parser("player", help="Show the level from a player JSON file")
    player_parser.add_argument("file", type=Path, help="Player JSON as returned by the API")
    _add_display_flags(player_parser)
    player_parser.add_argument("--json", action="store_true", help="Print JSON instead of a panel")

    badge_parser = subparsers.add_parser("badge", help="Generate an SVG badge for a level")
    badge_parser.add_argument("experience", type=_parse_experience, help="BedWars experience")
    badge_parser.add_argument("--output", "-o", default="bedwars-level-badge.svg", help="Output file path")
    _add_display_flags(badge_parser)

    config_parser = subparsers.add_parser("config", help="Show or set display defaults")
    _add_display_flags(config_parser)
    return parser


def _configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _resolve_options(args: argparse.Namespace, config_path: Path | None = None) -> dict[str, bool]:
    """Command-line flags win over stored defaults."""
    options = get_display_options(config_path)
    if args.brackets is not None:
        options["display_brackets"] = args.brackets
    if args.icon is not None:
        options["display_icon"] = args.icon
    return options


def build_result(data: Any, display_brackets: bool = False, display_icon: bool = False) -> dict:
    """Compute level info and its colored rendering for any accepted input.

    Returns a dict with "info", "rendered", "experience" and "progress".
    """
    info = compute_level(data)
    rendered = colorize_high_level(
        info, display_brackets=display_brackets, display_icon=display_icon,
    )
    source = PlayerRecord.from_api(data) if isinstance(data, Mapping) else data
    experience = extract_experience(source)
    return {
        "info": info,
        "rendered": rendered,
        "experience": experience,
        "progress": level_progress(experience),
    }


def _result_to_json(result: dict) -> str:
    info = result["info"]
    rendered = result["rendered"]
    payload = info.to_dict()
    if isinstance(rendered, HighLevelInfo):
        payload["highLevel"] = rendered.to_dict()
    payload["icon"] = rendered.icon
    payload["colours"] = [{"value": c.value, "hex": c.hex} for c in rendered.colours]
    current, needed = result["progress"]
    payload["expInLevel"] = current
    payload["expForNextLevel"] = needed
    return json.dumps(payload, ensure_ascii=False, indent=2)


def do_level(experience: float, options: dict, as_json: bool = False) -> dict:
    """Print the level for a raw experience value. Returns the computed result."""
    result = build_result(experience, **options)
    _emit(result, as_json)
    return result


def do_player(path: Path, options: dict, as_json: bool = False) -> dict:
    """Print the level for a player JSON file. Returns the computed result."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    logger.debug("Loaded player payload from %s", path)
    result = build_result(payload, **options)
    _emit(result, as_json)
    return result


def do_badge(experience: float, output: str, options: dict) -> dict:
    """Write an SVG badge for the given experience."""
    result = build_result(experience, **options)
    info = result["info"]
    svg = generate_badge_svg(result["rendered"].colours, prestige_name=info.prestige_name)
    Path(output).write_text(svg, encoding="utf-8")
    logger.info("Wrote badge for level %d to %s", info.level, output)
    summary = {"output": output, "level": info.level, "prestige_name": info.prestige_name}
    print_badge_result(summary)
    return summary


def do_config(args: argparse.Namespace, config_path: Path | None = None) -> dict:
    """Persist any display flags given, then print the stored defaults."""
    if args.brackets is None and args.icon is None:
        options = get_display_options(config_path)
    else:
        options = set_display_options(
            config_path, display_brackets=args.brackets, display_icon=args.icon,
        )
    print_config(options)
    return options


def _emit(result: dict, as_json: bool) -> None:
    if as_json:
        print(_result_to_json(result))
    else:
        print_level(
            result["info"], result["rendered"],
            progress=result["progress"], experience=result["experience"],
        )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    _configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command
    if command is None:
        parser.print_help()
        return 0

    try:
        if command == "level":
            do_level(args.experience, _resolve_options(args), as_json=args.json)
        elif command == "player":
            do_player(args.file, _resolve_options(args), as_json=args.json)
        elif command == "badge":
            do_badge(args.experience, args.output, _resolve_options(args))
        elif command == "config":
            do_config(args)
    except (BedwarsLevelError, OSError, ValueError) as exc:
        logger.debug("Command %s failed", command, exc_info=True)
        print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

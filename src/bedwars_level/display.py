"""Rich terminal display for bedwars-level."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from bedwars_level.colorize import ColoredValue, HighLevelDisplay, HighLevelInfo
from bedwars_level.levels import LevelInfo

console = Console()


def format_number(n: float) -> str:
    """Format large numbers: 421543 -> '421.5K', 1200 -> '1,200', 1234567 -> '1.2M'."""
    n = int(n)
    if n >= 1_000_000:
        value = n / 1_000_000
        if value >= 100:
            return f"{value:.0f}M"
        return f"{value:.1f}M"
    if n >= 10_000:
        value = n / 1_000
        if value >= 1000:
            return f"{value:.0f}K"
        return f"{value:.1f}K"
    return f"{n:,}"


def to_rich_text(colours: Iterable[ColoredValue]) -> Text:
    """Join colored values into one Rich Text, each part styled with its hex."""
    text = Text()
    for colour in colours:
        text.append(str(colour.value), style=colour.hex)
    return text


def _progress_bar(current: int, total: int, width: int = 20) -> str:
    """Render a progress bar as text: [████████░░░░░░░░░░░░]."""
    if total <= 0:
        return "[" + "█" * width + "]"
    ratio = min(current / total, 1.0)
    filled = int(ratio * width)
    return "[" + "█" * filled + "░" * (width - filled) + "]"


def print_level(
    info: LevelInfo,
    rendered: HighLevelDisplay | HighLevelInfo,
    progress: tuple[int, int] | None = None,
    experience: float | None = None,
) -> None:
    """Print a panel with the colored level, prestige and progress to the next level."""
    body = Text("\n  ")
    body.append_text(to_rich_text(rendered.colours))
    body.append("\n\n")
    body.append(f"  Prestige:  {info.prestige_name}", style=f"bold {info.prestige_color_hex}")
    if rendered.prestige_name:
        body.append(f" ({rendered.prestige_name})")
    body.append("\n")
    body.append(f"  Level in prestige: {info.level_in_current_prestige}\n")
    if experience is not None:
        body.append(f"  Experience: {format_number(experience)}\n")
    if progress is not None:
        current, needed = progress
        bar = _progress_bar(current, needed)
        body.append(f"  {bar} {format_number(current)}/{format_number(needed)} XP\n")

    panel = Panel(
        body,
        title="[bold]BEDWARS LEVEL[/]",
        box=box.ROUNDED,
        border_style=info.prestige_color_hex,
        width=50,
    )
    console.print(panel)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    Console(stderr=True).print(f"[bold red]Error:[/] {message}")


def print_badge_result(result: dict) -> None:
    """Print badge generation result."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{result.get('output', '')}[/]")
    lines.append(f"  Level {result.get('level', 0)} - {result.get('prestige_name', 'None')}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def print_config(options: dict) -> None:
    """Print the stored display defaults."""
    lines = [""]
    for key in sorted(options):
        lines.append(f"  {key}: [bold]{options[key]}[/]")
    lines.append("")
    panel = Panel(
        "\n".join(lines),
        title="[bold]Display Defaults[/]",
        box=box.ROUNDED,
        border_style="grey50",
        width=50,
    )
    console.print(panel)

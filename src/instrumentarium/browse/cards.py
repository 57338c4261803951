"""
Terminal rendering of instruments as a grid of cards.
"""

from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from instrumentarium.instrument.sentinels import is_renderable_range

CARD_WIDTH = 44

DIFFICULTY_STYLES = {
    "Beginner": "green",
    "Intermediate": "yellow",
    "Advanced": "dark_orange",
    "Professional": "red",
}
DEFAULT_DIFFICULTY_STYLE = "cyan"


def difficulty_style(level: str | None) -> str:
    return DIFFICULTY_STYLES.get(level, DEFAULT_DIFFICULTY_STYLE)


def _labelled(label: str, value: str) -> Text:
    line = Text()
    line.append(f"{label}: ", style="bold")
    line.append(value)
    return line


def render_card(instrument: dict) -> Panel:
    """One instrument as a panel. Absent attributes are left out."""
    badges = Text()
    badges.append(f" {instrument['category']} ", style="reverse")
    level = instrument.get("difficulty_level")
    if level:
        badges.append(" ")
        badges.append(f" {level} ", style=f"reverse {difficulty_style(level)}")

    body = [badges]
    if instrument.get("description"):
        body.append(Text(instrument["description"], style="dim"))
    if instrument.get("origin"):
        body.append(_labelled("Origin", instrument["origin"]))
    if is_renderable_range(instrument.get("range_description")):
        body.append(_labelled("Range", instrument["range_description"]))
    if instrument.get("image_url"):
        body.append(Text(instrument["image_url"], style=Style(link=instrument["image_url"])))

    return Panel(
        Group(*body),
        title=Text(instrument["name"], style="bold"),
        subtitle=Text(instrument.get("family") or instrument["category"]),
        width=CARD_WIDTH,
    )


def render_header(instrument_count: int, category_count: int) -> Text:
    header = Text("Musical Instruments Database\n", style="bold magenta")
    header.append(f"{instrument_count} instruments · {category_count} categories", style="dim")
    return header


def render_grid(console: Console, instruments: list[dict]) -> None:
    """Print instruments as cards, or an empty-state message when there are none."""
    if not instruments:
        console.print("[dim]No instruments found. Try adjusting your search or filters.[/]")
        return
    console.print(Columns([render_card(i) for i in instruments], equal=True))
    console.print(f"[dim]Showing {len(instruments)} instrument(s).[/]")

"""
Presentation helpers: fitting descriptions to the terminal and rendering
list rows and the detail panel as rich markup.
"""

from dataclasses import replace
from typing import Iterable, List

from rich.markup import escape

from config import DESCRIPTION_MARGIN
from models import StarRecord

ELLIPSIS = "..."

DETAIL_SEPARATOR = "-" * 30


def truncate_description(star: StarRecord, width: int) -> StarRecord:
    """
    Return a display copy of `star` whose description fits on one row.

    Descriptions longer than `width - DESCRIPTION_MARGIN` are cut and end in
    an ellipsis. Narrow terminals just get a very short description.
    """
    limit = width - DESCRIPTION_MARGIN
    if len(star.description) <= limit:
        return star
    keep = max(0, limit - len(ELLIPSIS))
    return replace(star, description=star.description[:keep] + ELLIPSIS)


def fit_to_width(stars: Iterable[StarRecord], width: int) -> List[StarRecord]:
    return [truncate_description(star, width) for star in stars]


def render_row(star: StarRecord, active: bool) -> str:
    if active:
        return f":star: [cyan]{escape(star.full_name)}[/cyan]"
    return f"    [cyan]{escape(star.full_name)}[/cyan]"


def render_selected(star: StarRecord) -> str:
    return f":sparkles: [red]{escape(star.full_name)}[/red]"


def render_details(star: StarRecord) -> str:
    """Detail panel for the highlighted star."""
    fields = [
        ("\U0001F4D2 description", star.description),
        ("\U0001F3E0 homepage", star.homepage),
        ("\U0001F4DD language", star.language),
        ("\U0001F4C3 license", star.license or ""),
        ("\U0001F31F stars", str(star.stargazers_count)),
    ]
    lines = [DETAIL_SEPARATOR]
    lines.extend(f"{label}\t{escape(value)}" for label, value in fields)
    return "\n".join(lines)

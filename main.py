"""
Command line entry point: fetch a user's stars, pick one, open it in the browser.
"""

import webbrowser
from typing import Optional

import typer

from config import get_github_token, get_github_user, get_terminal_width, get_version, logger
from display import fit_to_width
from errors import HoshiError, RetrievalCancelled
from github_client import fetch_all_stars
from ordering import SortOrder, sort_stars
from selector import Selector

EXIT_CANCELLED = RetrievalCancelled.exit_code

ORDER_HELP = "Change item order: " + ", ".join(order.value for order in SortOrder)

app = typer.Typer(add_completion=False)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"hoshi v{get_version()}")
        raise typer.Exit()


def browse_stars(order, reverse):
    """
    Run one browse session.

    Returns the chosen star, or None when the user cancelled the picker.
    """
    username = get_github_user()
    token = get_github_token()

    try:
        stars = fetch_all_stars(username, token)
    except KeyboardInterrupt as e:
        raise RetrievalCancelled("Retrieval interrupted") from e

    width = get_terminal_width()

    # to prevent a multi-line description
    stars = fit_to_width(stars, width)
    stars = sort_stars(stars, SortOrder.parse(order), reverse)

    selector = Selector(stars)
    star = selector.run()
    if star is not None:
        webbrowser.open(star.html_url)
    return star


@app.command()
def main(
    order: Optional[str] = typer.Option(None, "--order", "-o", help=ORDER_HELP),
    reverse: bool = typer.Option(False, "--reverse", "-r", help="Reverse item order"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show hoshi version",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Browse your starred GitHub repositories and open one in the browser."""
    try:
        star = browse_stars(order, reverse)
    except HoshiError as e:
        logger.debug("Run failed", exc_info=True)
        typer.echo(f"hoshi: {e}", err=True)
        raise typer.Exit(code=e.exit_code)

    if star is None:
        raise typer.Exit(code=EXIT_CANCELLED)


if __name__ == "__main__":
    app()

"""
Interactive star picker.

`Selector` is a small state machine over the candidate list: it owns the
query, the search-mode flag, the visible positions and the highlighted
entry. `handle()` applies one key press and never fails; `run()` drives it
from the keyboard and redraws a rich Live display after every key.
"""

from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

import readchar
from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from config import PAGE_SIZE, logger
from display import render_details, render_row, render_selected
from fuzzy import matches
from models import StarRecord

LABEL = "Stars"

SEARCH_KEY = "?"
NEXT_KEYS = (readchar.key.DOWN,)
PREV_KEYS = (readchar.key.UP,)
PAGE_FORWARD_KEYS = (readchar.key.RIGHT,)
PAGE_BACKWARD_KEYS = (readchar.key.LEFT,)
CONFIRM_KEYS = (readchar.key.ENTER, "\r", "\n")
BACKSPACE_KEYS = (readchar.key.BACKSPACE, "\x7f", "\x08")
CANCEL_KEYS = (readchar.key.CTRL_C, readchar.key.CTRL_D)


class Mode(Enum):
    BROWSING = auto()
    SEARCHING = auto()


class Outcome(Enum):
    CONTINUE = auto()
    CONFIRMED = auto()
    CANCELLED = auto()


class Selector:
    def __init__(
        self,
        candidates: List[StarRecord],
        size: int = PAGE_SIZE,
        matcher: Callable[[str, StarRecord], bool] = matches,
    ):
        self.candidates = candidates
        self.size = size
        self.matcher = matcher
        self.mode = Mode.SEARCHING
        self.query = ""
        self.visible: List[int] = []
        self.cursor: Optional[int] = None
        self.offset = 0
        self.result: Optional[StarRecord] = None
        self._refilter()

    @property
    def searching(self) -> bool:
        return self.mode is Mode.SEARCHING

    @property
    def selected(self) -> Optional[StarRecord]:
        """The highlighted record, or None when nothing is visible."""
        if self.cursor is None:
            return None
        return self.candidates[self.visible[self.cursor]]

    def visible_records(self) -> List[StarRecord]:
        return [self.candidates[i] for i in self.visible]

    def window(self) -> List[Tuple[int, StarRecord]]:
        """(visible index, record) pairs for the rows currently on screen."""
        end = min(self.offset + self.size, len(self.visible))
        return [(i, self.candidates[self.visible[i]]) for i in range(self.offset, end)]

    def handle(self, key: str) -> Outcome:
        """Apply one key press to the selection state."""
        if key in CANCEL_KEYS:
            return Outcome.CANCELLED

        if key in CONFIRM_KEYS:
            if self.selected is None:
                return Outcome.CONTINUE
            self.result = self.selected
            return Outcome.CONFIRMED

        if key == SEARCH_KEY:
            self.mode = Mode.BROWSING if self.searching else Mode.SEARCHING
        elif key in NEXT_KEYS:
            self.move(1)
        elif key in PREV_KEYS:
            self.move(-1)
        elif key in PAGE_FORWARD_KEYS:
            self.page(1)
        elif key in PAGE_BACKWARD_KEYS:
            self.page(-1)
        elif self.searching and key in BACKSPACE_KEYS:
            self.set_query(self.query[:-1])
        elif self.searching and len(key) == 1 and key.isprintable():
            self.set_query(self.query + key)

        return Outcome.CONTINUE

    def set_query(self, query: str) -> None:
        self.query = query
        self._refilter()

    def move(self, step: int) -> None:
        """Move the highlight by `step` rows, stopping at the first and last entry."""
        if self.cursor is None:
            return
        self.cursor = self._clamp(self.cursor + step, len(self.visible) - 1)
        self._scroll()

    def page(self, direction: int) -> None:
        """Move the highlight and the window by one page."""
        if self.cursor is None:
            return
        last_offset = max(0, len(self.visible) - self.size)
        self.offset = self._clamp(self.offset + direction * self.size, last_offset)
        self.cursor = self._clamp(self.cursor + direction * self.size, len(self.visible) - 1)
        self._scroll()

    def _refilter(self) -> None:
        self.visible = [
            i for i, star in enumerate(self.candidates) if self.matcher(self.query, star)
        ]
        self.cursor = 0 if self.visible else None
        self.offset = 0

    def _scroll(self) -> None:
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.size:
            self.offset = self.cursor - self.size + 1

    @staticmethod
    def _clamp(value: int, upper: int) -> int:
        return max(0, min(value, upper))

    def render(self) -> Group:
        """Renderable for the current state: label, rows and details."""
        if self.searching:
            header = f"[bold]{LABEL}[/bold]  Search: {escape(self.query)}"
        else:
            header = f"[bold]{LABEL}[/bold]  [dim]({SEARCH_KEY} to search)[/dim]"

        lines = [Text.from_markup(header)]
        for index, star in self.window():
            lines.append(Text.from_markup(render_row(star, index == self.cursor)))

        selected = self.selected
        if selected is None:
            lines.append(Text("No matches", style="dim"))
        else:
            lines.append(Text.from_markup(render_details(selected)))
        return Group(*lines)

    def run(
        self,
        read_key: Callable[[], str] = readchar.readkey,
        console: Optional[Console] = None,
    ) -> Optional[StarRecord]:
        """
        Block on key presses until the user confirms or cancels.

        Returns the chosen record, or None when cancelled.
        """
        console = console or Console()
        with Live(self.render(), console=console, auto_refresh=False, transient=True) as live:
            while True:
                try:
                    key = read_key()
                except (KeyboardInterrupt, EOFError):
                    outcome = Outcome.CANCELLED
                else:
                    outcome = self.handle(key)

                if outcome is Outcome.CANCELLED:
                    logger.info("Selection cancelled")
                    return None
                if outcome is Outcome.CONFIRMED:
                    break
                live.update(self.render(), refresh=True)

        console.print(render_selected(self.result))
        return self.result

"""I/O collaborators shared by every command handler.

A ``CommandContext`` bundles the two rich consoles, the line reader and
the save-file store, so handlers never reach for globals and tests can
substitute any of them.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment

from todo.storage.store import StateStore

LineReader = Callable[[], str]

_YES: Final[frozenset[str]] = frozenset({"y", "yes"})
_NO: Final[frozenset[str]] = frozenset({"n", "no"})


class VerbatimLine:
    """One output line rendered exactly as given.

    Plain ``Console.print`` would interpret markup, wrap at the console
    width and expand tabs; user-entered entry text must come out
    unchanged.  An optional styled ``label`` (e.g. ``Error:``) precedes
    the text.
    """

    __slots__ = ("text", "label", "label_style")

    def __init__(self, text: str, label: str | None = None, label_style: str = "") -> None:
        self.text = text
        self.label = label
        self.label_style = label_style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if self.label is not None:
            yield Segment(self.label, console.get_style(self.label_style, default=""))
            yield Segment(" ")
        yield Segment(self.text)
        yield Segment.line()


@dataclass
class CommandContext:
    """Where commands read input from and write output to.

    Parameters
    ----------
    store:
        The save file used by ``save``, ``load`` and ``exit``.
    console:
        Console for regular output.
    err_console:
        Console for errors and warnings (normally stderr).
    read_line:
        Returns the next line of user input; raises ``EOFError`` when
        input is exhausted.
    """

    store: StateStore = field(default_factory=StateStore)
    console: Console = field(default_factory=lambda: Console(emoji=False))
    err_console: Console = field(default_factory=lambda: Console(stderr=True, emoji=False))
    read_line: LineReader = input

    def say(self, message: str) -> None:
        """Print ``message`` verbatim: no markup, wrapping or tab expansion."""
        self.console.print(VerbatimLine(message), soft_wrap=True)

    def warn(self, message: str) -> None:
        self.err_console.print(VerbatimLine(message, "Warning:", "yellow"), soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(VerbatimLine(message, "Error:", "red"), soft_wrap=True)

    def prompt(self, question: str) -> str:
        """Print ``question`` and return the next input line, right-stripped."""
        self.say(question)
        return self.read_line().rstrip()

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question until the answer is recognised.

        ``y``/``yes`` and ``n``/``no`` are accepted in any letter case;
        anything else reports "Unknown input" and asks again.
        """
        while True:
            answer = self.prompt(question).strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self.error("Unknown input")

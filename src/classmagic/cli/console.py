"""CLI console helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) keep working when it is not installed.

Output goes to standard output and is printed verbatim: each message is
handed to Rich as a pre-built segment, so markup, emoji codes and tabs
in file names are left alone, and styling is passed explicitly via
``style``.  File names that are not valid in the filesystem encoding
are written back as their original bytes.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from classmagic.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_stdout() -> TextIO:
    """Return ``sys.stdout`` set up to encode with ``surrogateescape``.

    Undecodable bytes in command-line arguments arrive as lone
    surrogates; a strict stream would refuse to encode them.
    """
    stream = sys.stdout
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None and getattr(stream, "errors", None) == "strict":
        reconfigure(errors="surrogateescape")
    return stream


def get_rich_console() -> Any:
    """Create a Rich console targeting stdout.

    Soft wrapping keeps long paths on a single line.
    """
    console_class = _load_rich_console_class()
    return console_class(file=get_stdout(), soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, style: str | None = None) -> None:
        """Render with Rich when available, else plain stdout print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=get_stdout())
            return

        from rich.segment import Segment, Segments

        line = " ".join(str(obj) for obj in objects)
        rich_console.print(Segments([Segment(line), Segment.line()]), style=style)


console = _ConsoleProxy()

"""Diagnostic sinks for grouped output (panel enumeration and similar).

// [LAW:locality-or-seam] The store never prints; it writes to an injected sink.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text
from rich.tree import Tree


class LoggingSink:
    """Writes groups and lines to a logger, indenting lines by group depth."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("story_nav.diagnostics")
        self._level = level
        self._depth = 0

    def group(self, label: str) -> None:
        self._logger.log(self._level, "%s%s", "  " * self._depth, label)
        self._depth += 1

    def log(self, message: str) -> None:
        self._logger.log(self._level, "%s%s", "  " * self._depth, message)

    def group_end(self) -> None:
        self._depth = max(0, self._depth - 1)


class RichSink:
    """Collects a group into a rich Tree and prints it when the outermost group closes.

    Text is added as plain Text so panel titles are never parsed as markup.
    Lines logged outside any group are printed directly.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console(stderr=True)
        self._stack: list[Tree] = []

    def group(self, label: str) -> None:
        tree = Tree(Text(label, style="bold"), guide_style="dim")
        if self._stack:
            self._stack[-1].children.append(tree)
        self._stack.append(tree)

    def log(self, message: str) -> None:
        if self._stack:
            self._stack[-1].add(Text(message))
        else:
            self._console.print(Text(message))

    def group_end(self) -> None:
        if not self._stack:
            return
        tree = self._stack.pop()
        if not self._stack:
            self._console.print(tree)

"""Rendered output lines and blank-line separated line groups."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from vclpy.ast import Statement
from vclpy.format.text import last_line_width


@dataclass(slots=True)
class Line:
    """One rendered statement.

    `buffer` holds the statement text with its indentation and never the
    trailing comment, so that trailing comments can be aligned afterwards.
    `blank_line` marks a user blank line preceding the statement; it is
    written between the leading comment block and the statement.
    """

    leading: str = ""
    buffer: str = ""
    trailing: str = ""
    blank_line: bool = False

    @property
    def width(self) -> int:
        return last_line_width(self.buffer)

    def render(self) -> str:
        blank = "\n" if self.blank_line else ""
        return self.leading + blank + self.buffer + self.trailing


@dataclass(slots=True)
class LineGroup:
    """Contiguous lines with no user blank line between them."""

    lines: list[Line] = field(default_factory=list)

    def align(self) -> None:
        """Pad buffers so trailing comments in this group share one column."""
        if not any(line.trailing for line in self.lines):
            return

        column = max(line.width for line in self.lines)
        for line in self.lines:
            if not line.trailing:
                continue
            line.buffer += " " * (column - line.width)

    def render(self) -> str:
        return "".join(line.render() + "\n" for line in self.lines)


@dataclass(slots=True)
class GroupedLines:
    groups: list[LineGroup] = field(default_factory=list)

    def align(self) -> None:
        for group in self.groups:
            group.align()

    def render(self) -> str:
        return "".join(group.render() for group in self.groups)


def group_statements(statements: Sequence[Statement]) -> list[list[int]]:
    """Indices of `statements` grouped at every preceding user blank line."""
    groups: list[list[int]] = []
    current: list[int] = []
    for index, statement in enumerate(statements):
        if statement.meta.previous_empty_lines > 0 and current:
            groups.append(current)
            current = []
        current.append(index)
    if current:
        groups.append(current)
    return groups

"""Format run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from vclpy.ast import SourceFile
from vclpy.format.options import FormatOptions


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting one source tree."""

    source: SourceFile
    options: FormatOptions
    formatted_text: str
    changed: bool

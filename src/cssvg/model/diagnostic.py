"""Diagnostic model: non-fatal warnings attached to CSS declarations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding raised while rewriting a stylesheet.

    Attributes:
        plugin: Name of the component that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        prop: The declaration property involved, if applicable.
        line: 1-based source line of the declaration, if known.
        column: 1-based source column of the declaration, if known.
    """

    plugin: str
    severity: Severity
    message: str
    prop: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [{self.line}:{self.column}]"
        if self.prop:
            location += f" {self.prop}"
        return f"{self.severity.value}{location}: {self.message} ({self.plugin})"

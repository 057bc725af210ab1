"""Stylesheet model: Declaration and Stylesheet dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass
class Declaration:
    """A ``prop: value`` pair. ``value`` is rewritten in place.

    The raw text around the value is kept so that an untouched declaration
    serializes back exactly:
        ``{prop}{between}{value}{important}{after}``
    """

    prop: str
    value: str
    between: str = ":"
    important: str = ""  # raw " !important" suffix, if any
    after: str = ""
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        return f"{self.prop}{self.between}{self.value}{self.important}{self.after}"


Part = Union[str, Declaration]


@dataclass
class Stylesheet:
    """A stylesheet as raw text chunks interleaved with declarations."""

    parts: list[Part] = field(default_factory=list)

    @property
    def declarations(self) -> list[Declaration]:
        return [p for p in self.parts if isinstance(p, Declaration)]

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield declarations in source order."""
        for part in self.parts:
            if isinstance(part, Declaration):
                yield part

    def __str__(self) -> str:
        return "".join(str(p) for p in self.parts)

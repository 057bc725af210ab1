from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MinifyOptions:
    encode: bool | None = None  # None = keep the encoding the source used
    optimizer: dict[str, Any] = field(default_factory=dict)  # passed through untouched

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> MinifyOptions:
        """Build options from a flat mapping; ``encode`` is consumed, the rest go to the optimizer."""
        if not options:
            return cls()
        optimizer = {k: v for k, v in options.items() if k != "encode"}
        return cls(encode=options.get("encode"), optimizer=optimizer)

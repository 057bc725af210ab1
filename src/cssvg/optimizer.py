"""SVG optimizer contract and the default scour-backed implementation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from scour.scour import parse_args as scour_parse_args
from scour.scour import scourString

logger = logging.getLogger(__name__)

__all__ = [
    "OptimizeResult",
    "Optimizer",
    "DEFAULT_SCOUR_ARGS",
    "scour_args",
    "scour_optimize",
    "identity_optimize",
]

# Minifying preset: no pretty-printing, no prolog, comments and metadata gone.
DEFAULT_SCOUR_ARGS: tuple[str, ...] = (
    "--quiet",
    "--indent=none",
    "--no-line-breaks",
    "--strip-xml-prolog",
    "--enable-comment-stripping",
    "--remove-metadata",
    "--remove-descriptive-elements",
)


@dataclass(frozen=True)
class OptimizeResult:
    """What an optimizer hands back: optimized markup in ``data`` or a message in ``error``."""

    data: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


Optimizer = Callable[[str, Mapping[str, Any]], OptimizeResult]


def scour_args(options: Mapping[str, Any] | None = None) -> list[str]:
    """Translate optimizer options into scour command-line arguments.

    ``{"set_precision": 5}`` becomes ``--set-precision=5``, ``True`` adds a bare
    flag, ``False`` drops the flag (including one from the defaults), ``None``
    is ignored.
    """
    args = list(DEFAULT_SCOUR_ARGS)
    for key, value in (options or {}).items():
        flag = "--" + key.replace("_", "-")
        args = [a for a in args if a != flag and not a.startswith(flag + "=")]
        if value is None or value is False:
            continue
        if value is True:
            args.append(flag)
        else:
            args.append(f"{flag}={value}")
    return args


def scour_optimize(markup: str, options: Mapping[str, Any] | None = None) -> OptimizeResult:
    """Optimize *markup* with scour, reporting failures through ``error``."""
    args = scour_args(options)
    try:
        scour_options = scour_parse_args(args)
    except SystemExit:
        # optparse exits on unknown flags
        return OptimizeResult(error=f"Invalid scour options: {' '.join(args)}")

    try:
        data = scourString(markup, options=scour_options)
    except Exception as exc:
        logger.debug("scour failed: %s", exc)
        return OptimizeResult(error=f"{type(exc).__name__}: {exc}")
    return OptimizeResult(data=data.strip())


def identity_optimize(markup: str, options: Mapping[str, Any] | None = None) -> OptimizeResult:
    """Return *markup* unchanged."""
    return OptimizeResult(data=markup)

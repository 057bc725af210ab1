"""cssvg model layer -- public type re-exports."""

from cssvg.model.diagnostic import Diagnostic, Severity

__all__ = [
    "Severity",
    "Diagnostic",
]

# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Findings are represented by immutable `Diagnostic` instances.
    - During a lint run, diagnostics are accumulated in a mutable `DiagnosticLog`.
    - Callers that keep results around store a `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from blockwords.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]

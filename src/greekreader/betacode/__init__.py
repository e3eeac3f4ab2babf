"""
Beta-code conversion submodule.

Re-exports the mapping table and the word scanner.
"""

from greekreader.betacode._table import DEFAULT_TABLE_PATH, MappingTable
from greekreader.betacode._rules import (
    CAPITAL_MARKER,
    DIACRITICALS,
    BetaCodeConverter,
    Passthrough,
    TransliterationResult,
    convert_betacode,
    is_diacritical,
    normalize_final_sigma,
    resolve_buffers,
)

__all__ = [
    "BetaCodeConverter",
    "MappingTable",
    "Passthrough",
    "TransliterationResult",
    "convert_betacode",
    "normalize_final_sigma",
    "resolve_buffers",
    "is_diacritical",
    "DIACRITICALS",
    "CAPITAL_MARKER",
    "DEFAULT_TABLE_PATH",
]

"""
Phase-01: Core Constants and Errors

Exports:
    - PRIORITY_FLOOR / PRIORITY_CEILING: Valid priority bounds
    - GENESIS_HASH: First prev_hash of the audit chain
    - CrystallineError and its subclasses
"""

from crystalline.phase01_core.constants import (
    SYSTEM_NAME,
    PROOF_ALGORITHM,
    PRIORITY_FLOOR,
    PRIORITY_CEILING,
    TIE_BREAK_POLICY,
    GENESIS_HASH,
    PROOF_ID_PREFIX,
)
from crystalline.phase01_core.errors import (
    CrystallineError,
    PriorityOverflowError,
    AxiomaticParadoxError,
    InvalidWorldStateError,
    DuplicateRuleError,
    UnknownRuleError,
    LedgerIntegrityError,
)

__all__ = [
    "SYSTEM_NAME",
    "PROOF_ALGORITHM",
    "PRIORITY_FLOOR",
    "PRIORITY_CEILING",
    "TIE_BREAK_POLICY",
    "GENESIS_HASH",
    "PROOF_ID_PREFIX",
    "CrystallineError",
    "PriorityOverflowError",
    "AxiomaticParadoxError",
    "InvalidWorldStateError",
    "DuplicateRuleError",
    "UnknownRuleError",
    "LedgerIntegrityError",
]

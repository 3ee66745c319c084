"""
Phase-07: Arbitration Engine

Single commit path from stored rules to recorded proofs.

Exports:
    - ArbitrationEngine: Store + resolver + proof + ledger
    - ArbitrationOutcome: Frozen dataclass for committed resolutions
    - VerdictOutcome: Frozen dataclass for committed verdicts
"""
from .arbitration_context import ArbitrationOutcome, VerdictOutcome
from .arbitration_engine import ArbitrationEngine

__all__ = [
    "ArbitrationEngine",
    "ArbitrationOutcome",
    "VerdictOutcome",
]

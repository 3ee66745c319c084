"""
Phase-07 Arbitration Context.

Frozen dataclasses returned by the arbitration engine.
"""
from dataclasses import dataclass

from crystalline.phase04_resolution.resolution_result import ResolutionResult
from crystalline.phase05_proof.proof_context import FormalProof
from crystalline.phase06_verdict.verdict_context import LogicVerdict


@dataclass(frozen=True)
class ArbitrationOutcome:
    """Committed resolution and its recorded proof.

    Attributes:
        result: Resolution result
        proof: Proof appended to the audit ledger
        sequence: Ledger sequence of the proof
    """
    result: ResolutionResult
    proof: FormalProof
    sequence: int


@dataclass(frozen=True)
class VerdictOutcome:
    """Committed verdict and its recorded proof."""
    verdict: LogicVerdict
    proof: FormalProof
    sequence: int

"""
Phase-05 Proof Context.

This module defines frozen dataclasses for proof records.

All dataclasses are frozen=True for immutability.
"""
from dataclasses import dataclass
from typing import Tuple, Union


Decision = Union[int, bool]


@dataclass(frozen=True)
class ProofContext:
    """Context a decision is proven in.

    Attributes:
        sequence: Block height or ledger sequence number
        label: Requesting subsystem or free-text tag
    """
    sequence: int
    label: str = ""


@dataclass(frozen=True)
class FormalProof:
    """Immutable audit record of a decision.

    Attributes:
        proof_id: Unique per decision, stable on replay
        timestamp: ISO timestamp of generation
        decision: Winning rule id, or allow/deny for verdicts
        confidence_score: Weight behind the decision
        integrity_hash: sha256 over decision, timestamp and participants
        trace_log: Ordered reasoning steps
        sequence: Context sequence number
        participants: Ids of rules involved
    """
    proof_id: str
    timestamp: str
    decision: Decision
    confidence_score: int
    integrity_hash: str
    trace_log: Tuple[str, ...]
    sequence: int = 0
    participants: Tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "proof_id": self.proof_id,
            "timestamp": self.timestamp,
            "decision": self.decision,
            "confidence_score": self.confidence_score,
            "integrity_hash": self.integrity_hash,
            "trace_log": list(self.trace_log),
            "sequence": self.sequence,
            "participants": list(self.participants),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "FormalProof":
        return cls(
            proof_id=d["proof_id"],
            timestamp=d["timestamp"],
            decision=d["decision"],
            confidence_score=d["confidence_score"],
            integrity_hash=d["integrity_hash"],
            trace_log=tuple(d.get("trace_log", ())),
            sequence=d.get("sequence", 0),
            participants=tuple(d.get("participants", ())),
        )

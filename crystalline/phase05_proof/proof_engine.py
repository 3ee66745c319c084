"""
Phase-05 Proof Engine.

Builds FormalProof records from resolution results.

Everything except the timestamp is a pure function of the
result and the context. The timestamp never takes part in
equivalence checks.
"""
import hashlib
import hmac
import json
from datetime import datetime, UTC
from typing import Iterable, Optional, Sequence

from crystalline.phase01_core.constants import PROOF_ALGORITHM, PROOF_ID_PREFIX
from crystalline.phase01_core.errors import AxiomaticParadoxError
from crystalline.phase04_resolution.resolution_result import ResolutionResult

from .proof_context import Decision, FormalProof, ProofContext


def _digest(payload: dict) -> str:
    data = json.dumps(payload, sort_keys=True)
    return hashlib.new(PROOF_ALGORITHM, data.encode()).hexdigest()


def utc_timestamp() -> str:
    """Current wall-clock time as an ISO timestamp."""
    return datetime.now(UTC).isoformat()


def compute_integrity_hash(
    decision: Decision,
    timestamp: str,
    participants: Iterable[int]
) -> str:
    """Fingerprint binding a decision to its timestamp and rules.

    Args:
        decision: Rule id or allow/deny flag
        timestamp: ISO timestamp of the proof
        participants: Rule ids, order-insensitive

    Returns:
        sha256 hex digest
    """
    return _digest({
        "decision": decision,
        "timestamp": timestamp,
        "participants": sorted(participants),
    })


def compute_proof_id(context: ProofContext, decision: Decision, participants: Sequence[int]) -> str:
    """Deterministic proof id for a decision at a sequence number."""
    digest = _digest({
        "sequence": context.sequence,
        "decision": decision,
        "participants": list(participants),
    })
    return f"{PROOF_ID_PREFIX}-{context.sequence:08d}-{digest[:12]}"


def build_proof(
    decision: Decision,
    confidence_score: int,
    participants: Sequence[int],
    trace: Sequence[str],
    context: ProofContext,
    timestamp: Optional[str] = None
) -> FormalProof:
    """Assemble a FormalProof.

    Raises:
        ValueError: Negative context sequence
    """
    if context.sequence < 0:
        raise ValueError(f"Proof sequence must be non-negative, got {context.sequence}")

    timestamp = timestamp or utc_timestamp()
    participants = tuple(participants)
    proof_id = compute_proof_id(context, decision, participants)
    label = f" [{context.label}]" if context.label else ""

    trace_log = tuple(trace) + (
        f"PROVE {proof_id} at sequence {context.sequence}{label}: "
        f"decision={decision} confidence={confidence_score}",
    )

    return FormalProof(
        proof_id=proof_id,
        timestamp=timestamp,
        decision=decision,
        confidence_score=confidence_score,
        integrity_hash=compute_integrity_hash(decision, timestamp, participants),
        trace_log=trace_log,
        sequence=context.sequence,
        participants=participants
    )


def generate_proof(
    result: ResolutionResult,
    context: ProofContext,
    timestamp: Optional[str] = None
) -> FormalProof:
    """
    Generate the audit record for a resolution.

    decision is the winning rule id; confidence_score is the
    winning rule's priority.

    Args:
        result: Completed resolution
        context: Sequence number and label
        timestamp: Override for wall-clock time

    Returns:
        FormalProof

    Raises:
        AxiomaticParadoxError: Result has no winning rule
    """
    winner = result.winning_rule
    if winner is None:
        raise AxiomaticParadoxError(
            message="Cannot prove a resolution without a winning rule",
            reason="NO_WINNER"
        )

    return build_proof(
        decision=winner.id,
        confidence_score=winner.priority,
        participants=result.participants or (winner.id,),
        trace=result.trace,
        context=context,
        timestamp=timestamp
    )


def verify_proof(proof: FormalProof) -> bool:
    """Check the integrity hash matches the proof contents."""
    expected = compute_integrity_hash(proof.decision, proof.timestamp, proof.participants)
    return hmac.compare_digest(expected, proof.integrity_hash)


def proofs_equivalent(first: FormalProof, second: FormalProof) -> bool:
    """Compare two proofs ignoring timestamp and the hash derived from it."""
    return (
        first.proof_id == second.proof_id
        and first.decision == second.decision
        and type(first.decision) is type(second.decision)
        and first.confidence_score == second.confidence_score
        and first.trace_log == second.trace_log
        and first.sequence == second.sequence
        and first.participants == second.participants
    )

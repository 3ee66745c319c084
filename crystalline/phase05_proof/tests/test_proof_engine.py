"""
Tests for Phase-05 Proof Engine.

Tests verify:
- decision and confidence come from the winning rule
- Same result and context reproduce the same proof (timestamp excluded)
- Integrity hash is a pure function of decision, timestamp and participants
- Trace log extends the resolution trace
"""
import pytest


TS = "2026-01-25T08:35:00+00:00"


def _rule(rule_id, modality_name, priority):
    from crystalline.phase02_rules.rule_context import Rule
    from crystalline.phase02_rules.rule_types import Modality
    return Rule(
        id=rule_id,
        description=f"rule {rule_id}",
        modality=Modality[modality_name],
        priority=priority
    )


def _result():
    from crystalline.phase04_resolution.resolver import resolve_conflict
    return resolve_conflict(_rule(1, "OBLIGATION", 900), _rule(2, "PROHIBITION", 100))


class TestGenerateProof:
    """Test generate_proof."""

    def test_decision_is_winning_rule_id(self):
        """Decision is the winning rule id."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=7))
        assert proof.decision == 1

    def test_confidence_is_winning_priority(self):
        """Confidence score passes the winning priority through."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=7))
        assert proof.confidence_score == 900

    def test_proof_id_format(self):
        """Proof id carries prefix and sequence."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=42))
        assert proof.proof_id.startswith("PRF-00000042-")
        assert proof.sequence == 42

    def test_proof_id_differs_per_sequence(self):
        """Different sequence numbers give different proof ids."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        result = _result()
        first = generate_proof(result, ProofContext(sequence=1))
        second = generate_proof(result, ProofContext(sequence=2))
        assert first.proof_id != second.proof_id

    def test_trace_extends_resolution_trace(self):
        """Trace log is the resolution trace plus a proof step."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        result = _result()
        proof = generate_proof(result, ProofContext(sequence=3, label="vault"))
        assert proof.trace_log[:-1] == result.trace
        assert proof.trace_log[-1].startswith("PROVE ")
        assert "[vault]" in proof.trace_log[-1]

    def test_no_winner_is_paradox(self):
        """A result without a winner cannot be proven."""
        from crystalline.phase01_core.errors import AxiomaticParadoxError
        from crystalline.phase03_conflict.conflict_types import ConflictType
        from crystalline.phase04_resolution.resolution_result import ResolutionResult
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        empty = ResolutionResult(
            winning_rule=None,
            conflict_type=ConflictType.AXIOMATIC_VIOLATION,
            resolved_by="no valid rule"
        )
        with pytest.raises(AxiomaticParadoxError):
            generate_proof(empty, ProofContext(sequence=0))

    def test_negative_sequence_rejected(self):
        """Negative sequence raises ValueError."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        with pytest.raises(ValueError):
            generate_proof(_result(), ProofContext(sequence=-1))


class TestReproducibility:
    """Test proof reproducibility."""

    def test_same_inputs_equivalent_proofs(self):
        """Repeated generation is equivalent ignoring timestamp."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof, proofs_equivalent

        result = _result()
        context = ProofContext(sequence=11)
        first = generate_proof(result, context, timestamp=TS)
        second = generate_proof(result, context, timestamp="2027-02-01T00:00:00+00:00")
        assert proofs_equivalent(first, second)
        assert first.decision == second.decision
        assert first.confidence_score == second.confidence_score

    def test_fixed_timestamp_gives_identical_proof(self):
        """Fixed timestamp gives byte-identical proofs."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        result = _result()
        context = ProofContext(sequence=11)
        assert generate_proof(result, context, TS) == generate_proof(result, context, TS)

    def test_wall_clock_timestamp_is_iso(self):
        """Default timestamp is an ISO UTC string."""
        from datetime import datetime
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=0))
        assert datetime.fromisoformat(proof.timestamp).utcoffset() is not None


class TestIntegrityHash:
    """Test compute_integrity_hash and verify_proof."""

    def test_hash_is_sha256_hex(self):
        """Hash is 64 hex characters."""
        from crystalline.phase05_proof.proof_engine import compute_integrity_hash

        digest = compute_integrity_hash(1, TS, [1, 2])
        assert len(digest) == 64
        int(digest, 16)

    def test_hash_ignores_participant_order(self):
        """Participant order does not change the hash."""
        from crystalline.phase05_proof.proof_engine import compute_integrity_hash

        assert compute_integrity_hash(1, TS, [1, 2]) == compute_integrity_hash(1, TS, [2, 1])

    def test_hash_binds_timestamp(self):
        """Different timestamp, different hash."""
        from crystalline.phase05_proof.proof_engine import compute_integrity_hash

        assert compute_integrity_hash(1, TS, [1, 2]) != compute_integrity_hash(1, "x", [1, 2])

    def test_hash_distinguishes_bool_and_id(self):
        """Verdict True and rule id 1 hash differently."""
        from crystalline.phase05_proof.proof_engine import compute_integrity_hash

        assert compute_integrity_hash(True, TS, [1]) != compute_integrity_hash(1, TS, [1])

    def test_verify_untampered_proof(self):
        """Generated proof verifies."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof, verify_proof

        assert verify_proof(generate_proof(_result(), ProofContext(sequence=1)))

    def test_verify_tampered_proof_fails(self):
        """Altered decision fails verification."""
        import dataclasses
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof, verify_proof

        proof = generate_proof(_result(), ProofContext(sequence=1))
        forged = dataclasses.replace(proof, decision=2)
        assert verify_proof(forged) is False


class TestFormalProofImmutability:
    """Test FormalProof immutability."""

    def test_proof_is_frozen(self):
        """FormalProof cannot be mutated."""
        from crystalline.phase05_proof.proof_context import ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=1))
        with pytest.raises((AttributeError, TypeError)):
            proof.decision = 2

    def test_dict_round_trip(self):
        """from_dict(to_dict()) rebuilds the proof."""
        from crystalline.phase05_proof.proof_context import FormalProof, ProofContext
        from crystalline.phase05_proof.proof_engine import generate_proof

        proof = generate_proof(_result(), ProofContext(sequence=1))
        assert FormalProof.from_dict(proof.to_dict()) == proof

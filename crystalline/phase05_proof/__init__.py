"""
Phase-05 Proof Records & Audit Ledger.

THIS IS A RECORD LAYER ONLY.
IT DOES NOT RESOLVE CONFLICTS.

Exports:
    Dataclasses (all frozen=True):
        ProofContext: Sequence number and label
        FormalProof: Audit record

    Classes:
        AuditLedger: Append-only hash-chained log

    Functions:
        generate_proof: Proof for a ResolutionResult
        build_proof: Proof from raw decision fields
        compute_integrity_hash: sha256 fingerprint
        verify_proof: Recompute and compare fingerprint
        proofs_equivalent: Compare ignoring timestamp
"""
from .proof_context import ProofContext, FormalProof
from .proof_engine import (
    generate_proof,
    build_proof,
    compute_integrity_hash,
    compute_proof_id,
    verify_proof,
    proofs_equivalent,
    utc_timestamp,
)
from .audit_ledger import AuditLedger

__all__ = [
    # Dataclasses
    "ProofContext",
    "FormalProof",
    # Functions
    "generate_proof",
    "build_proof",
    "compute_integrity_hash",
    "compute_proof_id",
    "verify_proof",
    "proofs_equivalent",
    "utc_timestamp",
    # Classes
    "AuditLedger",
]

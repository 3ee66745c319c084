"""
AUDIT LEDGER - Append-Only Hash-Chained Proof Log
=================================================
Rules:
  - Entries are never modified or removed
  - Each entry carries the hash of the previous one
  - Sequence numbers are monotonic and gap-free
  - One writer at a time; appends are serialized by a lock
  - Replayed proof ids are rejected
  - Optional JSONL persistence, one entry per line
=================================================
"""

import copy
import hashlib
import json
import logging
import os
import threading
import time
from typing import List, Optional

from crystalline.phase01_core.constants import GENESIS_HASH
from crystalline.phase01_core.errors import LedgerIntegrityError

from .proof_context import FormalProof

logger = logging.getLogger("crystalline.audit")

ENTRY_KEYS = ("sequence", "proof", "prev_hash", "entry_hash")


def _entry_hash(entry: dict) -> str:
    entry_data = json.dumps(
        {k: v for k, v in entry.items() if k != "entry_hash"},
        sort_keys=True
    )
    return hashlib.sha256(entry_data.encode()).hexdigest()


def _chain_is_valid(entries: List[dict]) -> bool:
    prev_hash = GENESIS_HASH
    for index, entry in enumerate(entries):
        try:
            if entry["sequence"] != index:
                return False
            if entry["prev_hash"] != prev_hash:
                return False
            if _entry_hash(entry) != entry["entry_hash"]:
                return False
        except KeyError:
            return False
        prev_hash = entry["entry_hash"]
    return True


class AuditLedger:
    """Append-only, hash-chained ledger of FormalProof records."""

    def __init__(self, ledger_path: Optional[str] = None):
        self._path = ledger_path
        self._entries: List[dict] = []
        self._chain_hash = GENESIS_HASH
        self._proof_ids: set = set()
        self._lock = threading.Lock()

    # ---------------------------------------------------------
    # APPEND - add proof to ledger (append-only)
    # ---------------------------------------------------------
    def append(self, proof: FormalProof) -> dict:
        """Append a proof. Immutable - entries never modified.

        Raises:
            LedgerIntegrityError: proof_id already recorded
        """
        with self._lock:
            if proof.proof_id in self._proof_ids:
                logger.warning("Rejected replayed proof %s", proof.proof_id)
                raise LedgerIntegrityError(
                    message=f"Proof {proof.proof_id} already recorded",
                    reason="DUPLICATE_PROOF"
                )

            entry = {
                "sequence": len(self._entries),
                "proof": proof.to_dict(),
                "prev_hash": self._chain_hash,
                "entry_hash": "",
                "appended_at": time.time()
            }
            entry["entry_hash"] = _entry_hash(entry)

            self._persist(entry)
            self._chain_hash = entry["entry_hash"]
            self._proof_ids.add(proof.proof_id)
            self._entries.append(entry)

        logger.info("Recorded proof %s at sequence %d", proof.proof_id, entry["sequence"])
        return copy.deepcopy(entry)

    # ---------------------------------------------------------
    # VERIFY CHAIN - validate entire ledger integrity
    # ---------------------------------------------------------
    def verify_chain(self) -> bool:
        """Verify hash chain integrity. Returns False if tampered."""
        with self._lock:
            entries = list(self._entries)
        return _chain_is_valid(entries)

    # ---------------------------------------------------------
    # QUERY
    # ---------------------------------------------------------
    @property
    def next_sequence(self) -> int:
        """Sequence number the next append will receive."""
        with self._lock:
            return len(self._entries)

    @property
    def entry_count(self) -> int:
        return self.next_sequence

    @property
    def chain_hash(self) -> str:
        return self._chain_hash

    @property
    def entries(self) -> List[dict]:
        with self._lock:
            return copy.deepcopy(self._entries)

    def proofs(self) -> List[FormalProof]:
        return [FormalProof.from_dict(e["proof"]) for e in self.entries]

    def get_proof(self, proof_id: str) -> Optional[FormalProof]:
        """Find a recorded proof by id."""
        for entry in self.entries:
            if entry["proof"]["proof_id"] == proof_id:
                return FormalProof.from_dict(entry["proof"])
        return None

    # ---------------------------------------------------------
    # PERSISTENCE - append-only file
    # ---------------------------------------------------------
    def _persist(self, entry: dict) -> None:
        """Append entry to file. Creates directory if needed."""
        if not self._path:
            return
        os.makedirs(os.path.dirname(self._path) or ".", exist_ok=True)
        with open(self._path, "a") as f:
            f.write(json.dumps(entry, sort_keys=True) + "\n")

    def load(self) -> None:
        """Load existing ledger from file.

        Parsed entries replace the in-memory ledger only after the
        whole file verifies; on failure the ledger is left empty.

        Raises:
            LedgerIntegrityError: Malformed line, replayed proof id
                or broken chain
        """
        with self._lock:
            self._entries = []
            self._chain_hash = GENESIS_HASH
            self._proof_ids = set()

            if not self._path or not os.path.exists(self._path):
                return

            entries: List[dict] = []
            proof_ids: set = set()
            with open(self._path, "r") as f:
                for line_no, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        entry = json.loads(line)
                        missing = [k for k in ENTRY_KEYS if k not in entry]
                        if missing:
                            raise KeyError(missing[0])
                        proof_id = entry["proof"]["proof_id"]
                        if not isinstance(proof_id, str):
                            raise TypeError(f"proof_id must be a string, got {proof_id!r}")
                    except (json.JSONDecodeError, KeyError, TypeError) as exc:
                        logger.error("Audit ledger %s line %d is malformed", self._path, line_no)
                        raise LedgerIntegrityError(
                            message=f"Ledger file {self._path} line {line_no}: {exc!r}",
                            reason="MALFORMED_ENTRY"
                        ) from exc
                    if proof_id in proof_ids:
                        logger.error("Audit ledger %s replays proof %s", self._path, proof_id)
                        raise LedgerIntegrityError(
                            message=f"Ledger file {self._path} records {proof_id} twice",
                            reason="DUPLICATE_PROOF"
                        )
                    proof_ids.add(proof_id)
                    entries.append(entry)

            if not _chain_is_valid(entries):
                logger.error("Audit ledger %s failed chain verification", self._path)
                raise LedgerIntegrityError(
                    message=f"Ledger file {self._path} is tampered",
                    reason="CHAIN_BROKEN"
                )

            self._entries = entries
            self._chain_hash = entries[-1]["entry_hash"] if entries else GENESIS_HASH
            self._proof_ids = proof_ids

        logger.info("Loaded %d audit entries from %s", len(entries), self._path)

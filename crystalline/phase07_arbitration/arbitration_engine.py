"""
Phase-07 Arbitration Engine.

Composes the rule store, resolver, proof generator and audit
ledger into a single commit path.

A failed resolution produces no result and no proof. Nothing is
appended to the ledger unless every earlier step succeeded.
"""
import logging
import threading
from typing import Optional, Sequence

from crystalline.phase01_core.errors import CrystallineError
from crystalline.phase02_rules.rule_store import RuleStore
from crystalline.phase04_resolution.resolution_types import ResolutionStrategy
from crystalline.phase04_resolution.resolver import resolve_conflict, resolve_rule_set
from crystalline.phase05_proof.audit_ledger import AuditLedger
from crystalline.phase05_proof.proof_context import ProofContext
from crystalline.phase05_proof.proof_engine import generate_proof
from crystalline.phase06_verdict.verdict_context import NormTrigger, WorldState
from crystalline.phase06_verdict.verdict_engine import evaluate_verdict, generate_verdict_proof

from .arbitration_context import ArbitrationOutcome, VerdictOutcome

logger = logging.getLogger("crystalline.engine")


class ArbitrationEngine:
    """Resolves stored rules and records every decision.

    The store and ledger are owned by the caller and passed in;
    the engine keeps no other state.
    """

    def __init__(
        self,
        store: RuleStore,
        ledger: Optional[AuditLedger] = None,
        strategy: ResolutionStrategy = ResolutionStrategy.STANDARD_WEIGHTED
    ):
        self.store = store
        self.ledger = ledger or AuditLedger()
        self.strategy = strategy
        # sequence allocation and append must not interleave
        self._commit_lock = threading.Lock()

    def arbitrate(self, rule_id_a: int, rule_id_b: int, label: str = "") -> ArbitrationOutcome:
        """Resolve two stored rules and record the proof.

        Raises:
            UnknownRuleError: Rule id not in store
            AxiomaticParadoxError / PriorityOverflowError: Invalid rule
        """
        a = self.store.get(rule_id_a)
        b = self.store.get(rule_id_b)
        try:
            result = resolve_conflict(a, b, self.strategy)
        except CrystallineError as exc:
            logger.warning("Arbitration %d vs %d failed: %s", rule_id_a, rule_id_b, exc)
            raise

        with self._commit_lock:
            sequence = self.ledger.next_sequence
            proof = generate_proof(result, ProofContext(sequence=sequence, label=label))
            self.ledger.append(proof)

        logger.info("Rule %d prevailed over %s (%s)",
                    proof.decision, result.participants, result.conflict_type.name)
        return ArbitrationOutcome(result=result, proof=proof, sequence=sequence)

    def arbitrate_set(self, rule_ids: Sequence[int], label: str = "") -> ArbitrationOutcome:
        """Resolve two or more stored rules and record the proof."""
        rules = [self.store.get(rule_id) for rule_id in rule_ids]
        try:
            result = resolve_rule_set(rules, self.strategy)
        except CrystallineError as exc:
            logger.warning("Arbitration of %s failed: %s", list(rule_ids), exc)
            raise

        with self._commit_lock:
            sequence = self.ledger.next_sequence
            proof = generate_proof(result, ProofContext(sequence=sequence, label=label))
            self.ledger.append(proof)

        logger.info("Rule %d prevailed over %s", proof.decision, result.participants)
        return ArbitrationOutcome(result=result, proof=proof, sequence=sequence)

    def evaluate(
        self,
        state: WorldState,
        triggers: Sequence[NormTrigger],
        profit: float = 0.0,
        label: str = ""
    ) -> VerdictOutcome:
        """Weigh triggered rules for a snapshot and record the proof."""
        verdict = evaluate_verdict(self.store, triggers, state, profit, self.strategy)

        with self._commit_lock:
            sequence = self.ledger.next_sequence
            proof = generate_verdict_proof(verdict, ProofContext(sequence=sequence, label=label))
            self.ledger.append(proof)

        logger.info("Verdict %s recorded at sequence %d",
                    "ALLOW" if verdict.is_allowed else "DENY", sequence)
        return VerdictOutcome(verdict=verdict, proof=proof, sequence=sequence)

"""
Tests for Phase-07 Arbitration Engine.

Tests verify:
- Successful arbitration commits exactly one proof
- Failed arbitration commits nothing
- Sequence numbers follow the ledger
- Verdicts are recorded alongside resolutions
"""
import pytest


def _engine(strategy=None, extra=()):
    from crystalline.phase02_rules.rule_store import load_policy
    from crystalline.phase05_proof.audit_ledger import AuditLedger
    from crystalline.phase07_arbitration.arbitration_engine import ArbitrationEngine
    from crystalline.phase04_resolution.resolution_types import ResolutionStrategy

    store = load_policy([
        {"id": 1, "description": "keep solvent", "modality": "OBLIGATION", "priority": 900},
        {"id": 2, "description": "no extraction", "modality": "PROHIBITION", "priority": 100},
        {"id": 3, "description": "may rebalance", "modality": "PERMISSION", "priority": 100},
        *extra,
    ])
    return ArbitrationEngine(
        store,
        AuditLedger(),
        strategy or ResolutionStrategy.STANDARD_WEIGHTED
    )


class TestArbitrate:
    """Test pairwise arbitration."""

    def test_commits_proof(self):
        """Winner recorded in ledger."""
        from crystalline.phase03_conflict.conflict_types import ConflictType

        engine = _engine()
        outcome = engine.arbitrate(1, 2, label="vault")
        assert outcome.result.winning_rule.id == 1
        assert outcome.result.conflict_type == ConflictType.LOGICAL_CONTRADICTION
        assert outcome.proof.decision == 1
        assert outcome.sequence == 0
        assert engine.ledger.entry_count == 1
        assert engine.ledger.get_proof(outcome.proof.proof_id) == outcome.proof

    def test_sequences_increase(self):
        """Each commit gets the next ledger sequence."""
        engine = _engine()
        first = engine.arbitrate(1, 2)
        second = engine.arbitrate(2, 3)
        assert (first.sequence, second.sequence) == (0, 1)
        assert second.proof.proof_id.startswith("PRF-00000001-")
        assert engine.ledger.verify_chain()

    def test_unknown_rule_commits_nothing(self):
        """Missing rule raises and leaves ledger empty."""
        from crystalline.phase01_core.errors import UnknownRuleError

        engine = _engine()
        with pytest.raises(UnknownRuleError):
            engine.arbitrate(1, 99)
        assert engine.ledger.entry_count == 0

    def test_strict_safety_engine(self):
        """STRICT_SAFETY engine lets the prohibition win."""
        from crystalline.phase04_resolution.resolution_types import ResolutionStrategy

        engine = _engine(ResolutionStrategy.STRICT_SAFETY)
        assert engine.arbitrate(1, 2).proof.decision == 2


class TestFailedResolution:
    """Test no partial commit on failure."""

    def test_invalid_rule_commits_nothing(self):
        """Resolver error leaves ledger empty."""
        from crystalline.phase01_core.errors import PriorityOverflowError
        from crystalline.phase02_rules.rule_context import Rule
        from crystalline.phase02_rules.rule_types import Modality
        from crystalline.phase02_rules.rule_store import RuleStore
        from crystalline.phase07_arbitration.arbitration_engine import ArbitrationEngine

        store = RuleStore([Rule(1, "ok", Modality.OBLIGATION, 500)])
        # bypass registration checks to reach the resolver
        store._rules[99] = Rule(99, "heavy", Modality.PROHIBITION, 5000)
        engine = ArbitrationEngine(store)

        with pytest.raises(PriorityOverflowError) as info:
            engine.arbitrate(99, 1)
        assert info.value.priority == 5000
        assert engine.ledger.entry_count == 0


class TestArbitrateSet:
    """Test set arbitration."""

    def test_set_commits_proof(self):
        """Heaviest rule in the set wins and is recorded."""
        engine = _engine(extra=[
            {"id": 4, "description": "halt", "modality": "PROHIBITION", "priority": 950},
        ])
        outcome = engine.arbitrate_set([1, 2, 3, 4])
        assert outcome.proof.decision == 4
        assert outcome.proof.participants == (1, 2, 3, 4)
        assert engine.ledger.entry_count == 1

    def test_single_rule_set_commits_nothing(self):
        """Sets of one rule are rejected."""
        from crystalline.phase01_core.errors import AxiomaticParadoxError

        engine = _engine()
        with pytest.raises(AxiomaticParadoxError):
            engine.arbitrate_set([1])
        assert engine.ledger.entry_count == 0


class TestEvaluate:
    """Test recorded verdicts."""

    def test_verdict_recorded(self):
        """Verdict proof is appended after prior resolutions."""
        from crystalline.phase06_verdict.verdict_context import WorldState
        from crystalline.phase06_verdict.verdict_engine import default_triggers

        engine = _engine()
        engine.arbitrate(1, 2)
        state = WorldState(collateral_ratio=1.1, network_slippage=0.02, market_volatility=0.5)
        outcome = engine.evaluate(state, default_triggers(2, 1), profit=5.0)

        assert outcome.verdict.is_allowed is True
        assert outcome.proof.decision is True
        assert outcome.sequence == 1
        assert engine.ledger.verify_chain()

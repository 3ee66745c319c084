"""
Tests for Phase-02 Rule Store.

Tests:
- Registration validates rules
- Duplicate ids rejected
- Lookup by id and modality
- Policy loading from file and entries
"""
import json

import pytest


def _rule(rule_id, modality_name="OBLIGATION", priority=100):
    from crystalline.phase02_rules.rule_context import Rule
    from crystalline.phase02_rules.rule_types import Modality
    return Rule(
        id=rule_id,
        description=f"rule {rule_id}",
        modality=Modality[modality_name],
        priority=priority
    )


class TestRegistration:
    """Test RuleStore.register."""

    def test_register_and_get(self):
        """Registered rule is returned by id."""
        from crystalline.phase02_rules.rule_store import RuleStore
        store = RuleStore()
        rule = _rule(1)
        store.register(rule)
        assert store.get(1) == rule
        assert store.contains(1)
        assert len(store) == 1

    def test_invalid_rule_rejected(self):
        """Out-of-range priority is not admitted."""
        from crystalline.phase01_core.errors import PriorityOverflowError
        from crystalline.phase02_rules.rule_store import RuleStore
        store = RuleStore()
        with pytest.raises(PriorityOverflowError):
            store.register(_rule(1, priority=2000))
        assert len(store) == 0

    def test_duplicate_id_rejected(self):
        """Same id cannot be registered twice."""
        from crystalline.phase01_core.errors import DuplicateRuleError
        from crystalline.phase02_rules.rule_store import RuleStore
        store = RuleStore([_rule(1)])
        with pytest.raises(DuplicateRuleError):
            store.register(_rule(1, "PROHIBITION", 900))
        assert store.get(1).modality.name == "OBLIGATION"

    def test_unknown_id_raises(self):
        """Missing id raises UnknownRuleError."""
        from crystalline.phase01_core.errors import UnknownRuleError
        from crystalline.phase02_rules.rule_store import RuleStore
        with pytest.raises(UnknownRuleError):
            RuleStore().get(404)


class TestQueries:
    """Test store queries."""

    def test_iteration_keeps_registration_order(self):
        """Iteration follows registration order."""
        from crystalline.phase02_rules.rule_store import RuleStore
        store = RuleStore([_rule(3), _rule(1), _rule(2)])
        assert [r.id for r in store] == [3, 1, 2]

    def test_by_modality(self):
        """by_modality filters rules."""
        from crystalline.phase02_rules.rule_store import RuleStore
        from crystalline.phase02_rules.rule_types import Modality
        store = RuleStore([
            _rule(1, "OBLIGATION"),
            _rule(2, "PROHIBITION"),
            _rule(3, "PROHIBITION"),
        ])
        assert [r.id for r in store.by_modality(Modality.PROHIBITION)] == [2, 3]
        assert store.by_modality(Modality.PERMISSION) == []

    def test_separate_stores_do_not_share_state(self):
        """Two stores are independent."""
        from crystalline.phase02_rules.rule_store import RuleStore
        first = RuleStore([_rule(1)])
        second = RuleStore()
        assert len(first) == 1
        assert len(second) == 0


class TestLoadPolicy:
    """Test policy loading."""

    def test_load_from_entries(self):
        """Parsed entries build a store."""
        from crystalline.phase02_rules.rule_store import load_policy
        store = load_policy([
            {"id": 1, "description": "solvency", "modality": "Obligatory", "priority": 900},
            {"id": 2, "description": "mev guard", "modality": "PROHIBITION", "priority": 100},
        ])
        assert len(store) == 2
        assert store.get(2).modality.name == "PROHIBITION"

    def test_load_from_file(self, tmp_path):
        """JSON policy file builds a store."""
        from crystalline.phase02_rules.rule_store import load_policy
        path = tmp_path / "policy.json"
        path.write_text(json.dumps([
            {"id": 7, "description": "x", "modality": "permission", "priority": 5}
        ]))
        store = load_policy(str(path))
        assert store.get(7).priority == 5

    def test_missing_key_rejected(self):
        """Entry without priority raises ValueError."""
        from crystalline.phase02_rules.rule_store import load_policy
        with pytest.raises(ValueError):
            load_policy([{"id": 1, "modality": "OBLIGATION"}])

    def test_non_list_rejected(self):
        """Policy document must be a list."""
        from crystalline.phase02_rules.rule_store import load_policy
        with pytest.raises(ValueError):
            load_policy({"id": 1})

    def test_rule_round_trips_through_dict(self):
        """to_dict output is accepted by rule_from_dict."""
        from crystalline.phase02_rules.rule_store import rule_from_dict
        rule = _rule(9, "PROHIBITION", 250)
        assert rule_from_dict(rule.to_dict()) == rule

"""
Phase-03 Conflict Classifier.

Classifies the relationship between competing rules.

All functions are pure (no side effects).
Exactly one ConflictType is produced per call.
"""
from typing import Sequence

from crystalline.phase01_core.errors import AxiomaticParadoxError
from crystalline.phase02_rules.rule_context import Rule
from crystalline.phase02_rules.rule_types import Modality
from crystalline.phase02_rules.rule_validator import is_valid_rule

from .conflict_types import ConflictType


CONTRADICTORY_PAIR = frozenset({Modality.OBLIGATION, Modality.PROHIBITION})


def classify_conflict(a: Rule, b: Rule) -> ConflictType:
    """Classify a pair of competing rules.

    Decision order:
    1. Either rule invalid -> AXIOMATIC_VIOLATION
    2. {OBLIGATION, PROHIBITION} in either order -> LOGICAL_CONTRADICTION
    3. Anything else -> RESOURCE_DEADLOCK

    Args:
        a: First rule
        b: Second rule

    Returns:
        ConflictType
    """
    if not (is_valid_rule(a) and is_valid_rule(b)):
        return ConflictType.AXIOMATIC_VIOLATION

    if {a.modality, b.modality} == CONTRADICTORY_PAIR:
        return ConflictType.LOGICAL_CONTRADICTION

    return ConflictType.RESOURCE_DEADLOCK


def classify_rule_set(rules: Sequence[Rule]) -> ConflictType:
    """Classify a set of two or more competing rules.

    Same order as classify_conflict; a set is contradictory when it
    holds at least one OBLIGATION and at least one PROHIBITION.

    Raises:
        AxiomaticParadoxError: Fewer than two rules
    """
    if len(rules) < 2:
        raise AxiomaticParadoxError(
            message=f"Conflict needs at least two rules, got {len(rules)}",
            reason="NO_CONFLICT"
        )

    if not all(is_valid_rule(r) for r in rules):
        return ConflictType.AXIOMATIC_VIOLATION

    if CONTRADICTORY_PAIR <= {r.modality for r in rules}:
        return ConflictType.LOGICAL_CONTRADICTION

    return ConflictType.RESOURCE_DEADLOCK

"""
Phase-04 Resolver.

Priority arbitration between competing rules.

This function set is PURE:
- No side effects
- No IO
- Deterministic output for same input

Invalid rules fail the whole resolution. An invalid rule is never
dropped in favour of its competitor.
"""
import logging
from typing import List, Sequence, Tuple

from crystalline.phase01_core.constants import TIE_BREAK_POLICY
from crystalline.phase01_core.errors import AxiomaticParadoxError
from crystalline.phase02_rules.rule_context import Rule
from crystalline.phase02_rules.rule_types import Modality
from crystalline.phase02_rules.rule_validator import require_valid_rule, validate_rule
from crystalline.phase03_conflict.classifier import classify_conflict, classify_rule_set

from .resolution_result import ResolutionResult
from .resolution_types import ResolutionStrategy

logger = logging.getLogger("crystalline.resolver")


def _validate_all(rules: Sequence[Rule], trace: List[str]) -> None:
    """Validate rules in argument order, raising on the first failure."""
    for rule in rules:
        result = validate_rule(rule)
        trace.append(f"VALIDATE rule {rule.id}: {result.reason_code} {result.reason_description}")
        if not result.is_valid:
            logger.debug("Rule %d rejected: %s", rule.id, result.reason_description)
            require_valid_rule(rule)


def _highest_priority(rules: Sequence[Rule]) -> Rule:
    """Highest priority rule; the earliest one on ties."""
    winner = rules[0]
    for rule in rules[1:]:
        if rule.priority > winner.priority:
            winner = rule
    return winner


def _describe_weighted(rules: Sequence[Rule], winner: Rule) -> str:
    if len(rules) == 2:
        a, b = rules
        if a.priority == b.priority:
            comparison = f"{a.priority} == {b.priority}"
        elif winner is a:
            comparison = f"{a.priority} > {b.priority}"
        else:
            comparison = f"{b.priority} > {a.priority}"
    else:
        comparison = f"max {winner.priority} of {len(rules)} rules"
    return f"priority weight comparison ({comparison}), {TIE_BREAK_POLICY}"


def _select(rules: Sequence[Rule], strategy: ResolutionStrategy) -> Tuple[Rule, str]:
    """Pick the winning rule and describe why."""
    if strategy == ResolutionStrategy.STRICT_SAFETY:
        prohibitions = [r for r in rules if r.modality == Modality.PROHIBITION]
        if prohibitions:
            winner = _highest_priority(prohibitions)
            return winner, (
                f"strict safety veto by prohibition {winner.id} "
                f"(priority {winner.priority}), {TIE_BREAK_POLICY}"
            )
        winner = _highest_priority(rules)
        return winner, "strict safety, no prohibition: " + _describe_weighted(rules, winner)

    winner = _highest_priority(rules)
    return winner, _describe_weighted(rules, winner)


def resolve_conflict(
    a: Rule,
    b: Rule,
    strategy: ResolutionStrategy = ResolutionStrategy.STANDARD_WEIGHTED
) -> ResolutionResult:
    """
    Resolve a conflict between two rules.

    Steps:
    1. Validate a, then b (fail-fast)
    2. Classify the pair
    3. Higher priority wins, ties resolve to a

    Args:
        a: First rule, wins ties
        b: Second rule
        strategy: Arbitration strategy

    Returns:
        ResolutionResult naming the winner

    Raises:
        AxiomaticParadoxError: A priority is zero or negative
        PriorityOverflowError: A priority exceeds 1000
    """
    trace: List[str] = []
    _validate_all((a, b), trace)

    conflict_type = classify_conflict(a, b)
    trace.append(f"CLASSIFY rule {a.id} vs rule {b.id}: {conflict_type.name}")

    winner, resolved_by = _select((a, b), strategy)
    trace.append(f"RESOLVE rule {winner.id} wins: {resolved_by}")

    logger.debug("Resolved %d vs %d -> %d (%s)", a.id, b.id, winner.id, conflict_type.name)
    return ResolutionResult(
        winning_rule=winner,
        conflict_type=conflict_type,
        resolved_by=resolved_by,
        participants=(a.id, b.id),
        strategy=strategy,
        trace=tuple(trace)
    )


def resolve_rule_set(
    rules: Sequence[Rule],
    strategy: ResolutionStrategy = ResolutionStrategy.STANDARD_WEIGHTED
) -> ResolutionResult:
    """
    Resolve a conflict among two or more rules.

    Same policy as resolve_conflict. Ties resolve to the earliest rule.

    Raises:
        AxiomaticParadoxError: Fewer than two rules, or a degenerate priority
        PriorityOverflowError: A priority exceeds 1000
    """
    rules = tuple(rules)
    trace: List[str] = []

    if len(rules) < 2:
        raise AxiomaticParadoxError(
            message=f"Conflict needs at least two rules, got {len(rules)}",
            reason="NO_CONFLICT"
        )

    _validate_all(rules, trace)

    conflict_type = classify_rule_set(rules)
    ids = ", ".join(str(r.id) for r in rules)
    trace.append(f"CLASSIFY rules [{ids}]: {conflict_type.name}")

    winner, resolved_by = _select(rules, strategy)
    trace.append(f"RESOLVE rule {winner.id} wins: {resolved_by}")

    return ResolutionResult(
        winning_rule=winner,
        conflict_type=conflict_type,
        resolved_by=resolved_by,
        participants=tuple(r.id for r in rules),
        strategy=strategy,
        trace=tuple(trace)
    )

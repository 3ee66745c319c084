"""
Phase-02 Rule Validator.

Priority bounds check for rules.

All functions are pure (no side effects).
Only the priority is checked; any modality is well-formed.
"""
from crystalline.phase01_core.constants import PRIORITY_CEILING, PRIORITY_FLOOR
from crystalline.phase01_core.errors import (
    AxiomaticParadoxError,
    PriorityOverflowError,
)

from .rule_context import Rule, RuleValidationResult


# Reason codes
RV_OK = "RV-OK"
RV_ZERO_PRIORITY = "RV-001"
RV_PRIORITY_OVERFLOW = "RV-002"

PRIORITY_OUT_OF_RANGE = "PRIORITY_OUT_OF_RANGE"


def validate_rule(rule: Rule) -> RuleValidationResult:
    """Validate rule priority bounds.

    Decision table:
    | Priority          | → Valid | Code   |
    |-------------------|---------|--------|
    | <= 0              | NO      | RV-001 |
    | > 1000            | NO      | RV-002 |
    | 1..1000           | YES     | RV-OK  |

    Args:
        rule: Rule to validate

    Returns:
        RuleValidationResult
    """
    if rule.priority <= PRIORITY_FLOOR:
        return RuleValidationResult(
            rule_id=rule.id,
            is_valid=False,
            reason_code=RV_ZERO_PRIORITY,
            reason_description=f"{PRIORITY_OUT_OF_RANGE}: priority {rule.priority} has no weight"
        )

    if rule.priority > PRIORITY_CEILING:
        return RuleValidationResult(
            rule_id=rule.id,
            is_valid=False,
            reason_code=RV_PRIORITY_OVERFLOW,
            reason_description=f"{PRIORITY_OUT_OF_RANGE}: priority {rule.priority} exceeds {PRIORITY_CEILING}"
        )

    return RuleValidationResult(
        rule_id=rule.id,
        is_valid=True,
        reason_code=RV_OK,
        reason_description=f"Priority {rule.priority} within bounds"
    )


def is_valid_rule(rule: Rule) -> bool:
    """Check if rule may participate in resolution."""
    return validate_rule(rule).is_valid


def require_valid_rule(rule: Rule) -> None:
    """Raise the typed error for an invalid rule.

    Args:
        rule: Rule to validate

    Raises:
        AxiomaticParadoxError: Priority is zero or negative
        PriorityOverflowError: Priority exceeds the ceiling
    """
    result = validate_rule(rule)
    if result.reason_code == RV_ZERO_PRIORITY:
        raise AxiomaticParadoxError(
            message=f"Rule {rule.id} is ontologically unstable: {result.reason_description}",
            reason="ZERO_PRIORITY"
        )
    if result.reason_code == RV_PRIORITY_OVERFLOW:
        raise PriorityOverflowError(
            message=f"Rule {rule.id}: {result.reason_description}",
            priority=rule.priority
        )

"""
Phase-02 Rule Context.

This module defines frozen dataclasses for normative rules.

All dataclasses are frozen=True for immutability.
"""
from dataclasses import dataclass

from .rule_types import Modality


@dataclass(frozen=True)
class Rule:
    """Immutable normative rule.

    Attributes:
        id: Unique rule identifier
        description: Human-readable statement
        modality: OBLIGATION, PROHIBITION or PERMISSION
        priority: Weight, valid in (0, 1000]
    """
    id: int
    description: str
    modality: Modality
    priority: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "modality": self.modality.name,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class RuleValidationResult:
    """Rule validation result.

    Attributes:
        rule_id: Rule that was validated
        is_valid: Whether valid
        reason_code: Machine-readable code
        reason_description: Human-readable description
    """
    rule_id: int
    is_valid: bool
    reason_code: str
    reason_description: str

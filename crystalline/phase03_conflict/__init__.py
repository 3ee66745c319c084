"""
Phase-03 Conflict Classification.

Exports:
    - ConflictType: Enum of conflict relationships
    - classify_conflict: Pure pair classifier
    - classify_rule_set: Pure N-rule classifier
"""
from .conflict_types import ConflictType
from .classifier import classify_conflict, classify_rule_set

__all__ = [
    "ConflictType",
    "classify_conflict",
    "classify_rule_set",
]

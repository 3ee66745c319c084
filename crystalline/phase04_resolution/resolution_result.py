"""
Phase-04 Resolution Result.

Frozen dataclass representing the outcome of an arbitration.
No execution logic - result only.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from crystalline.phase02_rules.rule_context import Rule
from crystalline.phase03_conflict.conflict_types import ConflictType

from .resolution_types import ResolutionStrategy


@dataclass(frozen=True)
class ResolutionResult:
    """
    Immutable result of conflict resolution.

    Attributes:
        winning_rule: Selected rule, None if no valid rule exists
        conflict_type: Classification of the competing rules
        resolved_by: Non-empty justification for the winner
        participants: Ids of every rule considered, in argument order
        strategy: Strategy that selected the winner
        trace: Ordered reasoning steps
    """
    winning_rule: Optional[Rule]
    conflict_type: ConflictType
    resolved_by: str
    participants: Tuple[int, ...] = ()
    strategy: ResolutionStrategy = ResolutionStrategy.STANDARD_WEIGHTED
    trace: Tuple[str, ...] = ()

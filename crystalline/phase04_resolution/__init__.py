"""
Phase-04: Priority Arbitration

Resolves competing rules into a single deterministic winner.

Exports:
    - ResolutionStrategy: Enum of arbitration strategies
    - ResolutionResult: Frozen dataclass for resolution output
    - resolve_conflict: Pure pairwise resolver
    - resolve_rule_set: Pure N-way resolver
"""
from .resolution_types import ResolutionStrategy
from .resolution_result import ResolutionResult
from .resolver import resolve_conflict, resolve_rule_set

__all__ = [
    "ResolutionStrategy",
    "ResolutionResult",
    "resolve_conflict",
    "resolve_rule_set",
]

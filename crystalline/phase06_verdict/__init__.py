"""
Phase-06 World-State Verdicts.

THIS LAYER DOES NOT FETCH DATA.
Snapshots are supplied by the caller.

Exports:
    Enums:
        WorldMetric: Observable world-state fields
        Comparator: Threshold comparisons

    Dataclasses (all frozen=True):
        WorldState: Validated snapshot
        NormTrigger: Rule-to-condition binding
        LogicVerdict: Weighing outcome

    Functions:
        default_triggers: Solvency and anti-extraction triggers
        evaluate_verdict: Weigh triggered rules
        generate_verdict_proof: Audit record for a verdict
"""
from .verdict_types import WorldMetric, Comparator
from .verdict_context import WorldState, NormTrigger, LogicVerdict
from .verdict_engine import default_triggers, evaluate_verdict, generate_verdict_proof

__all__ = [
    # Enums
    "WorldMetric",
    "Comparator",
    # Dataclasses
    "WorldState",
    "NormTrigger",
    "LogicVerdict",
    # Functions
    "default_triggers",
    "evaluate_verdict",
    "generate_verdict_proof",
]

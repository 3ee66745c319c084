"""
Phase-06 Verdict Context.

Frozen dataclasses for world-state evaluation.

WorldState is supplied by an external data source. This module
only checks that the values it receives are usable.
"""
import math
from dataclasses import dataclass, fields
from typing import Tuple

from crystalline.phase01_core.errors import InvalidWorldStateError

from .verdict_types import Comparator, WorldMetric


@dataclass(frozen=True)
class WorldState:
    """Immutable world-state snapshot.

    Attributes:
        collateral_ratio: Collateral over debt
        network_slippage: Fractional slippage
        market_volatility: Volatility index

    All values must be finite and non-negative.
    """
    collateral_ratio: float
    network_slippage: float
    market_volatility: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidWorldStateError(
                    message=f"expected a number, got {type(value).__name__}",
                    field_name=f.name
                )
            if not math.isfinite(value):
                raise InvalidWorldStateError(message="value is not finite", field_name=f.name)
            if value < 0:
                raise InvalidWorldStateError(message=f"value {value} is negative", field_name=f.name)

    def metric(self, metric: WorldMetric) -> float:
        return float(getattr(self, metric.value))


@dataclass(frozen=True)
class NormTrigger:
    """Binds a stored rule to a world-state condition.

    Attributes:
        rule_id: Rule applied when the condition holds
        metric: Observed world-state field
        comparator: Threshold comparison
        threshold: Threshold value
        requires_profit: Also require a positive profit
    """
    rule_id: int
    metric: WorldMetric
    comparator: Comparator
    threshold: float
    requires_profit: bool = False

    def describe(self) -> str:
        condition = f"{self.metric.value} {self.comparator.value} {self.threshold}"
        if self.requires_profit:
            condition += " and profit > 0"
        return condition


@dataclass(frozen=True)
class LogicVerdict:
    """Outcome of weighing triggered rules against each other.

    Attributes:
        is_allowed: Whether the action may proceed
        confidence_score: Weight of the prevailing side
        obligation_weight: Sum of triggered obligation priorities
        prohibition_weight: Sum of triggered prohibition priorities
        triggered: Ids of triggered rules, in trigger order
        logs: Ordered evaluation steps
    """
    is_allowed: bool
    confidence_score: int
    obligation_weight: int
    prohibition_weight: int
    triggered: Tuple[int, ...]
    logs: Tuple[str, ...]

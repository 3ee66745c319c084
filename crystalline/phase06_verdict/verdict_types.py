"""
Phase-06 Verdict Types.

CLOSED ENUMS - No new members may be added.
"""
from enum import Enum


class WorldMetric(Enum):
    """World-state fields a trigger can observe.

    CLOSED ENUM - No new members may be added.
    """
    COLLATERAL_RATIO = "collateral_ratio"
    NETWORK_SLIPPAGE = "network_slippage"
    MARKET_VOLATILITY = "market_volatility"


class Comparator(Enum):
    """Threshold comparison of a trigger.

    CLOSED ENUM - No new members may be added.
    """
    LESS_THAN = "<"
    LESS_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="

    def holds(self, value: float, threshold: float) -> bool:
        if self is Comparator.LESS_THAN:
            return value < threshold
        if self is Comparator.LESS_EQUAL:
            return value <= threshold
        if self is Comparator.GREATER_THAN:
            return value > threshold
        return value >= threshold

"""
Phase-04 Resolution Types.

CLOSED ENUMS - No new members may be added.
"""
from enum import Enum


class ResolutionStrategy(Enum):
    """Arbitration strategy.

    CLOSED ENUM - No new members may be added.

    Strategies:
        STANDARD_WEIGHTED: Highest priority wins, ties to the first rule
        STRICT_SAFETY: Any prohibition vetoes, weights only break ties
    """
    STANDARD_WEIGHTED = "standard_weighted"
    STRICT_SAFETY = "strict_safety"

"""
Phase-03 Conflict Types.

CLOSED ENUMS - No new members may be added.
"""
from enum import Enum, auto


class ConflictType(Enum):
    """Relationship between competing rules.

    CLOSED ENUM - No new members may be added.

    Types:
        LOGICAL_CONTRADICTION: One OBLIGATION against one PROHIBITION
        RESOURCE_DEADLOCK: Same decision point, no direct modal opposition
        AXIOMATIC_VIOLATION: A participating rule failed validation
    """
    LOGICAL_CONTRADICTION = auto()
    RESOURCE_DEADLOCK = auto()
    AXIOMATIC_VIOLATION = auto()

"""
Phase-02 Rule Types.

This module defines enums for normative rules.

CLOSED ENUMS - No new members may be added.
"""
from enum import Enum


class Modality(Enum):
    """Deontic modality of a rule.

    CLOSED ENUM - No new members may be added.

    Modalities:
        OBLIGATION: Action must happen
        PROHIBITION: Action must not happen
        PERMISSION: Neutral, action may happen
    """
    OBLIGATION = "obligation"
    PROHIBITION = "prohibition"
    PERMISSION = "permission"


# Spellings accepted from policy configuration
MODALITY_ALIASES = {
    "obligation": Modality.OBLIGATION,
    "obligatory": Modality.OBLIGATION,
    "prohibition": Modality.PROHIBITION,
    "prohibited": Modality.PROHIBITION,
    "forbidden": Modality.PROHIBITION,
    "permission": Modality.PERMISSION,
    "permitted": Modality.PERMISSION,
}


def parse_modality(value: str) -> Modality:
    """Parse a modality name from configuration.

    Args:
        value: Modality name, case-insensitive

    Returns:
        Matching Modality

    Raises:
        ValueError: If the name is not a known modality
    """
    modality = MODALITY_ALIASES.get(value.strip().lower())
    if modality is None:
        raise ValueError(f"Unknown modality: {value!r}")
    return modality

"""
Phase-01 Core Constants

Immutable constants shared by every arbitration phase.

This module contains NO execution logic.
All constants are UPPERCASE and immutable.
"""

from typing import Final

# =============================================================================
# SYSTEM IDENTITY CONSTANTS
# =============================================================================

SYSTEM_NAME: Final[str] = "crystalline-arbiter"
"""Official name of the system."""

PROOF_ALGORITHM: Final[str] = "sha256"
"""Hash function used for proof fingerprints and the audit chain."""

# =============================================================================
# PRIORITY BOUNDS
# =============================================================================

PRIORITY_FLOOR: Final[int] = 0
"""Exclusive lower bound. A rule at or below this weight is a paradox."""

PRIORITY_CEILING: Final[int] = 1000
"""Inclusive upper bound. A rule above this weight overflows."""

# =============================================================================
# RESOLUTION CONSTANTS
# =============================================================================

TIE_BREAK_POLICY: Final[str] = "tie->first"
"""Equal priorities resolve to the earliest candidate."""

# =============================================================================
# AUDIT CONSTANTS
# =============================================================================

GENESIS_HASH: Final[str] = "0" * 64
"""prev_hash of the first audit ledger entry."""

PROOF_ID_PREFIX: Final[str] = "PRF"
"""Prefix of every proof identifier."""

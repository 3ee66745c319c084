"""
Phase-01 Core Errors

Explicit error types for arbitration failures.
All errors are auditable and propagate to the immediate caller.

This module contains NO execution logic.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CrystallineError(Exception):
    """Base error for all arbitration failures."""
    message: str

    def __str__(self) -> str:
        return f"[CRYSTALLINE ERROR] {self.message}"


@dataclass(frozen=True)
class PriorityOverflowError(CrystallineError):
    """
    Raised when a rule priority exceeds the valid upper bound.

    Recoverable: the caller may reject or re-weight the rule.
    """
    priority: int = 0

    def __str__(self) -> str:
        return f"[PRIORITY OVERFLOW] {self.priority}: {self.message}"


@dataclass(frozen=True)
class AxiomaticParadoxError(CrystallineError):
    """
    Raised when a rule weight is degenerate (zero or negative)
    or a logically impossible state is reached.

    Always surfaced, never swallowed.
    """
    reason: str = ""

    def __str__(self) -> str:
        return f"[AXIOMATIC PARADOX] {self.reason}: {self.message}"


@dataclass(frozen=True)
class InvalidWorldStateError(CrystallineError):
    """Raised when a world-state snapshot carries a negative or non-finite value."""
    field_name: str = ""

    def __str__(self) -> str:
        return f"[INVALID WORLD STATE] {self.field_name}: {self.message}"


@dataclass(frozen=True)
class DuplicateRuleError(CrystallineError):
    """Raised when a rule id is registered twice in the same store."""
    rule_id: int = 0

    def __str__(self) -> str:
        return f"[DUPLICATE RULE] {self.rule_id}: {self.message}"


@dataclass(frozen=True)
class UnknownRuleError(CrystallineError):
    """Raised when a rule id is not present in the store."""
    rule_id: int = 0

    def __str__(self) -> str:
        return f"[UNKNOWN RULE] {self.rule_id}: {self.message}"


@dataclass(frozen=True)
class LedgerIntegrityError(CrystallineError):
    """
    Raised when an append would break the audit ledger.

    Covers replayed proof ids and tampered persisted chains.
    """
    reason: str = ""

    def __str__(self) -> str:
        return f"[LEDGER INTEGRITY] {self.reason}: {self.message}"

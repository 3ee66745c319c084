"""
Phase-02 Normative Rules.

This module provides rules, their validation and the
caller-owned rule store.

Exports:
    Enums:
        Modality: OBLIGATION, PROHIBITION, PERMISSION

    Dataclasses (all frozen=True):
        Rule: Normative rule
        RuleValidationResult: Validation results

    Classes:
        RuleStore: Caller-owned rule registry

    Functions:
        validate_rule: Check priority bounds
        is_valid_rule: Boolean form of validate_rule
        require_valid_rule: Raise typed error on invalid rule
        load_policy: Build a RuleStore from JSON policy
"""
from .rule_types import Modality, parse_modality
from .rule_context import Rule, RuleValidationResult
from .rule_validator import validate_rule, is_valid_rule, require_valid_rule
from .rule_store import RuleStore, rule_from_dict, load_policy

__all__ = [
    # Enums
    "Modality",
    "parse_modality",
    # Dataclasses
    "Rule",
    "RuleValidationResult",
    # Functions
    "validate_rule",
    "is_valid_rule",
    "require_valid_rule",
    "rule_from_dict",
    "load_policy",
    # Classes
    "RuleStore",
]

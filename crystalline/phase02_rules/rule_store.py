"""
Phase-02 Rule Store.

Caller-owned registry of validated rules.

There is no module-level store. Every engine or request
holds its own RuleStore instance.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from crystalline.phase01_core.errors import DuplicateRuleError, UnknownRuleError

from .rule_context import Rule
from .rule_types import Modality, parse_modality
from .rule_validator import require_valid_rule

logger = logging.getLogger("crystalline.rules")


class RuleStore:
    """Registry of rules keyed by id, in registration order.

    Only valid rules are admitted. Registered rules are never
    replaced or mutated.
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: Dict[int, Rule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: Rule) -> Rule:
        """Validate and register a rule.

        Raises:
            AxiomaticParadoxError: Priority is zero or negative
            PriorityOverflowError: Priority exceeds the ceiling
            DuplicateRuleError: Id already registered
        """
        require_valid_rule(rule)
        if rule.id in self._rules:
            raise DuplicateRuleError(
                message="Rule id already registered",
                rule_id=rule.id
            )
        self._rules[rule.id] = rule
        logger.debug("Registered rule %d (%s, priority %d)",
                     rule.id, rule.modality.name, rule.priority)
        return rule

    def get(self, rule_id: int) -> Rule:
        rule = self._rules.get(rule_id)
        if rule is None:
            raise UnknownRuleError(message="Rule not found in store", rule_id=rule_id)
        return rule

    def contains(self, rule_id: int) -> bool:
        return rule_id in self._rules

    def by_modality(self, modality: Modality) -> List[Rule]:
        return [r for r in self._rules.values() if r.modality == modality]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))


def rule_from_dict(data: dict) -> Rule:
    """Build a Rule from a policy configuration entry.

    Raises:
        ValueError: Missing key or unknown modality
    """
    try:
        return Rule(
            id=int(data["id"]),
            description=str(data.get("description", "")),
            modality=parse_modality(str(data["modality"])),
            priority=int(data["priority"]),
        )
    except KeyError as exc:
        raise ValueError(f"Policy entry missing key: {exc.args[0]}") from exc


def load_policy(source: Union[str, Path, List[dict]]) -> RuleStore:
    """Load a RuleStore from a JSON policy file or parsed entries.

    The JSON document is a list of objects with id, description,
    modality and priority.

    Args:
        source: Path to a JSON file, or already-parsed entries

    Returns:
        New RuleStore holding every entry
    """
    if isinstance(source, (str, Path)):
        with open(source, "r") as f:
            entries = json.load(f)
        logger.info("Loading policy from %s", source)
    else:
        entries = source

    if not isinstance(entries, list):
        raise ValueError("Policy document must be a list of rules")

    return RuleStore(rule_from_dict(entry) for entry in entries)

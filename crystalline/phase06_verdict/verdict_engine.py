"""
Phase-06 Verdict Engine.

Evaluates stored rules against a world-state snapshot and
weighs triggered obligations against triggered prohibitions.

The engine performs no data fetching. Snapshots come from
the caller.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from crystalline.phase02_rules.rule_store import RuleStore
from crystalline.phase02_rules.rule_types import Modality
from crystalline.phase04_resolution.resolution_types import ResolutionStrategy
from crystalline.phase05_proof.proof_context import FormalProof, ProofContext
from crystalline.phase05_proof.proof_engine import build_proof

from .verdict_context import LogicVerdict, NormTrigger, WorldState
from .verdict_types import Comparator, WorldMetric

logger = logging.getLogger("crystalline.verdict")


def default_triggers(mev_guard_id: int, survival_id: int) -> Tuple[NormTrigger, ...]:
    """Standard solvency and anti-extraction triggers.

    - mev_guard_id fires when slippage exceeds 1% on a profitable action
    - survival_id fires when the collateral ratio drops below 1.3
    """
    return (
        NormTrigger(
            rule_id=mev_guard_id,
            metric=WorldMetric.NETWORK_SLIPPAGE,
            comparator=Comparator.GREATER_THAN,
            threshold=0.01,
            requires_profit=True
        ),
        NormTrigger(
            rule_id=survival_id,
            metric=WorldMetric.COLLATERAL_RATIO,
            comparator=Comparator.LESS_THAN,
            threshold=1.3
        ),
    )


def evaluate_verdict(
    store: RuleStore,
    triggers: Sequence[NormTrigger],
    state: WorldState,
    profit: float = 0.0,
    strategy: ResolutionStrategy = ResolutionStrategy.STANDARD_WEIGHTED
) -> LogicVerdict:
    """
    Weigh triggered rules for a world-state snapshot.

    Decision table:
    | Strategy          | → Allowed when                         |
    |-------------------|----------------------------------------|
    | STANDARD_WEIGHTED | obligation weight >= prohibition weight |
    | STRICT_SAFETY     | no prohibition triggered               |

    Each rule counts once even if several triggers name it.
    Triggers naming a rule absent from the store are skipped.
    PERMISSION rules are logged but carry no weight.

    Args:
        store: Rules available for triggering
        triggers: Conditions binding rules to the snapshot
        state: World-state snapshot
        profit: Expected profit of the action
        strategy: Weighing strategy

    Returns:
        LogicVerdict
    """
    logs: List[str] = []
    triggered: List[int] = []
    obligation_weight = 0
    prohibition_weight = 0

    for trigger in triggers:
        if not store.contains(trigger.rule_id):
            logger.warning("Trigger references unknown rule %d", trigger.rule_id)
            logs.append(f"SKIP rule {trigger.rule_id}: not in store")
            continue
        if trigger.rule_id in triggered:
            continue

        value = state.metric(trigger.metric)
        if not trigger.comparator.holds(value, trigger.threshold):
            continue
        if trigger.requires_profit and not profit > 0:
            continue

        rule = store.get(trigger.rule_id)
        triggered.append(rule.id)
        if rule.modality == Modality.OBLIGATION:
            obligation_weight += rule.priority
        elif rule.modality == Modality.PROHIBITION:
            prohibition_weight += rule.priority
        logs.append(
            f"MODALITY_CRITICAL: rule {rule.id} {rule.modality.name} triggered "
            f"({trigger.describe()}, weight: {rule.priority})"
        )

    if strategy == ResolutionStrategy.STRICT_SAFETY:
        is_allowed = prohibition_weight == 0
    else:
        is_allowed = obligation_weight >= prohibition_weight

    score = obligation_weight if is_allowed else prohibition_weight
    logs.append(
        f"VERDICT {'ALLOW' if is_allowed else 'DENY'} via {strategy.name}: "
        f"obligation {obligation_weight} vs prohibition {prohibition_weight}"
    )
    logger.debug("Verdict %s (score %d)", is_allowed, score)

    return LogicVerdict(
        is_allowed=is_allowed,
        confidence_score=score,
        obligation_weight=obligation_weight,
        prohibition_weight=prohibition_weight,
        triggered=tuple(triggered),
        logs=tuple(logs)
    )


def generate_verdict_proof(
    verdict: LogicVerdict,
    context: ProofContext,
    timestamp: Optional[str] = None
) -> FormalProof:
    """Audit record for a verdict. Decision is the allow/deny flag."""
    return build_proof(
        decision=verdict.is_allowed,
        confidence_score=verdict.confidence_score,
        participants=verdict.triggered,
        trace=verdict.logs,
        context=context,
        timestamp=timestamp
    )

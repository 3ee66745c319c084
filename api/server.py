"""
Crystalline Arbiter API Server

FastAPI service exposing rule registration, conflict arbitration,
world-state verdicts and the audit ledger.

Each request is resolved independently. The audit ledger is the
only shared resource; its appends are serialized.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from crystalline import __version__
from crystalline.config.settings import (
    ArbiterSettings,
    configure_logging,
    load_settings,
    log_settings_summary,
)
from crystalline.phase01_core.constants import SYSTEM_NAME
from crystalline.phase01_core.errors import (
    AxiomaticParadoxError,
    CrystallineError,
    DuplicateRuleError,
    InvalidWorldStateError,
    LedgerIntegrityError,
    PriorityOverflowError,
    UnknownRuleError,
)
from crystalline.phase02_rules.rule_store import RuleStore, load_policy, rule_from_dict
from crystalline.phase05_proof.audit_ledger import AuditLedger
from crystalline.phase05_proof.proof_engine import verify_proof
from crystalline.phase06_verdict.verdict_context import NormTrigger, WorldState
from crystalline.phase06_verdict.verdict_types import Comparator, WorldMetric
from crystalline.phase07_arbitration.arbitration_engine import ArbitrationEngine

logger = logging.getLogger("crystalline.server")


# =============================================================================
# REQUEST MODELS
# =============================================================================

class RuleRequest(BaseModel):
    id: int
    description: str = ""
    modality: str
    priority: int


class ResolveRequest(BaseModel):
    rule_a: int
    rule_b: int
    label: str = ""


class ResolveSetRequest(BaseModel):
    rule_ids: List[int]
    label: str = ""


class WorldStateRequest(BaseModel):
    collateral_ratio: float
    network_slippage: float
    market_volatility: float


class TriggerRequest(BaseModel):
    rule_id: int
    metric: str
    comparator: str
    threshold: float
    requires_profit: bool = False


class VerdictRequest(BaseModel):
    state: WorldStateRequest
    triggers: List[TriggerRequest]
    profit: float = 0.0
    label: str = ""


# =============================================================================
# ERROR MAPPING
# =============================================================================

ERROR_STATUS = (
    (UnknownRuleError, 404),
    (PriorityOverflowError, 422),
    (InvalidWorldStateError, 422),
    (AxiomaticParadoxError, 409),
    (DuplicateRuleError, 409),
    (LedgerIntegrityError, 409),
)


def _http_error(exc: CrystallineError) -> HTTPException:
    for error_type, status in ERROR_STATUS:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


def _outcome_payload(outcome) -> Dict[str, Any]:
    result = outcome.result
    return {
        "winning_rule": result.winning_rule.to_dict() if result.winning_rule else None,
        "conflict_type": result.conflict_type.name,
        "resolved_by": result.resolved_by,
        "strategy": result.strategy.name,
        "proof": outcome.proof.to_dict(),
    }


def _trigger(req: TriggerRequest) -> NormTrigger:
    try:
        metric = WorldMetric(req.metric.lower())
        comparator = Comparator(req.comparator)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid trigger: {exc}") from exc
    return NormTrigger(
        rule_id=req.rule_id,
        metric=metric,
        comparator=comparator,
        threshold=req.threshold,
        requires_profit=req.requires_profit,
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def build_engine(settings: ArbiterSettings) -> ArbitrationEngine:
    """Create the engine described by settings, loading policy and ledger."""
    store = load_policy(settings.policy_path) if settings.policy_path else RuleStore()
    ledger = AuditLedger(settings.ledger_path or None)
    ledger.load()
    return ArbitrationEngine(store, ledger, settings.strategy)


def create_app(
    settings: Optional[ArbiterSettings] = None,
    engine: Optional[ArbitrationEngine] = None
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    engine = engine or build_engine(settings)
    log_settings_summary(settings)

    app = FastAPI(title="Crystalline Arbiter", version=__version__)
    app.state.engine = engine

    @app.get("/api/health")
    async def health_check():
        return {
            "status": "ok",
            "system": SYSTEM_NAME,
            "version": __version__,
            "strategy": engine.strategy.name,
            "rules": len(engine.store),
            "ledger_entries": engine.ledger.entry_count,
        }

    @app.get("/api/rules")
    async def list_rules():
        return {"rules": [rule.to_dict() for rule in engine.store]}

    @app.post("/api/rules", status_code=201)
    async def register_rule(request: RuleRequest):
        try:
            rule = engine.store.register(rule_from_dict(request.model_dump()))
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except CrystallineError as exc:
            raise _http_error(exc) from exc
        logger.info("Registered rule %d via API", rule.id)
        return rule.to_dict()

    @app.post("/api/resolve")
    async def resolve(request: ResolveRequest):
        try:
            outcome = engine.arbitrate(request.rule_a, request.rule_b, label=request.label)
        except CrystallineError as exc:
            raise _http_error(exc) from exc
        return _outcome_payload(outcome)

    @app.post("/api/resolve/set")
    async def resolve_set(request: ResolveSetRequest):
        try:
            outcome = engine.arbitrate_set(request.rule_ids, label=request.label)
        except CrystallineError as exc:
            raise _http_error(exc) from exc
        return _outcome_payload(outcome)

    @app.post("/api/verdict")
    async def verdict(request: VerdictRequest):
        triggers = [_trigger(t) for t in request.triggers]
        try:
            state = WorldState(**request.state.model_dump())
            outcome = engine.evaluate(state, triggers, profit=request.profit, label=request.label)
        except CrystallineError as exc:
            raise _http_error(exc) from exc
        return {
            "is_allowed": outcome.verdict.is_allowed,
            "confidence_score": outcome.verdict.confidence_score,
            "triggered": list(outcome.verdict.triggered),
            "logs": list(outcome.verdict.logs),
            "proof": outcome.proof.to_dict(),
        }

    @app.get("/api/audit")
    async def audit_log(limit: int = 100):
        entries = engine.ledger.entries
        return {"total": len(entries), "entries": entries[-limit:] if limit > 0 else []}

    @app.get("/api/audit/verify")
    async def audit_verify():
        proofs_ok = all(verify_proof(p) for p in engine.ledger.proofs())
        return {
            "chain_valid": engine.ledger.verify_chain(),
            "proofs_valid": proofs_ok,
            "chain_hash": engine.ledger.chain_hash,
            "entries": engine.ledger.entry_count,
        }

    return app


app = create_app()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=True)

"""
Crystalline Arbiter

Priority-weighted normative conflict arbitration with auditable proofs.

Phases:
    phase01_core: constants and error taxonomy
    phase02_rules: rules, validation, rule store
    phase03_conflict: conflict classification
    phase04_resolution: priority arbitration
    phase05_proof: proof records and audit ledger
    phase06_verdict: world-state verdict evaluation
    phase07_arbitration: engine facade
"""

__version__ = "0.3.0"

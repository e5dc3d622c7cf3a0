"""
Judge Human heartbeat models.

This subpackage contains Pydantic models for configuration, docket
cases, verdicts, persisted run state and run outcomes.

Key models:
    - Config: Application configuration loaded from environment
    - Case / Docket: Items fetched from the Judge Human docket
    - Verdict: Evaluator output forwarded to the service
    - RunState: Persisted heartbeat progress
    - RunParams: CLI flags for one run
    - HeartbeatOutcome: What a run did
"""

from .config import Config, load_env
from .case import Bench, Case, DEFAULT_BENCH, Docket
from .verdict import Verdict
from .run_state import RunState
from .run_params import RunParams
from .run_outcome import CaseAction, CaseResult, HeartbeatOutcome, RunStatus

__all__ = [
    "Config",
    "load_env",
    "Bench",
    "Case",
    "DEFAULT_BENCH",
    "Docket",
    "Verdict",
    "RunState",
    "RunParams",
    "CaseAction",
    "CaseResult",
    "HeartbeatOutcome",
    "RunStatus",
]

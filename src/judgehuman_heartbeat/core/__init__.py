"""Core heartbeat logic.

This subpackage contains the decision logic of a heartbeat run:
schedule gating, evaluator selection, prompt rendering, evaluation
strategies and the per-case processing loop.

Key modules:
    - heartbeat: Orchestration via run_heartbeat()
    - resolver: Evaluator priority chain
    - evaluators: Subprocess and hosted evaluation strategies
    - prompt: Evaluation prompt rendering
    - docket: Case flattening and unseen filtering
    - state: Run-state persistence and schedule gate
"""

from judgehuman_heartbeat.core.heartbeat import run_heartbeat
from judgehuman_heartbeat.core.resolver import resolve_evaluator
from judgehuman_heartbeat.core.evaluators import (
    EvaluationError,
    EvaluatorKind,
    create_evaluator,
    probe_claude_cli,
)
from judgehuman_heartbeat.core.prompt import BENCH_GUIDE, build_prompt
from judgehuman_heartbeat.core.docket import collect_cases, filter_unseen
from judgehuman_heartbeat.core.state import StateStore, is_heartbeat_due

__all__ = [
    # heartbeat
    "run_heartbeat",
    # resolver
    "resolve_evaluator",
    # evaluators
    "EvaluationError",
    "EvaluatorKind",
    "create_evaluator",
    "probe_claude_cli",
    # prompt
    "BENCH_GUIDE",
    "build_prompt",
    # docket
    "collect_cases",
    "filter_unseen",
    # state
    "StateStore",
    "is_heartbeat_due",
]

"""
Heartbeat orchestrator.

One invocation runs the full check-in cycle:

    gate -> status -> docket -> humanity index -> resolve evaluator
         -> judge or vote on each unseen case -> save state

Errors outside the per-case loop propagate to the caller and leave the
state file untouched. Errors inside the loop are logged; the failing
case stays unseen and is retried on the next heartbeat.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from judgehuman_heartbeat.core.docket import collect_cases, filter_unseen
from judgehuman_heartbeat.core.evaluators import EvaluatorKind, create_evaluator
from judgehuman_heartbeat.core.prompt import build_prompt
from judgehuman_heartbeat.core.resolver import resolve_evaluator
from judgehuman_heartbeat.core.state import StateStore, is_heartbeat_due, utcnow
from judgehuman_heartbeat.models.case import Case
from judgehuman_heartbeat.models.config import Config
from judgehuman_heartbeat.models.run_outcome import (
    CaseAction,
    CaseResult,
    HeartbeatOutcome,
    RunStatus,
)
from judgehuman_heartbeat.models.run_params import RunParams
from judgehuman_heartbeat.models.verdict import Verdict
from judgehuman_heartbeat.utils.logging import get_logger
from judgehuman_heartbeat.utils.protocols import (
    CaseServiceProtocol,
    EvaluatorProtocol,
)

logger = get_logger(__name__)

Resolver = Callable[[Config], EvaluatorKind]
EvaluatorFactory = Callable[[EvaluatorKind, Config], EvaluatorProtocol | None]


def _agent_is_inactive(status: Any) -> bool:
	if not isinstance(status, dict):
		return False
	agent = status.get("agent")
	if not isinstance(agent, dict):
		agent = status
	return agent.get("isActive") is False


def _total_votes(status: Any) -> Any:
	stats = status.get("stats") if isinstance(status, dict) else None
	if isinstance(stats, dict) and stats.get("totalVotes") is not None:
		return stats["totalVotes"]
	return "?"


def _fetch_humanity_index(
        service: CaseServiceProtocol) -> dict[str, Any] | None:
	"""Best effort: any failure is logged and ignored."""
	try:
		hi = service.get_humanity_index()
	except Exception as exc:  # noqa: BLE001
		logger.warning("humanity index unavailable: %s", exc)
		return None
	if not isinstance(hi, dict):
		logger.warning("humanity index unavailable: unexpected payload")
		return None
	delta = hi.get("dailyDelta")
	delta_text = ""
	if isinstance(delta, (int, float)):
		delta_text = f" ({'+' if delta > 0 else ''}{delta})"
	hot_splits = hi.get("hotSplits")
	logger.info(
	    "humanity index: %s%s, hot splits: %d",
	    hi.get("humanityIndex"),
	    delta_text,
	    len(hot_splits) if isinstance(hot_splits, list) else 0,
	)
	return hi


def _process_case(
    case: Case,
    evaluator: EvaluatorProtocol | None,
    service: CaseServiceProtocol,
) -> CaseResult:
	"""Judge or vote on one case; never raises."""
	bench = case.primary_bench.value

	def result(action: CaseAction, detail: str | None = None) -> CaseResult:
		return CaseResult(case_id=case.id, title=case.title, bench=bench,
		                  action=action, detail=detail)

	logger.info('evaluating "%s" [%s]', case.title, bench)
	try:
		if evaluator is not None:
			raw = evaluator.evaluate(build_prompt(case))
			verdict = Verdict.from_response(raw)
			response = service.submit_verdict(case.id, verdict.as_payload())
			aggregate = (response.get("aggregateScore")
			             if isinstance(response, dict) else None)
			logger.info("verdict submitted id=%s aggregate=%s", case.id,
			            aggregate)
			return result(CaseAction.JUDGED, f"aggregate {aggregate}")

		if not case.has_ai_verdict:
			logger.info('skipping "%s": no AI verdict to vote on yet',
			            case.title)
			return result(CaseAction.SKIPPED, "no AI verdict yet")
		service.submit_vote(case.id, bench, agree=True)
		logger.info("voted agree on %s bench id=%s (vote-only mode)", bench,
		            case.id)
		return result(CaseAction.VOTED, f"agree on {bench}")
	except Exception as exc:  # noqa: BLE001
		logger.warning("failed for %s: %s", case.id, exc)
		return result(CaseAction.FAILED, str(exc))


def run_heartbeat(
    config: Config,
    params: RunParams,
    *,
    service: CaseServiceProtocol,
    store: StateStore,
    resolve: Resolver = resolve_evaluator,
    evaluator_factory: EvaluatorFactory = create_evaluator,
    now: Callable[[], datetime] = utcnow,
) -> HeartbeatOutcome:
	"""
	Run one heartbeat cycle.

	Parameters:
		config: Runtime configuration.
		params: CLI flags (dry run, force, vote-only).
		service: Judge Human API client.
		store: Local state persistence.
		resolve: Evaluator resolution function.
		evaluator_factory: Builds the strategy for a resolved kind.
		now: Clock, injectable for tests.

	Returns:
		HeartbeatOutcome describing what happened.

	Raises:
		Exception: Any failure outside the per-case loop; state is not saved.
	"""
	state = store.load()

	if not params.dry_run and not is_heartbeat_due(
	    state, config.heartbeat_interval_seconds, params.force, now()):
		logger.info("heartbeat not yet due, exiting; use --force to override")
		return HeartbeatOutcome(status=RunStatus.NOT_DUE)

	if not params.dry_run:
		status = service.get_status()
		if _agent_is_inactive(status):
			logger.warning(
			    "agent key is not yet active; retry after admin activation")
			return HeartbeatOutcome(status=RunStatus.INACTIVE)
		logger.info("agent active, verdicts: %s", _total_votes(status))

	cases = collect_cases(service.get_docket())
	unseen = filter_unseen(cases, state)
	logger.info("docket: %d case(s), %d unseen", len(cases), len(unseen))

	if params.dry_run:
		planned = []
		for case in unseen:
			bench = case.primary_bench.value
			logger.info('would judge "%s" [%s]', case.title, bench)
			planned.append(
			    CaseResult(case_id=case.id, title=case.title, bench=bench,
			               action=CaseAction.PLANNED))
		return HeartbeatOutcome(
		    status=RunStatus.DRY_RUN,
		    total_cases=len(cases),
		    unseen_ids=[c.id for c in unseen],
		    results=planned,
		)

	humanity_index = _fetch_humanity_index(service)

	kind = EvaluatorKind.NONE if params.vote_only else resolve(config)
	evaluator = evaluator_factory(kind, config)
	logger.info(
	    "evaluator: %s",
	    kind.value if evaluator is not None else "none (vote-only mode)")

	results: list[CaseResult] = []
	for case in unseen:
		case_result = _process_case(case, evaluator, service)
		if case_result.marks_processed:
			state.mark_judged(case.id)
		results.append(case_result)

	state.last_heartbeat = now()
	store.save(state)
	logger.info("heartbeat cycle complete")
	return HeartbeatOutcome(
	    status=RunStatus.COMPLETED,
	    evaluator=kind.value,
	    total_cases=len(cases),
	    unseen_ids=[c.id for c in unseen],
	    results=results,
	    humanity_index=humanity_index,
	)


__all__ = ["run_heartbeat"]

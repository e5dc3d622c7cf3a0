"""
Console rendering for heartbeat runs.

Provides Rich tables for dry-run plans, completed-run summaries and the
local state snapshot.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from judgehuman_heartbeat.models.run_outcome import (
    CaseAction,
    HeartbeatOutcome,
    RunStatus,
)
from judgehuman_heartbeat.models.run_state import RunState

_TITLE_MAX_CHARS = 60

_ACTION_STYLES: dict[CaseAction, str] = {
    CaseAction.JUDGED: "green",
    CaseAction.VOTED: "cyan",
    CaseAction.SKIPPED: "yellow",
    CaseAction.FAILED: "red",
    CaseAction.PLANNED: "dim",
}

_STATUS_MESSAGES: dict[RunStatus, str] = {
    RunStatus.NOT_DUE: "Heartbeat not yet due. Use --force to override.",
    RunStatus.INACTIVE:
    "Agent key is not yet active. Retry after admin activation.",
}


def _truncate(text: str) -> str:
	if len(text) > _TITLE_MAX_CHARS:
		return text[:_TITLE_MAX_CHARS - 3] + "..."
	return text


def render_cases_table(outcome: HeartbeatOutcome) -> Table:
	"""Build a table with one row per processed (or planned) case."""
	title = ("Would judge" if outcome.status == RunStatus.DRY_RUN else
	         f"Heartbeat results (evaluator: {outcome.evaluator or 'none'})")
	table = Table(title=title, box=box.SIMPLE_HEAVY, expand=False)
	table.add_column("Case", style="magenta", no_wrap=True)
	table.add_column("Bench", style="bold")
	table.add_column("Title")
	table.add_column("Action")
	table.add_column("Detail", style="dim")
	for res in outcome.results:
		table.add_row(
		    Text(res.case_id),
		    Text(res.bench),
		    Text(_truncate(res.title)),
		    Text(res.action.value, style=_ACTION_STYLES[res.action]),
		    Text(_truncate(res.detail or "")),
		)
	return table


def print_outcome(outcome: HeartbeatOutcome,
                  console: Console | None = None) -> None:
	"""Print a human-readable summary of a heartbeat run."""
	console = console or Console()
	message = _STATUS_MESSAGES.get(outcome.status)
	if message:
		console.print(message)
		return
	console.print(f"Docket: {outcome.total_cases} case(s), "
	              f"{len(outcome.unseen_ids)} unseen.")
	if outcome.results:
		console.print(render_cases_table(outcome))
	if outcome.status == RunStatus.COMPLETED:
		counts = ", ".join(f"{action.value}={outcome.count(action)}"
		                   for action in (CaseAction.JUDGED, CaseAction.VOTED,
		                                  CaseAction.SKIPPED,
		                                  CaseAction.FAILED))
		console.print(f"Heartbeat cycle complete: {counts}")


def print_state(state: RunState, console: Console | None = None) -> None:
	"""Print the persisted run state."""
	console = console or Console()
	last = state.last_heartbeat.isoformat() if state.last_heartbeat else "never"
	console.print(f"Last heartbeat: {last}")
	console.print(f"Judged cases: {len(state.judged_ids)}")


__all__ = ["print_outcome", "print_state", "render_cases_table"]

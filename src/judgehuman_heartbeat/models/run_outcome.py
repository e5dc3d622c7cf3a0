"""
Run outcome models.

Summarizes what a heartbeat did so the CLI can render it and tests can
assert on it without scraping logs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class RunStatus(str, Enum):
	"""How a heartbeat run ended (fatal errors raise instead)."""

	NOT_DUE = "not_due"
	INACTIVE = "inactive"
	DRY_RUN = "dry_run"
	COMPLETED = "completed"


class CaseAction(str, Enum):
	"""What happened to a single case during the processing loop."""

	JUDGED = "judged"
	VOTED = "voted"
	SKIPPED = "skipped"
	FAILED = "failed"
	PLANNED = "planned"


class CaseResult(BaseModel):
	"""Result of processing one case."""

	case_id: str
	title: str = ""
	bench: str
	action: CaseAction
	detail: str | None = None

	@property
	def marks_processed(self) -> bool:
		"""Only successful submissions are recorded in the run state."""
		return self.action in (CaseAction.JUDGED, CaseAction.VOTED)


class HeartbeatOutcome(BaseModel):
	"""Aggregate outcome of one heartbeat invocation."""

	status: RunStatus
	evaluator: str | None = None
	total_cases: int = 0
	unseen_ids: list[str] = Field(default_factory=list)
	results: list[CaseResult] = Field(default_factory=list)
	humanity_index: dict[str, Any] | None = None

	def count(self, action: CaseAction) -> int:
		return sum(1 for r in self.results if r.action == action)


__all__ = ["CaseAction", "CaseResult", "HeartbeatOutcome", "RunStatus"]

"""
Protocol definitions for dependency injection.

Defines Protocol classes for the case service and evaluation strategies
so the heartbeat loop can be exercised with in-memory fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class EvaluatorProtocol(Protocol):
	"""A judgment backend that turns a prompt into raw model output."""

	def evaluate(self, prompt: str) -> str:
		"""Return raw backend output for the prompt."""
		...


class CaseServiceProtocol(Protocol):
	"""
	Protocol for the remote case service.

	Mirrors the endpoints of the Judge Human agent API used by a heartbeat.
	"""

	def get_status(self) -> dict[str, Any]:
		"""Fetch agent status (authenticated)."""
		...

	def get_docket(self) -> Any:
		"""Fetch the current docket."""
		...

	def get_humanity_index(self) -> dict[str, Any]:
		"""Fetch humanity index metrics (authenticated)."""
		...

	def submit_verdict(self, case_id: str, payload: dict[str, Any]) -> dict[str, Any]:
		"""Submit a full verdict for a case."""
		...

	def submit_vote(self, case_id: str, bench: str,
	                agree: bool = True) -> dict[str, Any]:
		"""Submit an agree/disagree vote on a case bench."""
		...


__all__ = ["EvaluatorProtocol", "CaseServiceProtocol"]

"""
Local run-state persistence and the heartbeat schedule gate.

The state file is written only by this process and only at the end of a
completed cycle. A missing or unreadable file yields a fresh state so
the next run simply starts over.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from judgehuman_heartbeat.models.run_state import RunState
from judgehuman_heartbeat.utils.logging import get_logger

logger = get_logger(__name__)


class StateStore:
	"""Reads and atomically writes ``state.json``."""

	def __init__(self, path: Path):
		self.path = Path(path)

	def load(self) -> RunState:
		"""Return the persisted state, or a default one if absent/corrupt."""
		try:
			raw = self.path.read_text(encoding="utf-8")
		except FileNotFoundError:
			return RunState()
		except UnicodeDecodeError:
			logger.warning("state file corrupt, starting fresh path=%s",
			               self.path)
			return RunState()
		except OSError:
			logger.warning("state file unreadable, starting fresh path=%s",
			               self.path, exc_info=True)
			return RunState()
		try:
			return RunState.model_validate(json.loads(raw))
		except (ValueError, ValidationError):
			logger.warning("state file corrupt, starting fresh path=%s",
			               self.path)
			return RunState()

	def save(self, state: RunState) -> None:
		"""Write the state via temp file + rename so readers never see a partial file."""
		self.path.parent.mkdir(parents=True, exist_ok=True)
		fd, tmp_name = tempfile.mkstemp(prefix=".state-", suffix=".json",
		                                dir=self.path.parent)
		try:
			with os.fdopen(fd, "w", encoding="utf-8") as handle:
				json.dump(state.to_json_dict(), handle, indent=2)
				handle.write("\n")
			os.replace(tmp_name, self.path)
		except BaseException:
			Path(tmp_name).unlink(missing_ok=True)
			raise
		logger.debug("state saved path=%s judged=%d", self.path,
		             len(state.judged_ids))


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


def is_heartbeat_due(
    state: RunState,
    interval_seconds: int,
    force: bool = False,
    now: datetime | None = None,
) -> bool:
	"""
	Decide whether a heartbeat cycle should run.

	Parameters:
		state: Persisted run state.
		interval_seconds: Minimum seconds between cycles.
		force: Run regardless of the last heartbeat.
		now: Current time (defaults to UTC now).

	Returns:
		True if forced, never run before, or the interval has elapsed.
	"""
	if force or state.last_heartbeat is None:
		return True
	current = now or utcnow()
	elapsed = (current - state.last_heartbeat).total_seconds()
	return elapsed >= interval_seconds


__all__ = ["StateStore", "is_heartbeat_due", "utcnow"]

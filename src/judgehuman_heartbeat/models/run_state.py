"""
Run state model.

The only entity persisted between heartbeats: the time of the last
completed cycle and the ids of cases already submitted.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunState(BaseModel):
	"""Progress record stored in ``state.json``."""

	model_config = ConfigDict(populate_by_name=True)

	last_heartbeat: datetime | None = Field(default=None,
	                                        alias="lastHeartbeat")
	judged_ids: list[str] = Field(default_factory=list, alias="judgedIds")

	@field_validator("last_heartbeat")
	@classmethod
	def assume_utc(cls, v: datetime | None) -> datetime | None:
		"""Naive timestamps are treated as UTC."""
		if v is not None and v.tzinfo is None:
			return v.replace(tzinfo=timezone.utc)
		return v

	@field_validator("judged_ids", mode="before")
	@classmethod
	def normalize_ids(cls, v: Any) -> Any:
		"""Coerce ids to strings and drop duplicates, keeping first occurrence."""
		if v is None:
			return []
		if not isinstance(v, list):
			return v
		seen: dict[str, None] = {}
		for item in v:
			if item is None:
				continue
			seen.setdefault(str(item), None)
		return list(seen)

	def has_judged(self, case_id: str) -> bool:
		return case_id in self.judged_ids

	def mark_judged(self, case_id: str) -> None:
		"""Record a case as processed; repeated calls are no-ops."""
		if case_id not in self.judged_ids:
			self.judged_ids.append(case_id)

	def to_json_dict(self) -> dict[str, Any]:
		"""Return the on-disk representation."""
		return {
		    "lastHeartbeat":
		    self.last_heartbeat.isoformat().replace("+00:00", "Z")
		    if self.last_heartbeat else None,
		    "judgedIds": list(self.judged_ids),
		}


__all__ = ["RunState"]

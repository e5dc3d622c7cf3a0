"""
Case and docket models.

Cases are read-only input fetched fresh from the Judge Human docket on
every heartbeat. Unknown fields returned by the service are kept but
otherwise ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Bench(str, Enum):
	"""Evaluation categories every case is scored on."""

	ETHICS = "ETHICS"
	HUMANITY = "HUMANITY"
	AESTHETICS = "AESTHETICS"
	HYPE = "HYPE"
	DILEMMA = "DILEMMA"

	@classmethod
	def resolve(cls, value: str | None) -> "Bench":
		"""Case-insensitive lookup; missing or unknown values map to DILEMMA."""
		if value:
			try:
				return cls(value.strip().upper())
			except ValueError:
				pass
		return DEFAULT_BENCH


DEFAULT_BENCH = Bench.DILEMMA


class Case(BaseModel):
	"""A single docket item awaiting judgment."""

	model_config = ConfigDict(extra="allow", populate_by_name=True)

	id: str
	title: str = ""
	exhibit: str = ""
	bench: str | None = None
	ai_verdict: dict[str, Any] | None = Field(default=None, alias="aiVerdict")

	@field_validator("id", mode="before")
	@classmethod
	def coerce_id(cls, v: Any) -> Any:
		if isinstance(v, int) and not isinstance(v, bool):
			return str(v)
		return v

	@field_validator("title", "exhibit", mode="before")
	@classmethod
	def none_to_empty(cls, v: Any) -> Any:
		return "" if v is None else v

	@field_validator("bench", mode="before")
	@classmethod
	def non_string_bench_to_none(cls, v: Any) -> Any:
		"""Non-string benches count as unrecognized and resolve to the default."""
		return v if isinstance(v, str) else None

	@property
	def primary_bench(self) -> Bench:
		return Bench.resolve(self.bench)

	@property
	def has_ai_verdict(self) -> bool:
		"""True when an existing AI verdict with a score is attached."""
		return bool(self.ai_verdict) and self.ai_verdict.get("score") is not None


class Docket(BaseModel):
	"""Response of the docket endpoint: case of the day plus the queue."""

	model_config = ConfigDict(extra="allow", populate_by_name=True)

	case_of_day: Case | None = Field(default=None, alias="caseOfDay")
	docket: list[Case] = Field(default_factory=list)

	@field_validator("docket", mode="before")
	@classmethod
	def none_to_list(cls, v: Any) -> Any:
		if v is None:
			return []
		if isinstance(v, list):
			return [item for item in v if item]
		return v


__all__ = ["Bench", "Case", "DEFAULT_BENCH", "Docket"]

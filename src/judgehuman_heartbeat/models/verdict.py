"""
Verdict model.

A verdict is whatever JSON object the evaluator produced. The expected
shape is ``{"benchScores": {...}, "score": int, "reasoning": [...]}`` but
nothing is enforced here: the Judge Human service is the schema
authority and receives the fields exactly as the backend wrote them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from judgehuman_heartbeat.utils.parsing import extract_object

BENCH_SCORE_RANGE = (1, 10)
COMPOSITE_SCORE_RANGE = (0, 100)
MAX_REASONS = 3
MAX_REASON_CHARS = 200


class Verdict(BaseModel):
	"""Structured judgment for one case."""

	model_config = ConfigDict(extra="allow")

	bench_scores: Any = Field(default=None, alias="benchScores")
	score: Any = None
	reasoning: Any = None

	@classmethod
	def from_response(cls, raw: Any) -> "Verdict":
		"""
		Build a verdict from raw evaluator output.

		Parameters:
			raw: Text returned by an evaluation strategy.

		Returns:
			Verdict carrying every field of the recovered object.

		Raises:
			ParseError: If no JSON object can be recovered.
		"""
		return cls.model_validate(extract_object(raw))

	def as_payload(self) -> dict[str, Any]:
		"""Return the fields the evaluator produced, with original keys."""
		payload: dict[str, Any] = {}
		for name, field in type(self).model_fields.items():
			if name in self.model_fields_set:
				payload[field.alias or name] = getattr(self, name)
		payload.update(self.model_extra or {})
		return payload


__all__ = [
    "BENCH_SCORE_RANGE",
    "COMPOSITE_SCORE_RANGE",
    "MAX_REASONS",
    "MAX_REASON_CHARS",
    "Verdict",
]

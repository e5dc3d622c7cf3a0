"""
JSON recovery utilities for free-form model output.

Backends answer with a JSON object, but the object may be wrapped in
markdown fences, surrounded by prose, or nested as a string inside an
envelope object (``claude --output-format json`` returns
``{"result": "..."}``). Recovery is an ordered pipeline of decoding
stages; each stage returns the decoded object or ``None`` and the first
success wins.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any, Optional

FENCE_RE = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)
ENVELOPE_FIELD = "result"

DecodeStage = Callable[[str], Optional[dict[str, Any]]]


class ParseError(ValueError):
	"""Raised when no JSON object can be recovered from backend output."""


def strip_code_fences(text: str) -> str:
	"""
	Remove markdown code-fence markers and surrounding whitespace.

	Parameters:
		text: Input text potentially containing fenced code blocks.

	Returns:
		Text with every fence marker removed.
	"""
	return FENCE_RE.sub("", text).strip()


def _decode_direct(text: str) -> Optional[dict[str, Any]]:
	"""Decode the whole text; only objects count as a success."""
	try:
		value = json.loads(text)
	except ValueError:
		return None
	return value if isinstance(value, dict) else None


def _decode_braced_span(text: str) -> Optional[dict[str, Any]]:
	"""Decode the span from the first ``{`` to the last ``}``."""
	start = text.find("{")
	end = text.rfind("}")
	if start == -1 or end < start:
		return None
	return _decode_direct(text[start:end + 1])


DECODE_STAGES: tuple[DecodeStage, ...] = (_decode_direct, _decode_braced_span)


def _decode(text: str) -> Optional[dict[str, Any]]:
	cleaned = strip_code_fences(text)
	for stage in DECODE_STAGES:
		value = stage(cleaned)
		if value is not None:
			return value
	return None


def _envelope_payload(obj: dict[str, Any]) -> Optional[str]:
	"""Return the string field that may wrap another object, if any."""
	wrapped = obj.get(ENVELOPE_FIELD)
	if isinstance(wrapped, str):
		return wrapped
	strings = [v for v in obj.values() if isinstance(v, str)]
	if len(strings) == 1 and "{" in strings[0]:
		return strings[0]
	return None


def _unwrap(obj: dict[str, Any]) -> dict[str, Any]:
	"""Descend through envelope fields while the inner text decodes."""
	while True:
		payload = _envelope_payload(obj)
		if payload is None:
			return obj
		inner = _decode(payload)
		if inner is None:
			return obj
		obj = inner


def extract_object(text: Any) -> dict[str, Any]:
	"""
	Recover the innermost JSON object from backend output.

	Parameters:
		text: Raw backend output.

	Returns:
		The decoded object.

	Raises:
		ParseError: If no JSON object can be recovered.
	"""
	if not isinstance(text, str):
		raise ParseError(
		    f"Expected text from evaluator, got {type(text).__name__}")
	decoded = _decode(text)
	if decoded is None:
		raise ParseError("Could not parse evaluator JSON response")
	return _unwrap(decoded)


__all__ = [
    "DECODE_STAGES",
    "ParseError",
    "extract_object",
    "strip_code_fences",
]

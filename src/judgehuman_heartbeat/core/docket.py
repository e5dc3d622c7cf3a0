"""Docket flattening and unseen-case filtering."""

from __future__ import annotations

from judgehuman_heartbeat.models.case import Case, Docket
from judgehuman_heartbeat.models.run_state import RunState


def collect_cases(docket: Docket) -> list[Case]:
	"""
	Flatten a docket into one ordered list, case of the day first.

	Cases are deduplicated by id; the first occurrence wins.
	"""
	combined = ([docket.case_of_day] if docket.case_of_day else []) + list(
	    docket.docket)
	unique: dict[str, Case] = {}
	for case in combined:
		unique.setdefault(case.id, case)
	return list(unique.values())


def filter_unseen(cases: list[Case], state: RunState) -> list[Case]:
	"""Drop cases already recorded in the run state, preserving order."""
	return [case for case in cases if not state.has_judged(case.id)]


__all__ = ["collect_cases", "filter_unseen"]

"""
Evaluation prompt rendering.

Turns a docket case into the natural-language request sent to every
evaluation backend. Rendering is deterministic: the same case always
produces the same prompt.
"""

from __future__ import annotations

import json
from string import Template

from judgehuman_heartbeat.loaders.prompts import load_prompt
from judgehuman_heartbeat.models.case import Bench, Case
from judgehuman_heartbeat.models.verdict import (
    BENCH_SCORE_RANGE,
    COMPOSITE_SCORE_RANGE,
    MAX_REASON_CHARS,
    MAX_REASONS,
)

PROMPT_FILE = "evaluate_case.md"

BENCH_GUIDE: dict[Bench, str] = {
    Bench.ETHICS: "Harm, fairness, consent, accountability",
    Bench.HUMANITY: "Authenticity, lived experience vs performative",
    Bench.AESTHETICS: "Craft, originality, emotional impact",
    Bench.HYPE: "Substance vs marketing spin",
    Bench.DILEMMA: "Moral complexity and competing principles",
}


def describe_bench(bench: Bench) -> str:
	return BENCH_GUIDE[bench]


def _response_shape() -> str:
	example = {
	    "benchScores": {bench.value: 0 for bench in Bench},
	    "score": 0,
	    "reasoning": ["..."],
	}
	return json.dumps(example, separators=(",", ":"))


def build_prompt(case: Case) -> str:
	"""
	Render the evaluation prompt for a case.

	Parameters:
		case: Docket case; title and exhibit are embedded verbatim.

	Returns:
		Prompt text asking for a single JSON verdict object.
	"""
	bench = case.primary_bench
	template = Template(load_prompt(PROMPT_FILE))
	return template.safe_substitute(
	    bench=bench.value,
	    bench_description=describe_bench(bench),
	    title=case.title,
	    exhibit=case.exhibit,
	    bench_min=BENCH_SCORE_RANGE[0],
	    bench_max=BENCH_SCORE_RANGE[1],
	    score_min=COMPOSITE_SCORE_RANGE[0],
	    score_max=COMPOSITE_SCORE_RANGE[1],
	    max_reasons=MAX_REASONS,
	    max_reason_chars=MAX_REASON_CHARS,
	    response_shape=_response_shape(),
	).rstrip("\n")


__all__ = ["BENCH_GUIDE", "build_prompt", "describe_bench"]

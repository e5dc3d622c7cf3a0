"""
Evaluator resolution.

Picks exactly one judgment backend per run, first match wins:

1. ``JUDGEHUMAN_EVAL_CMD``  -> custom command
2. ``claude`` CLI on PATH    -> claude-cli
3. ``ANTHROPIC_API_KEY``     -> anthropic
4. ``OPENAI_API_KEY``        -> openai
5. nothing                   -> none (vote-only)
"""

from __future__ import annotations

from collections.abc import Callable

from judgehuman_heartbeat.core.evaluators import EvaluatorKind, probe_claude_cli
from judgehuman_heartbeat.models.config import Config
from judgehuman_heartbeat.utils.logging import get_logger

logger = get_logger(__name__)

CliProbe = Callable[[float], bool]


def resolve_evaluator(config: Config,
                      probe: CliProbe = probe_claude_cli) -> EvaluatorKind:
	"""
	Return the highest-priority evaluator available on this host.

	Parameters:
		config: Runtime configuration (override command and API keys).
		probe: Callable taking a timeout and reporting whether the local
			CLI is invocable. Only called when no override command is set.

	Returns:
		The selected EvaluatorKind.
	"""
	if config.eval_cmd:
		return EvaluatorKind.CUSTOM
	if probe(config.probe_timeout_seconds):
		return EvaluatorKind.CLAUDE_CLI
	if config.anthropic_api_key:
		return EvaluatorKind.ANTHROPIC
	if config.openai_api_key:
		return EvaluatorKind.OPENAI
	logger.debug("no evaluator available, falling back to vote-only")
	return EvaluatorKind.NONE


__all__ = ["CliProbe", "resolve_evaluator"]

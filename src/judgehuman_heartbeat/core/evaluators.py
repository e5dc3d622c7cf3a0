"""
Evaluation strategies.

Each strategy turns a prompt into raw backend output and raises
``EvaluationError`` when the backend cannot produce any. Strategies never
retry; a failure only affects the case being evaluated.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from anthropic import Anthropic, AnthropicError
from openai import OpenAI, OpenAIError

from judgehuman_heartbeat.llm_clients import (
    create_anthropic_client,
    create_openai_client,
)
from judgehuman_heartbeat.models.config import Config
from judgehuman_heartbeat.utils.logging import get_logger
from judgehuman_heartbeat.utils.protocols import EvaluatorProtocol

logger = get_logger(__name__)

CLAUDE_EXECUTABLE = "claude"
# Exported by a supervising claude session; nested invocations refuse to run while set.
SUPERVISION_MARKER = "CLAUDECODE"
_STDERR_SNIPPET_CHARS = 500


class EvaluatorKind(str, Enum):
	"""Judgment backends in priority order."""

	CUSTOM = "custom"
	CLAUDE_CLI = "claude-cli"
	ANTHROPIC = "anthropic"
	OPENAI = "openai"
	NONE = "none"


class EvaluationError(RuntimeError):
	"""A backend failed to produce output for a prompt."""


def unsupervised_env(base: Mapping[str, str] | None = None) -> dict[str, str]:
	"""Copy of the environment without the supervising-session marker."""
	env = dict(os.environ if base is None else base)
	env.pop(SUPERVISION_MARKER, None)
	return env


def probe_claude_cli(timeout_seconds: float = 3,
                     executable: str = CLAUDE_EXECUTABLE) -> bool:
	"""
	Check whether the local ``claude`` CLI can be invoked.

	Parameters:
		timeout_seconds: Cap on the ``--version`` call.
		executable: Name or path of the CLI.

	Returns:
		True only if ``claude --version`` exits 0 within the timeout.
	"""
	try:
		subprocess.run(  # noqa: S603
		    [executable, "--version"],
		    stdin=subprocess.DEVNULL,
		    capture_output=True,
		    timeout=timeout_seconds,
		    env=unsupervised_env(),
		    check=True,
		)
	except (OSError, subprocess.SubprocessError) as exc:
		logger.debug("claude cli probe failed: %s", exc)
		return False
	return True


def _run_command(
    argv: list[str],
    *,
    label: str,
    timeout_seconds: float,
    input_text: str | None = None,
    env: dict[str, str] | None = None,
) -> str:
	"""Run a command to completion and return its stdout."""
	stdin_kwargs: dict[str, Any] = ({
	    "input": input_text
	} if input_text is not None else {
	    "stdin": subprocess.DEVNULL
	})
	try:
		proc = subprocess.run(  # noqa: S603
		    argv,
		    capture_output=True,
		    text=True,
		    encoding="utf-8",
		    errors="replace",
		    timeout=timeout_seconds,
		    env=env,
		    **stdin_kwargs,
		)
	except FileNotFoundError as exc:
		raise EvaluationError(f"{label} command not found: {argv[0]}") from exc
	except subprocess.TimeoutExpired as exc:
		raise EvaluationError(
		    f"{label} timed out after {timeout_seconds}s") from exc
	except OSError as exc:
		raise EvaluationError(f"{label} failed to start: {exc}") from exc
	if proc.returncode != 0:
		stderr = (proc.stderr or "").strip()[:_STDERR_SNIPPET_CHARS]
		raise EvaluationError(
		    f"{label} exited with status {proc.returncode}: {stderr}")
	return proc.stdout


class CustomCommandEvaluator:
	"""Pipes the prompt to a user-configured command's stdin."""

	def __init__(self, command: str, timeout_seconds: float = 60):
		argv = shlex.split(command)
		if not argv:
			raise ValueError("custom evaluator command is empty")
		self.argv = argv
		self.timeout_seconds = timeout_seconds

	def evaluate(self, prompt: str) -> str:
		return _run_command(
		    self.argv,
		    label="custom evaluator",
		    timeout_seconds=self.timeout_seconds,
		    input_text=prompt,
		)


class ClaudeCliEvaluator:
	"""Runs ``claude -p`` in single-shot mode with JSON output."""

	def __init__(self, timeout_seconds: float = 60,
	             executable: str = CLAUDE_EXECUTABLE):
		self.timeout_seconds = timeout_seconds
		self.executable = executable

	def evaluate(self, prompt: str) -> str:
		return _run_command(
		    [self.executable, "-p", prompt, "--output-format", "json"],
		    label="claude cli",
		    timeout_seconds=self.timeout_seconds,
		    env=unsupervised_env(),
		)


class AnthropicEvaluator:
	"""One Messages API call per prompt."""

	def __init__(self, client: Anthropic, model: str, max_tokens: int):
		self.client = client
		self.model = model
		self.max_tokens = max_tokens

	def evaluate(self, prompt: str) -> str:
		try:
			message = self.client.messages.create(
			    model=self.model,
			    max_tokens=self.max_tokens,
			    messages=[{
			        "role": "user",
			        "content": prompt
			    }],
			)
		except AnthropicError as exc:
			raise EvaluationError(f"anthropic request failed: {exc}") from exc
		for block in message.content or []:
			text = getattr(block, "text", None)
			if text:
				return text
		raise EvaluationError("anthropic response contained no text")


class OpenAIEvaluator:
	"""One Chat Completions call per prompt."""

	def __init__(self, client: OpenAI, model: str, max_tokens: int):
		self.client = client
		self.model = model
		self.max_tokens = max_tokens

	def evaluate(self, prompt: str) -> str:
		try:
			response = self.client.chat.completions.create(
			    model=self.model,
			    max_tokens=self.max_tokens,
			    messages=[{
			        "role": "user",
			        "content": prompt
			    }],
			)
		except OpenAIError as exc:
			raise EvaluationError(f"openai request failed: {exc}") from exc
		if not response.choices or not response.choices[0].message.content:
			raise EvaluationError("openai response contained no text")
		return response.choices[0].message.content


EvaluatorBuilder = Callable[[Config], EvaluatorProtocol]


def _build_custom(config: Config) -> EvaluatorProtocol:
	return CustomCommandEvaluator(config.eval_cmd or "",
	                              config.eval_timeout_seconds)


def _build_claude_cli(config: Config) -> EvaluatorProtocol:
	return ClaudeCliEvaluator(config.eval_timeout_seconds)


def _build_anthropic(config: Config) -> EvaluatorProtocol:
	return AnthropicEvaluator(create_anthropic_client(config),
	                          config.anthropic_model, config.max_tokens)


def _build_openai(config: Config) -> EvaluatorProtocol:
	return OpenAIEvaluator(create_openai_client(config), config.openai_model,
	                       config.max_tokens)


EVALUATOR_BUILDERS: dict[EvaluatorKind, EvaluatorBuilder] = {
    EvaluatorKind.CUSTOM: _build_custom,
    EvaluatorKind.CLAUDE_CLI: _build_claude_cli,
    EvaluatorKind.ANTHROPIC: _build_anthropic,
    EvaluatorKind.OPENAI: _build_openai,
}


def create_evaluator(kind: EvaluatorKind,
                     config: Config) -> EvaluatorProtocol | None:
	"""
	Build the strategy for a resolved evaluator kind.

	Parameters:
		kind: Result of evaluator resolution.
		config: Runtime configuration.

	Returns:
		The strategy, or None for ``EvaluatorKind.NONE`` (vote-only mode).
	"""
	builder = EVALUATOR_BUILDERS.get(kind)
	if builder is None:
		return None
	return builder(config)


__all__ = [
    "AnthropicEvaluator",
    "ClaudeCliEvaluator",
    "CLAUDE_EXECUTABLE",
    "CustomCommandEvaluator",
    "EVALUATOR_BUILDERS",
    "EvaluationError",
    "EvaluatorKind",
    "OpenAIEvaluator",
    "SUPERVISION_MARKER",
    "create_evaluator",
    "probe_claude_cli",
    "unsupervised_env",
]

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from judgehuman_heartbeat.utils.paths import (
    STATE_FILE_NAME,
    default_state_dir,
    expand_path,
)


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	api_key: str | None = Field(
	    default=None,
	    alias="JUDGEHUMAN_API_KEY",
	    description="Agent key for the Judge Human API. Required for writes.",
	)
	eval_cmd: str | None = Field(
	    default=None,
	    alias="JUDGEHUMAN_EVAL_CMD",
	    description=
	    "Custom evaluator command; reads the prompt on stdin, writes JSON to stdout",
	)
	heartbeat_interval_seconds: int = Field(
	    3600,
	    alias="JUDGEHUMAN_HEARTBEAT_INTERVAL",
	    description="Minimum seconds between heartbeat cycles",
	)
	eval_timeout_seconds: int = Field(
	    60,
	    alias="JUDGEHUMAN_EVAL_TIMEOUT",
	    description="Wall-clock cap for subprocess evaluators",
	)
	probe_timeout_seconds: int = Field(
	    3,
	    alias="JUDGEHUMAN_PROBE_TIMEOUT",
	    description="Timeout for the `claude --version` availability probe",
	)
	http_timeout_seconds: float = Field(
	    30.0,
	    alias="JUDGEHUMAN_HTTP_TIMEOUT",
	    description="Timeout for Judge Human API requests",
	)
	state_dir: str | None = Field(
	    default=None,
	    alias="JUDGEHUMAN_STATE_DIR",
	    description="Directory holding state.json (default ~/.judgehuman)",
	)
	max_tokens: int = Field(
	    600,
	    alias="JUDGEHUMAN_MAX_TOKENS",
	    description="Response length cap for hosted backends",
	)
	anthropic_api_key: str | None = Field(
	    default=None,
	    alias="ANTHROPIC_API_KEY",
	    description="Anthropic API key for the hosted evaluator",
	)
	anthropic_model: str = Field(
	    "claude-haiku-4-5-20251001",
	    alias="ANTHROPIC_MODEL",
	    description="Anthropic model identifier",
	)
	openai_api_key: str | None = Field(
	    default=None,
	    alias="OPENAI_API_KEY",
	    description="OpenAI API key for the hosted evaluator",
	)
	openai_model: str = Field(
	    "gpt-4o-mini",
	    alias="OPENAI_MODEL",
	    description="OpenAI model identifier",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("api_key", "eval_cmd", "anthropic_api_key",
	                 "openai_api_key", "state_dir", mode="before")
	@classmethod
	def blank_to_none(cls, v: Any) -> Any:
		"""Treat empty or whitespace-only values as unset."""
		if isinstance(v, str) and not v.strip():
			return None
		return v

	@field_validator("eval_cmd")
	@classmethod
	def validate_eval_cmd(cls, v: str | None) -> str | None:
		"""Reject commands that cannot be split into an argument vector."""
		if v is None:
			return v
		try:
			shlex.split(v)
		except ValueError as exc:
			raise ValueError(
			    f"eval_cmd is not a valid command line: {exc}") from exc
		return v

	@field_validator("heartbeat_interval_seconds")
	@classmethod
	def validate_non_negative(cls, v: int, info: "ValidationInfo") -> int:
		if v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	@field_validator("eval_timeout_seconds", "probe_timeout_seconds",
	                 "http_timeout_seconds", "max_tokens")
	@classmethod
	def validate_positive(cls, v: Any, info: "ValidationInfo") -> Any:
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def state_path(self) -> Path:
		"""Return the state directory as a Path."""
		if self.state_dir:
			return expand_path(self.state_dir)
		return default_state_dir()

	@property
	def state_file(self) -> Path:
		"""Return the full path of the persisted state file."""
		return self.state_path / STATE_FILE_NAME

	@property
	def has_api_key(self) -> bool:
		return bool(self.api_key)


__all__ = ["Config", "load_env"]

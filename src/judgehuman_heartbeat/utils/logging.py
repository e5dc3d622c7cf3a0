"""
Logging setup for the heartbeat.

One root configuration per process. Agent keys and provider keys can
end up in exception text, so every record passes through a masking
filter before any handler formats it.
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Bearer headers, Judge Human agent keys and provider keys (sk-..., sk-ant-...)
_CREDENTIAL_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(Bearer\s+)[^\s'\"]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"\bjh_agent_[A-Za-z0-9_\-]+"), "jh_agent_***"),
    (re.compile(r"\bsk-[A-Za-z0-9_\-]{8,}"), "sk-***"),
]


def sanitize_text(text: str) -> str:
	"""Mask credentials embedded in text.

	Parameters:
		text: Raw text that may contain bearer tokens or API keys.

	Returns:
		Text with credential values replaced by ``***``.
	"""
	for pattern, replacement in _CREDENTIAL_PATTERNS:
		text = pattern.sub(replacement, text)
	return text


class CredentialSanitizingFilter(logging.Filter):
	"""Masks bearer tokens and API keys in log records."""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Sanitize the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = sanitize_text(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: sanitize_text(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    sanitize_text(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level, format, and credential masking.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.INFO
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	root = logging.getLogger()
	if not any(isinstance(f, CredentialSanitizingFilter) for f in root.filters):
		root.addFilter(CredentialSanitizingFilter())
	# Handler-level filters also cover records propagated from child loggers
	for handler in root.handlers:
		if not any(
		    isinstance(f, CredentialSanitizingFilter) for f in handler.filters):
			handler.addFilter(CredentialSanitizingFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_text",
    "CredentialSanitizingFilter",
]

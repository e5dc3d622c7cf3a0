"""Tests for the logging module: credential masking."""

from __future__ import annotations

import logging

from judgehuman_heartbeat.utils.logging import (
	CredentialSanitizingFilter,
	configure_logging,
	sanitize_text,
)


class TestSanitizeText:
	"""Tests for sanitize_text()."""

	def test_masks_bearer_header(self) -> None:
		"""Authorization header values are replaced with ***."""
		result = sanitize_text("sent Authorization: Bearer abc.def-123")
		assert "abc.def-123" not in result
		assert "Bearer ***" in result

	def test_masks_agent_key(self) -> None:
		"""Judge Human agent keys are masked wherever they appear."""
		result = sanitize_text("key=jh_agent_9f8e7d6c rejected")
		assert "9f8e7d6c" not in result
		assert "jh_agent_***" in result
		assert "rejected" in result

	def test_masks_provider_keys(self) -> None:
		"""OpenAI and Anthropic style keys are masked."""
		text = "openai sk-proj-ABCDEFGH1234 anthropic sk-ant-api03-XYZXYZXYZ"
		result = sanitize_text(text)
		assert "ABCDEFGH1234" not in result
		assert "XYZXYZXYZ" not in result
		assert result.count("sk-***") == 2

	def test_short_sk_words_untouched(self) -> None:
		"""Ordinary words starting with sk- are not mistaken for keys."""
		text = "sk-one failed"
		assert sanitize_text(text) == text

	def test_no_change_without_credentials(self) -> None:
		"""Plain text passes through unchanged."""
		text = "docket: 4 case(s), 2 unseen"
		assert sanitize_text(text) == text

	def test_empty_string(self) -> None:
		assert sanitize_text("") == ""


class TestCredentialSanitizingFilter:
	"""Tests for the CredentialSanitizingFilter logging.Filter."""

	def _make_record(
		self,
		msg: str,
		args: tuple | dict | None = None,
	) -> logging.LogRecord:
		"""Create a minimal LogRecord for testing."""
		return logging.LogRecord(
			name="test",
			level=logging.WARNING,
			pathname="test.py",
			lineno=1,
			msg=msg,
			args=args,
			exc_info=None,
		)

	def test_sanitizes_msg(self) -> None:
		f = CredentialSanitizingFilter()
		record = self._make_record("auth failed for jh_agent_secret1")
		f.filter(record)
		assert "secret1" not in record.msg

	def test_sanitizes_tuple_args(self) -> None:
		f = CredentialSanitizingFilter()
		record = self._make_record("header: %s", ("Bearer tok123",))
		f.filter(record)
		assert isinstance(record.args, tuple)
		assert "tok123" not in record.args[0]

	def test_sanitizes_dict_args(self) -> None:
		f = CredentialSanitizingFilter()
		record = self._make_record("%(key)s rejected")
		record.args = {"key": "jh_agent_abc"}
		f.filter(record)
		assert isinstance(record.args, dict)
		assert record.args["key"] == "jh_agent_***"

	def test_non_string_args_unchanged(self) -> None:
		f = CredentialSanitizingFilter()
		record = self._make_record("status=%d", (401,))
		f.filter(record)
		assert record.args == (401,)

	def test_always_returns_true(self) -> None:
		"""Filter never suppresses records."""
		f = CredentialSanitizingFilter()
		assert f.filter(self._make_record("any message")) is True


class TestConfigureLoggingFilter:
	"""Tests that configure_logging installs the filter."""

	def _strip_filters(self) -> logging.Logger:
		root = logging.getLogger()
		root.filters = [
			f for f in root.filters
			if not isinstance(f, CredentialSanitizingFilter)
		]
		return root

	def test_no_duplicate_on_repeated_calls(self) -> None:
		root = self._strip_filters()
		configure_logging("info")
		configure_logging("info")
		count = sum(
			1 for f in root.filters
			if isinstance(f, CredentialSanitizingFilter)
		)
		assert count == 1

	def test_unknown_level_falls_back_to_info(self) -> None:
		self._strip_filters()
		configure_logging("chatty")
		assert any(
			isinstance(f, CredentialSanitizingFilter)
			for f in logging.getLogger().filters
		)

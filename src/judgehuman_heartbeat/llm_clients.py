"""
Hosted LLM client factory module.

Provides factory functions for creating configured Anthropic and OpenAI
SDK clients from runtime configuration. SDK-level retries are disabled:
a failed call fails the case and the next heartbeat retries it.
"""

from __future__ import annotations

from anthropic import Anthropic
from openai import OpenAI

from judgehuman_heartbeat.models.config import Config


def create_anthropic_client(config: Config) -> Anthropic:
	"""Factory for the Anthropic client used by the hosted evaluator."""
	return Anthropic(api_key=config.anthropic_api_key, max_retries=0)


def create_openai_client(config: Config) -> OpenAI:
	"""Factory for the OpenAI client used by the hosted evaluator."""
	return OpenAI(api_key=config.openai_api_key, max_retries=0)


__all__ = ["create_anthropic_client", "create_openai_client"]

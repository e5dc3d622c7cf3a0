"""Packaged prompt templates, read once per process."""

from __future__ import annotations

from functools import lru_cache

from judgehuman_heartbeat.utils.paths import PACKAGE_DIR

PROMPTS_DIR = PACKAGE_DIR / "prompts"


@lru_cache(maxsize=None)
def load_prompt(name: str) -> str:
	"""
	Read a template shipped in the package `prompts` directory.

	Parameters:
		name: Filename of the prompt to load.

	Returns:
		Contents of the prompt file.
	"""
	return (PROMPTS_DIR / name).read_text(encoding="utf-8")


__all__ = ["load_prompt"]

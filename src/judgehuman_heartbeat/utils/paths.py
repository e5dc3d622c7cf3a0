"""
Path utilities.

Resolves the per-user state directory and package-relative asset paths.
"""

from __future__ import annotations

from pathlib import Path

# Root of the judgehuman_heartbeat package directory.
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent

STATE_DIR_NAME = ".judgehuman"
STATE_FILE_NAME = "state.json"


def default_state_dir() -> Path:
	"""Return ``~/.judgehuman`` for the current user."""
	return Path.home() / STATE_DIR_NAME


def expand_path(value: str | Path) -> Path:
	"""
	Expand a leading ``~`` in a user-supplied path.

	Parameters:
		value: Path string or Path, possibly starting with ``~``.

	Returns:
		Expanded Path (not resolved).
	"""
	return Path(value).expanduser()


__all__ = [
    "PACKAGE_DIR",
    "STATE_DIR_NAME",
    "STATE_FILE_NAME",
    "default_state_dir",
    "expand_path",
]

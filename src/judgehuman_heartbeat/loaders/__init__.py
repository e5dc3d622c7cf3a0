"""File and resource loading utilities.

Key modules:
    - prompts: Prompt template loading
"""

from .prompts import load_prompt

__all__ = ["load_prompt"]

"""External service integrations.

Key modules:
    - judgehuman: HTTP client for the Judge Human agent API
"""

from .judgehuman import BASE_URL, JudgeHumanApiError, JudgeHumanClient

__all__ = [
    "BASE_URL",
    "JudgeHumanApiError",
    "JudgeHumanClient",
]

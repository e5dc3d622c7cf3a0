"""User interface components.

Key modules:
    - summary: Rich tables for run outcomes and local state
"""

from judgehuman_heartbeat.ui.summary import (
    print_outcome,
    print_state,
    render_cases_table,
)

__all__ = [
    "print_outcome",
    "print_state",
    "render_cases_table",
]

"""
Judge Human heartbeat - scheduled check-in agent for the Judge Human docket.

On each run the agent checks whether a heartbeat is due, fetches the
docket, judges every unseen case with the best evaluator available on
the host (custom command, claude CLI, Anthropic or OpenAI) and submits
the verdicts, falling back to agree-votes when no evaluator exists.

Main entry points:
    - judgehuman_heartbeat.main: CLI entrypoint
    - judgehuman_heartbeat.core.heartbeat: run_heartbeat() for one cycle
    - judgehuman_heartbeat.models.config: Config and load_env()
"""

__version__ = "0.1.0"

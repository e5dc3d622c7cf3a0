from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from typer.main import get_command

from judgehuman_heartbeat.core.heartbeat import run_heartbeat
from judgehuman_heartbeat.core.state import StateStore
from judgehuman_heartbeat.integrations.judgehuman import JudgeHumanClient
from judgehuman_heartbeat.models.config import Config, load_env
from judgehuman_heartbeat.models.run_params import RunParams
from judgehuman_heartbeat.ui.summary import print_outcome, print_state
from judgehuman_heartbeat.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_FATAL = 1
EXIT_MISSING_API_KEY = 2

cli = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@cli.callback()
def root() -> None:
	"""
	Judge Human heartbeat: judge unseen docket cases on a schedule.

	Env vars: JUDGEHUMAN_API_KEY (required for writes), JUDGEHUMAN_EVAL_CMD,
	JUDGEHUMAN_HEARTBEAT_INTERVAL (seconds, default 3600),
	ANTHROPIC_API_KEY, OPENAI_API_KEY.
	"""
	return None


def _load_config() -> Config:
	load_env()
	try:
		return Config()
	except ValidationError as exc:
		typer.echo(f"Error: invalid configuration:\n{exc}", err=True)
		raise typer.Exit(code=EXIT_FATAL) from exc


def run_impl(
    dry_run: bool = False,
    force: bool = False,
    vote_only: bool = False,
) -> None:
	"""
	Run one heartbeat cycle and print its outcome.

	Parameters:
		dry_run: Fetch the docket and list cases; no writes, no schedule gate.
		force: Ignore the heartbeat interval.
		vote_only: Skip evaluator resolution and only agree-vote.
	"""
	config = _load_config()
	configure_logging(config.log_level)
	params = RunParams(dry_run=dry_run, force=force, vote_only=vote_only)
	if params.requires_api_key and not config.has_api_key:
		typer.echo("Error: JUDGEHUMAN_API_KEY environment variable is required.",
		           err=True)
		typer.echo("Tip: add it to your shell profile or pass it inline.",
		           err=True)
		raise typer.Exit(code=EXIT_MISSING_API_KEY)

	store = StateStore(config.state_file)
	try:
		with JudgeHumanClient(
		    config.api_key,
		    timeout_seconds=config.http_timeout_seconds,
		) as service:
			outcome = run_heartbeat(config, params, service=service,
			                        store=store)
	except Exception as exc:
		logger.error("fatal: %s", exc)
		logger.debug("fatal error details", exc_info=True)
		raise typer.Exit(code=EXIT_FATAL) from exc
	print_outcome(outcome)


@cli.command()
def run(
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Fetch docket and print what would be judged. No API writes.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Ignore lastHeartbeat timestamp, run regardless of interval.",
    ),
    vote_only: bool = typer.Option(
        False,
        "--vote-only",
        help="Skip evaluation, only vote agree on existing verdicts.",
    ),
) -> None:
	"""Run one heartbeat cycle (default command)."""
	run_impl(dry_run, force, vote_only)


@cli.command("show-state")
def show_state() -> None:
	"""Print the locally persisted heartbeat state."""
	config = _load_config()
	print_state(StateStore(config.state_file).load())


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when no command is given.

	Allows scheduling plain `judgehuman-heartbeat --force` without
	spelling out the `run` subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args or (args[0] not in commands
	                and args[0] not in ("--help", "-h")):
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="judgehuman-heartbeat",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()

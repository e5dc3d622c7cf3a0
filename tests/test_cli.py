import pytest
import typer
from typer.testing import CliRunner

from judgehuman_heartbeat import main
from judgehuman_heartbeat.core.state import StateStore
from judgehuman_heartbeat.main import EXIT_FATAL, EXIT_MISSING_API_KEY, cli, entrypoint
from judgehuman_heartbeat.models.run_outcome import (
    CaseAction,
    CaseResult,
    HeartbeatOutcome,
    RunStatus,
)
from judgehuman_heartbeat.models.run_state import RunState

runner = CliRunner()


def _make_fake_run_impl():
	"""Return a (fake_run_impl, seen_dict) pair for monkeypatching."""
	seen = {}

	def fake_run_impl(dry_run=False, force=False, vote_only=False):
		seen["dry_run"] = dry_run
		seen["force"] = force
		seen["vote_only"] = vote_only

	return fake_run_impl, seen


def test_entrypoint_defaults_to_run(monkeypatch):
	fake_run_impl, seen = _make_fake_run_impl()
	monkeypatch.setattr("judgehuman_heartbeat.main.run_impl", fake_run_impl)
	entrypoint([], standalone_mode=False)
	assert seen == {"dry_run": False, "force": False, "vote_only": False}


def test_entrypoint_flags_without_command(monkeypatch):
	fake_run_impl, seen = _make_fake_run_impl()
	monkeypatch.setattr("judgehuman_heartbeat.main.run_impl", fake_run_impl)
	entrypoint(["--force", "--vote-only"], standalone_mode=False)
	assert seen == {"dry_run": False, "force": True, "vote_only": True}


def test_entrypoint_explicit_run(monkeypatch):
	fake_run_impl, seen = _make_fake_run_impl()
	monkeypatch.setattr("judgehuman_heartbeat.main.run_impl", fake_run_impl)
	entrypoint(["run", "--dry-run"], standalone_mode=False)
	assert seen["dry_run"] is True


def test_help_lists_commands():
	result = runner.invoke(cli, ["--help"])
	assert result.exit_code == 0
	assert "run" in result.output
	assert "show-state" in result.output


def test_missing_api_key_exits_2(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == EXIT_MISSING_API_KEY
	assert "JUDGEHUMAN_API_KEY" in result.output


def test_dry_run_does_not_need_api_key(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	seen = {}

	def fake_run_heartbeat(config, params, *, service, store):
		seen["params"] = params
		seen["store"] = store
		return HeartbeatOutcome(
		    status=RunStatus.DRY_RUN,
		    total_cases=1,
		    unseen_ids=["A"],
		    results=[
		        CaseResult(case_id="A", title="Case A", bench="ETHICS",
		                   action=CaseAction.PLANNED)
		    ],
		)

	monkeypatch.setattr(main, "run_heartbeat", fake_run_heartbeat)
	result = runner.invoke(cli, ["run", "--dry-run"])
	assert result.exit_code == 0, result.output
	assert seen["params"].dry_run is True
	assert seen["store"].path == tmp_path / "state.json"
	assert "Case A" in result.output


def test_fatal_error_exits_1(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_API_KEY", "jh_agent_x")
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))

	def boom(config, params, *, service, store):
		raise RuntimeError("GET /api/docket → 503: failed")

	monkeypatch.setattr(main, "run_heartbeat", boom)
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == EXIT_FATAL


def test_not_due_exits_0(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_API_KEY", "jh_agent_x")
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	monkeypatch.setattr(
	    main, "run_heartbeat", lambda config, params, *, service, store:
	    HeartbeatOutcome(status=RunStatus.NOT_DUE))
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == 0
	assert "not yet due" in result.output


def test_invalid_config_exits_1(monkeypatch):
	monkeypatch.setenv("JUDGEHUMAN_API_KEY", "jh_agent_x")
	monkeypatch.setenv("JUDGEHUMAN_HEARTBEAT_INTERVAL", "-5")
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == EXIT_FATAL


def test_show_state(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	StateStore(tmp_path / "state.json").save(RunState(judged_ids=["a", "b"]))
	result = runner.invoke(cli, ["show-state"])
	assert result.exit_code == 0
	assert "Judged cases: 2" in result.output
	assert "never" in result.output


def test_entrypoint_standalone_exit_code(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	with pytest.raises(SystemExit) as exc_info:
		entrypoint([])
	assert exc_info.value.code == EXIT_MISSING_API_KEY


def test_run_impl_raises_typer_exit_without_key(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	with pytest.raises(typer.Exit):
		main.run_impl()


def test_inactive_agent_exits_0(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_API_KEY", "jh_agent_x")
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	monkeypatch.setattr(
	    main, "run_heartbeat", lambda config, params, *, service, store:
	    HeartbeatOutcome(status=RunStatus.INACTIVE))
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == 0
	assert "not yet active" in result.output


def test_malformed_eval_cmd_is_configuration_error(monkeypatch, tmp_path):
	monkeypatch.setenv("JUDGEHUMAN_API_KEY", "jh_agent_x")
	monkeypatch.setenv("JUDGEHUMAN_STATE_DIR", str(tmp_path))
	monkeypatch.setenv("JUDGEHUMAN_EVAL_CMD", 'judge "unterminated')
	result = runner.invoke(cli, ["run"])
	assert result.exit_code == EXIT_FATAL
	assert "invalid configuration" in result.output

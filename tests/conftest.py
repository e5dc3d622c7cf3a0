import pytest

_AMBIENT_ENV = (
    "JUDGEHUMAN_API_KEY",
    "JUDGEHUMAN_EVAL_CMD",
    "JUDGEHUMAN_HEARTBEAT_INTERVAL",
    "JUDGEHUMAN_EVAL_TIMEOUT",
    "JUDGEHUMAN_PROBE_TIMEOUT",
    "JUDGEHUMAN_HTTP_TIMEOUT",
    "JUDGEHUMAN_STATE_DIR",
    "JUDGEHUMAN_MAX_TOKENS",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "LOG_LEVEL",
    "CLAUDECODE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
	"""Keep host credentials and .env files out of every test."""
	for name in _AMBIENT_ENV:
		monkeypatch.delenv(name, raising=False)
	monkeypatch.chdir(tmp_path)

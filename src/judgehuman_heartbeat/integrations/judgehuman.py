"""
Judge Human API client.

Thin synchronous wrapper over the agent endpoints a heartbeat uses. The
agent key is attached only to authenticated requests and only ever sent
to ``BASE_URL``.
"""

from __future__ import annotations

from typing import Any

import httpx

from judgehuman_heartbeat.models.case import Docket
from judgehuman_heartbeat.utils.logging import get_logger

logger = get_logger(__name__)

BASE_URL = "https://www.judgehuman.ai"
DEFAULT_UA = "judgehuman-heartbeat"
DEFAULT_TIMEOUT_SECONDS = 30.0

STATUS_PATH = "/api/agent/status"
DOCKET_PATH = "/api/docket"
HUMANITY_INDEX_PATH = "/api/agent/humanity-index"
VERDICT_PATH = "/api/agent/verdict"
VOTE_PATH = "/api/vote"


class JudgeHumanApiError(RuntimeError):
	"""Non-success response or transport failure from the Judge Human API."""

	def __init__(self, message: str, status_code: int | None = None):
		super().__init__(message)
		self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
	try:
		body = response.json()
	except ValueError:
		return "failed"
	if isinstance(body, dict) and body.get("error"):
		return str(body["error"])
	return "failed"


class JudgeHumanClient:
	"""HTTP client for the Judge Human agent API."""

	def __init__(
	    self,
	    api_key: str | None,
	    *,
	    base_url: str = BASE_URL,
	    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
	    transport: httpx.BaseTransport | None = None,
	) -> None:
		self._api_key = api_key
		self._client = httpx.Client(
		    base_url=base_url,
		    timeout=httpx.Timeout(timeout_seconds, connect=10.0),
		    headers={
		        "Content-Type": "application/json",
		        "User-Agent": DEFAULT_UA,
		    },
		    transport=transport,
		)

	def _request(
	    self,
	    method: str,
	    path: str,
	    *,
	    auth: bool = False,
	    body: dict[str, Any] | None = None,
	) -> Any:
		headers: dict[str, str] = {}
		if auth:
			if not self._api_key:
				raise JudgeHumanApiError(
				    f"{method} {path}: JUDGEHUMAN_API_KEY is not set")
			headers["Authorization"] = f"Bearer {self._api_key}"
		try:
			response = self._client.request(method, path, headers=headers,
			                                json=body)
		except httpx.HTTPError as exc:
			raise JudgeHumanApiError(f"{method} {path} → {exc}") from exc
		if not response.is_success:
			raise JudgeHumanApiError(
			    f"{method} {path} → {response.status_code}: "
			    f"{_error_detail(response)}",
			    status_code=response.status_code,
			)
		try:
			return response.json()
		except ValueError as exc:
			raise JudgeHumanApiError(
			    f"{method} {path} → invalid JSON response",
			    status_code=response.status_code) from exc

	def get_status(self) -> dict[str, Any]:
		"""Authenticated agent status: activation flag and stats."""
		return self._request("GET", STATUS_PATH, auth=True)

	def get_docket(self) -> Docket:
		"""Current docket (unauthenticated)."""
		return Docket.model_validate(self._request("GET", DOCKET_PATH))

	def get_humanity_index(self) -> dict[str, Any]:
		"""Humanity index metrics; informational only."""
		return self._request("GET", HUMANITY_INDEX_PATH, auth=True)

	def submit_verdict(self, case_id: str,
	                   payload: dict[str, Any]) -> dict[str, Any]:
		"""
		Submit a verdict for a case.

		Parameters:
			case_id: Docket case id, sent as ``submissionId``.
			payload: Verdict fields exactly as the evaluator produced them.

		Returns:
			Service response, typically ``{"aggregateScore": ...}``.
		"""
		body = {**payload, "submissionId": case_id}
		return self._request("POST", VERDICT_PATH, auth=True, body=body)

	def submit_vote(self, case_id: str, bench: str,
	                agree: bool = True) -> dict[str, Any]:
		"""Agree or disagree with the existing verdict on one bench."""
		return self._request(
		    "POST",
		    VOTE_PATH,
		    auth=True,
		    body={
		        "submissionId": case_id,
		        "bench": bench,
		        "agree": agree
		    },
		)

	def close(self) -> None:
		self._client.close()

	def __enter__(self) -> JudgeHumanClient:
		return self

	def __exit__(self, *_: object) -> None:
		self.close()


__all__ = [
    "BASE_URL",
    "JudgeHumanApiError",
    "JudgeHumanClient",
]

import json

import httpx
import pytest

from judgehuman_heartbeat.integrations.judgehuman import (
    BASE_URL,
    JudgeHumanApiError,
    JudgeHumanClient,
)
from judgehuman_heartbeat.models.case import Docket

KEY = "jh_agent_testkey123"


class Recorder:
	"""MockTransport handler that records requests and replays responses."""

	def __init__(self, responses=None):
		self.requests: list[httpx.Request] = []
		self.responses = responses or {}

	def __call__(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		status, body = self.responses.get(request.url.path, (200, {}))
		if isinstance(body, str):
			return httpx.Response(status, text=body)
		return httpx.Response(status, json=body)

	def body(self, index: int = -1):
		return json.loads(self.requests[index].content)


def _client(recorder: Recorder, api_key=KEY) -> JudgeHumanClient:
	return JudgeHumanClient(api_key, transport=httpx.MockTransport(recorder))


def test_status_is_authenticated():
	rec = Recorder({"/api/agent/status": (200, {"agent": {"isActive": True}})})
	with _client(rec) as client:
		assert client.get_status() == {"agent": {"isActive": True}}
	req = rec.requests[0]
	assert req.method == "GET"
	assert str(req.url) == f"{BASE_URL}/api/agent/status"
	assert req.headers["Authorization"] == f"Bearer {KEY}"


def test_docket_is_unauthenticated_and_parsed():
	rec = Recorder({
	    "/api/docket": (200, {
	        "caseOfDay": {
	            "id": "A",
	            "title": "Case A"
	        },
	        "docket": [{
	            "id": "B",
	            "title": "Case B",
	            "bench": "ETHICS"
	        }],
	    })
	})
	with _client(rec) as client:
		docket = client.get_docket()
	assert isinstance(docket, Docket)
	assert docket.case_of_day.id == "A"
	assert [c.id for c in docket.docket] == ["B"]
	assert "Authorization" not in rec.requests[0].headers


def test_docket_works_without_key():
	rec = Recorder({"/api/docket": (200, {"docket": []})})
	with _client(rec, api_key=None) as client:
		assert client.get_docket().docket == []


def test_authenticated_call_without_key_fails_before_sending():
	rec = Recorder()
	with _client(rec, api_key=None) as client:
		with pytest.raises(JudgeHumanApiError, match="JUDGEHUMAN_API_KEY"):
			client.get_status()
	assert rec.requests == []


def test_verdict_body_carries_submission_id():
	rec = Recorder({"/api/agent/verdict": (200, {"aggregateScore": 72})})
	payload = {
	    "benchScores": {
	        "ETHICS": 7
	    },
	    "score": 70,
	    "reasoning": ["fair"],
	    "submissionId": "wrong",
	}
	with _client(rec) as client:
		resp = client.submit_verdict("case-1", payload)
	assert resp == {"aggregateScore": 72}
	req = rec.requests[0]
	assert req.method == "POST"
	assert req.headers["Authorization"] == f"Bearer {KEY}"
	assert rec.body() == {
	    "benchScores": {
	        "ETHICS": 7
	    },
	    "score": 70,
	    "reasoning": ["fair"],
	    "submissionId": "case-1",
	}
	assert payload["submissionId"] == "wrong"


def test_vote_body():
	rec = Recorder({"/api/vote": (200, {"ok": True})})
	with _client(rec) as client:
		client.submit_vote("C", "HYPE", agree=True)
	assert rec.body() == {"submissionId": "C", "bench": "HYPE", "agree": True}
	assert rec.requests[0].headers["Authorization"] == f"Bearer {KEY}"


def test_humanity_index_is_authenticated():
	rec = Recorder({"/api/agent/humanity-index": (200, {"humanityIndex": 61})})
	with _client(rec) as client:
		assert client.get_humanity_index() == {"humanityIndex": 61}
	assert rec.requests[0].headers["Authorization"] == f"Bearer {KEY}"


def test_error_message_uses_service_error_field():
	rec = Recorder({"/api/agent/verdict": (409, {"error": "already judged"})})
	with _client(rec) as client:
		with pytest.raises(JudgeHumanApiError) as exc_info:
			client.submit_verdict("X", {})
	assert str(exc_info.value) == "POST /api/agent/verdict → 409: already judged"
	assert exc_info.value.status_code == 409


def test_error_message_defaults_to_failed():
	rec = Recorder({"/api/agent/status": (500, "<html>oops</html>")})
	with _client(rec) as client:
		with pytest.raises(JudgeHumanApiError,
		                   match=r"GET /api/agent/status → 500: failed"):
			client.get_status()


def test_invalid_json_success_body_fails():
	rec = Recorder({"/api/docket": (200, "not json")})
	with _client(rec) as client:
		with pytest.raises(JudgeHumanApiError, match="invalid JSON"):
			client.get_docket()


def test_transport_error_is_wrapped():

	def boom(request):
		raise httpx.ConnectError("connection refused", request=request)

	client = JudgeHumanClient(KEY, transport=httpx.MockTransport(boom))
	with client:
		with pytest.raises(JudgeHumanApiError, match="connection refused"):
			client.get_docket()


def test_user_agent_header():
	rec = Recorder({"/api/docket": (200, {})})
	with _client(rec) as client:
		client.get_docket()
	assert rec.requests[0].headers["User-Agent"] == "judgehuman-heartbeat"

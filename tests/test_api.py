import pytest
from fastapi.testclient import TestClient

from interview_copilot.dependencies import get_config_store, get_copilot, get_session_manager, get_session_store
from interview_copilot.main import app
from interview_copilot.services.session_manager import SessionManager
from interview_copilot.utils.audit import JsonlAuditor


@pytest.fixture
def client(copilot, config, store):
	manager = SessionManager()
	app.dependency_overrides[get_config_store] = lambda: config
	app.dependency_overrides[get_copilot] = lambda: copilot
	app.dependency_overrides[get_session_manager] = lambda: manager
	app.dependency_overrides[get_session_store] = lambda: store
	with TestClient(app) as c:
		yield c
	app.dependency_overrides.clear()


def _context(client):
	resp = client.put("/api/settings/context", json={"topic": "Snowflake", "experience_level": "senior"})
	assert resp.status_code == 200


def _started_session(client) -> str:
	_context(client)
	session_id = client.post("/api/interview").json()["session_id"]
	assert client.post(f"/api/interview/{session_id}/start").status_code == 200
	return session_id


def test_detect_endpoint(client):
	resp = client.post("/api/detect", json={"text": "What are your strengths and weaknesses?"})
	body = resp.json()
	assert body["is_question"] is True
	assert body["suggestion"].startswith("For strengths")

	resp = client.post("/api/detect", json={"text": "I worked at Acme for 3 years"})
	assert resp.json() == {"is_question": False, "suggestion": None}


def test_context_requires_topic(client):
	resp = client.put("/api/settings/context", json={"topic": "   "})
	assert resp.status_code == 400
	assert client.get("/api/settings/context").status_code == 404


def test_start_without_context_is_rejected(client):
	session_id = client.post("/api/interview").json()["session_id"]
	resp = client.post(f"/api/interview/{session_id}/start")
	assert resp.status_code == 400
	assert "context" in resp.json()["detail"]


def test_unknown_session_is_404(client):
	assert client.get("/api/interview/nope").status_code == 404


def test_fragment_flow_with_dedup(client, stub):
	client.put("/api/settings/keys/gemini", json={"api_key": "gm-key-123456"})
	session_id = _started_session(client)

	first = client.post(f"/api/interview/{session_id}/fragments", json={"text": "Tell me about yourself", "final": True}).json()
	assert first["is_question"] is True
	assert first["answer"] == {"success": True, "answer": "Stub answer", "error": None}

	second = client.post(f"/api/interview/{session_id}/fragments", json={"text": "Tell me about yourself", "final": True}).json()
	assert second["duplicate"] is True
	assert second["answer"] is None
	assert len(stub.requests) == 1

	state = client.get(f"/api/interview/{session_id}").json()
	assert state["status"] == "recording"
	assert len(state["records"]) == 1


def test_missing_key_surfaces_as_value(client, stub):
	session_id = _started_session(client)
	body = client.post(f"/api/interview/{session_id}/fragments", json={"text": "What is Snowpipe?"}).json()
	assert body["answer"]["success"] is False
	assert stub.requests == []


def test_fragment_rejected_when_stopped(client):
	session_id = _started_session(client)
	client.post(f"/api/interview/{session_id}/stop")
	resp = client.post(f"/api/interview/{session_id}/fragments", json={"text": "What is Snowpipe?"})
	assert resp.status_code == 409


def test_save_list_stats_delete(client):
	client.put("/api/settings/keys/gemini", json={"api_key": "gm-key-123456"})
	session_id = _started_session(client)
	client.post(f"/api/interview/{session_id}/fragments", json={"text": "Where do you see yourself in 5 years?"})

	saved = client.post(f"/api/interview/{session_id}/save")
	assert saved.status_code == 200
	assert saved.json()["questions_count"] == 1

	items = client.get("/api/sessions").json()["items"]
	assert [i["id"] for i in items] == [session_id]
	assert client.get("/api/sessions/stats").json()["total_questions"] == 1
	assert client.get(f"/api/sessions/{session_id}").json()["records"][0]["question"] == "Where do you see yourself in 5 years?"

	assert client.delete(f"/api/sessions/{session_id}").status_code == 200
	assert client.delete(f"/api/sessions/{session_id}").status_code == 404


def test_reset_requires_stop_and_issues_new_id(client):
	session_id = _started_session(client)
	assert client.post(f"/api/interview/{session_id}/reset").status_code == 409

	client.post(f"/api/interview/{session_id}/stop")
	body = client.post(f"/api/interview/{session_id}/reset").json()
	assert body["session_id"] != session_id
	assert body["status"] == "idle"
	assert client.get(f"/api/interview/{session_id}").status_code == 404


def test_transcript_export(client):
	session_id = _started_session(client)
	client.post(f"/api/interview/{session_id}/fragments", json={"text": "We use dbt with Snowflake"})
	markdown = client.get(f"/api/interview/{session_id}/transcript").json()["markdown"]
	assert "**Context:** Snowflake • senior level" in markdown
	assert markdown.endswith("We use dbt with Snowflake ")


def test_provider_settings(client):
	assert client.get("/api/settings/provider").json() == {"provider": None, "configured": False}
	client.put("/api/settings/keys/groq", json={"api_key": "gsk-abcdefgh9999"})
	assert client.get("/api/settings/provider").json() == {"provider": "groq", "configured": True}
	assert client.put("/api/settings/provider", json={"provider": "openai"}).json() == {"provider": "openai", "configured": False}
	assert client.get("/api/settings/keys").json()["keys"]["groq"] == "...9999"


def test_practice_endpoints(client):
	bank = client.get("/api/practice/questions").json()["categories"]
	assert set(bank) == {"behavioral", "introduction", "strengths", "leadership", "technical", "future"}
	assert bank["introduction"][0]["suggestion"].startswith("Present-Past-Future")
	assert len(client.get("/api/practice/common").json()) == 15


def test_websocket_pushes_question_then_answer(client):
	client.put("/api/settings/keys/gemini", json={"api_key": "gm-key-123456"})
	session_id = _started_session(client)

	with client.websocket_connect(f"/ws/transcript/{session_id}") as ws:
		ws.send_text('{"text": "What is", "final": false}')
		assert ws.receive_json() == {"type": "interim", "text": "What is"}

		ws.send_text('{"text": "What is zero-copy cloning?", "final": true}')
		assert ws.receive_json()["type"] == "heard"
		question = ws.receive_json()
		assert question["type"] == "question"
		assert question["question"] == "What is zero-copy cloning?"
		answer = ws.receive_json()
		assert answer["type"] == "answer"
		assert answer["answer"] == "Stub answer"

		ws.send_text('{"text": "What is zero-copy cloning?", "final": true}')
		assert ws.receive_json()["type"] == "heard"
		assert ws.receive_json()["type"] == "duplicate"

		ws.send_text("__end__")
		assert ws.receive_json() == {"type": "end"}


def test_regenerate(client, stub):
	client.put("/api/settings/keys/gemini", json={"api_key": "gm-key-123456"})
	session_id = _started_session(client)
	client.post(f"/api/interview/{session_id}/fragments", json={"text": "Tell me about yourself"})

	body = client.post(f"/api/interview/{session_id}/regenerate", json={"question": "Tell me about yourself"}).json()
	assert body["answer"]["success"] is True
	assert body["suggestion"].startswith("Present-Past-Future")
	assert len(stub.requests) == 2


def test_regenerate_without_context(client):
	session_id = client.post("/api/interview").json()["session_id"]
	resp = client.post(f"/api/interview/{session_id}/regenerate", json={"question": "Why?"})
	assert resp.status_code == 400


class BrokenAuditor(JsonlAuditor):
	async def answer(self, session_id, question, provider, answer):
		raise OSError("disk full")


def test_websocket_survives_failed_answer_task(client, copilot, monkeypatch):
	monkeypatch.setattr(copilot, "_audit", BrokenAuditor())
	client.put("/api/settings/keys/gemini", json={"api_key": "gm-key-123456"})
	session_id = _started_session(client)

	with client.websocket_connect(f"/ws/transcript/{session_id}") as ws:
		ws.send_text('{"text": "What is zero-copy cloning?", "final": true}')
		assert ws.receive_json()["type"] == "heard"
		assert ws.receive_json()["type"] == "question"
		ws.send_text("__end__")
		assert ws.receive_json() == {"type": "end"}

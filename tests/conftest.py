import json
from typing import Any, List, Optional

import httpx
import pytest

from interview_copilot.config import Settings
from interview_copilot.schemas import ExperienceLevel, InterviewContext, Provider
from interview_copilot.services.config_store import ConfigStore
from interview_copilot.services.copilot import InterviewCopilot
from interview_copilot.services.llm_service import LLMService
from interview_copilot.services.session_manager import RecordingSession
from interview_copilot.services.session_store import SessionStore
from interview_copilot.utils.audit import JsonlAuditor


class ProviderStub:
	"""Stands in for every provider endpoint and records what was sent."""

	def __init__(self, status_code: int = 200, body: Any = None, exc: Optional[Exception] = None) -> None:
		self.status_code = status_code
		self.body = body if body is not None else {"candidates": [{"content": {"parts": [{"text": "Stub answer"}]}}]}
		self.exc = exc
		self.requests: List[httpx.Request] = []

	def handler(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if self.exc is not None:
			raise self.exc
		return httpx.Response(self.status_code, json=self.body)

	@property
	def transport(self) -> httpx.MockTransport:
		return httpx.MockTransport(self.handler)

	def last_json(self) -> dict:
		return json.loads(self.requests[-1].content)


@pytest.fixture
def env_settings() -> Settings:
	return Settings(
		_env_file=None,
		llm_provider="gemini",
		openai_api_key=None,
		groq_api_key=None,
		anthropic_api_key=None,
		gemini_api_key=None,
	)


@pytest.fixture
def config(tmp_path, env_settings) -> ConfigStore:
	return ConfigStore(path=tmp_path / "config.json", env=env_settings)


@pytest.fixture
def store(tmp_path) -> SessionStore:
	return SessionStore(path=tmp_path / "sessions.json", max_sessions=50)


@pytest.fixture
def stub() -> ProviderStub:
	return ProviderStub()


@pytest.fixture
def context() -> InterviewContext:
	return InterviewContext(topic="Snowflake", experience_level=ExperienceLevel.mid, role="Data Engineer")


@pytest.fixture
def copilot(stub, config, store, tmp_path) -> InterviewCopilot:
	return InterviewCopilot(
		llm=LLMService(transport=stub.transport, timeout=5),
		config=config,
		store=store,
		audit=JsonlAuditor(str(tmp_path / "audit.jsonl")),
	)


@pytest.fixture
def recording(context) -> RecordingSession:
	session = RecordingSession(session_id="session_test")
	session.start(context)
	return session


@pytest.fixture
def gemini_key(config) -> str:
	config.save_api_key(Provider.gemini, "gm-test-key-1234")
	return "gm-test-key-1234"

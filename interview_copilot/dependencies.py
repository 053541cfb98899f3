from __future__ import annotations

from interview_copilot.services.config_store import ConfigStore, config_store
from interview_copilot.services.copilot import InterviewCopilot, copilot
from interview_copilot.services.session_manager import SessionManager, session_manager
from interview_copilot.services.session_store import SessionStore, session_store


# FastAPI providers for the process-wide singletons; tests swap them through
# app.dependency_overrides.

def get_config_store() -> ConfigStore:
	return config_store


def get_copilot() -> InterviewCopilot:
	return copilot


def get_session_manager() -> SessionManager:
	return session_manager


def get_session_store() -> SessionStore:
	return session_store

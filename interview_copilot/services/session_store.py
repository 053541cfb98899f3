from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from interview_copilot.config import settings
from interview_copilot.schemas import InterviewSession, SessionStats


logger = logging.getLogger(__name__)


def format_minutes(minutes: float) -> str:
	hours = int(minutes // 60)
	mins = int(minutes % 60)
	return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def format_duration(seconds: int) -> str:
	"""Live timer format, ``m:ss``."""
	mins, secs = divmod(max(0, int(seconds)), 60)
	return f"{mins}:{secs:02d}"


class SessionStore:
	"""Saved interview sessions, newest first, capped at ``max_sessions``.

	Stored as a single JSON array so trimming to the cap is one rewrite.
	"""

	def __init__(self, path: Optional[Path] = None, max_sessions: Optional[int] = None) -> None:
		self._path = path or Path(settings.data_dir) / "sessions.json"
		self._max_sessions = max_sessions if max_sessions is not None else settings.max_saved_sessions
		self._lock = asyncio.Lock()

	def _load(self) -> List[InterviewSession]:
		if not self._path.exists():
			return []
		try:
			with self._path.open("r", encoding="utf-8") as f:
				raw = json.load(f)
		except (OSError, ValueError) as e:
			logger.warning("Failed to read sessions from %s: %s", self._path, e)
			return []
		sessions: List[InterviewSession] = []
		for item in raw if isinstance(raw, list) else []:
			try:
				sessions.append(InterviewSession.model_validate(item))
			except ValidationError:
				logger.warning("Skipping malformed saved session in %s", self._path)
		return sessions

	def _save(self, sessions: List[InterviewSession]) -> None:
		self._path.parent.mkdir(parents=True, exist_ok=True)
		tmp = self._path.with_suffix(".tmp")
		with tmp.open("w", encoding="utf-8") as f:
			json.dump([s.model_dump(mode="json") for s in sessions], f, ensure_ascii=False, indent=2)
		tmp.replace(self._path)

	async def append(self, session: InterviewSession) -> None:
		"""Insert at the front; re-saving an id replaces the earlier copy."""
		async with self._lock:
			sessions = [s for s in self._load() if s.id != session.id]
			sessions.insert(0, session)
			self._save(sessions[: self._max_sessions])

	async def list_sessions(self) -> List[InterviewSession]:
		return self._load()

	async def get(self, session_id: str) -> Optional[InterviewSession]:
		for s in self._load():
			if s.id == session_id:
				return s
		return None

	async def delete(self, session_id: str) -> bool:
		async with self._lock:
			sessions = self._load()
			remaining = [s for s in sessions if s.id != session_id]
			if len(remaining) == len(sessions):
				return False
			self._save(remaining)
			return True

	async def stats(self) -> SessionStats:
		sessions = self._load()
		total_sessions = len(sessions)
		total_duration = sum(s.duration for s in sessions)
		total_questions = sum(s.questions_count for s in sessions)
		return SessionStats(
			total_sessions=total_sessions,
			total_duration=total_duration,
			average_duration=(total_duration / total_sessions) if total_sessions else 0.0,
			total_questions=total_questions,
			total_duration_label=format_minutes(total_duration),
		)


session_store = SessionStore()

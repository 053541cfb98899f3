from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Set
import uuid
import asyncio

from interview_copilot.schemas import InterviewContext, QuestionAnswerRecord, SessionStatus


DETECTION_LOG_LIMIT = 20


class ConfigurationError(Exception):
	"""The session cannot proceed until the user fixes their settings."""


def generate_session_id() -> str:
	return f"session_{int(datetime.utcnow().timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"


@dataclass
class RecordingSession:
	session_id: str
	status: SessionStatus = SessionStatus.idle
	context: Optional[InterviewContext] = None
	transcript: str = ""
	processed_questions: Set[str] = field(default_factory=set)
	records: List[QuestionAnswerRecord] = field(default_factory=list)
	current_question: Optional[str] = None
	pending_answers: int = 0
	last_error: Optional[str] = None
	detection_log: List[str] = field(default_factory=list)
	started_at: Optional[datetime] = None
	last_update: datetime = field(default_factory=datetime.utcnow)

	@property
	def recording(self) -> bool:
		return self.status is SessionStatus.recording

	def log(self, message: str) -> None:
		stamp = datetime.now().strftime("%H:%M:%S")
		self.detection_log.insert(0, f"[{stamp}] {message}")
		del self.detection_log[DETECTION_LOG_LIMIT:]

	def touch(self) -> None:
		self.last_update = datetime.utcnow()

	def start(self, context: Optional[InterviewContext]) -> None:
		if context is None or not context.topic:
			raise ConfigurationError("Please set and save interview context before starting recording.")
		if self.recording:
			return
		self.context = context
		self.status = SessionStatus.recording
		if self.started_at is None:
			self.started_at = datetime.utcnow()
		self.log(f"Recording started for {context.topic} interview ({context.experience_level.value} level)")
		self.touch()

	def stop(self) -> None:
		if not self.recording:
			return
		self.status = SessionStatus.stopped
		self.log("Recording stopped")
		self.touch()

	def recent_transcript(self, limit: int) -> str:
		return self.transcript[-limit:] if limit > 0 else ""

	def duration_minutes(self, now: Optional[datetime] = None) -> int:
		if self.started_at is None:
			return 0
		elapsed = (now or datetime.utcnow()) - self.started_at
		return max(0, int(elapsed.total_seconds() // 60))


class SessionManager:
	"""Live recording sessions, kept in memory for the lifetime of the process."""

	def __init__(self) -> None:
		self._sessions: Dict[str, RecordingSession] = {}
		self._lock = asyncio.Lock()

	async def create_session(self, context: Optional[InterviewContext] = None) -> RecordingSession:
		async with self._lock:
			state = RecordingSession(session_id=generate_session_id(), context=context)
			self._sessions[state.session_id] = state
			return state

	async def get(self, session_id: str) -> Optional[RecordingSession]:
		return self._sessions.get(session_id)

	async def get_required(self, session_id: str) -> RecordingSession:
		state = await self.get(session_id)
		if state is None:
			raise KeyError("session not found")
		return state

	async def reset(self, session_id: str) -> RecordingSession:
		"""Start a new session identity from a stopped one. The old id stops resolving.

		The new identity is a separate object, so answers still in flight for the
		old one finish against the old state and never reach the new log.
		"""
		async with self._lock:
			state = self._sessions.get(session_id)
			if state is None:
				raise KeyError("session not found")
			if state.recording:
				raise ConfigurationError("Stop recording before starting a new session.")
			del self._sessions[session_id]
			fresh = RecordingSession(session_id=generate_session_id(), context=state.context)
			self._sessions[fresh.session_id] = fresh
			return fresh


session_manager = SessionManager()

from __future__ import annotations

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional
from datetime import datetime


class Provider(str, Enum):
	openai = "openai"
	groq = "groq"
	anthropic = "anthropic"
	gemini = "gemini"


class ExperienceLevel(str, Enum):
	entry = "entry"
	mid = "mid"
	senior = "senior"
	expert = "expert"


class SessionStatus(str, Enum):
	idle = "idle"
	recording = "recording"
	stopped = "stopped"


class InterviewContext(BaseModel):
	topic: str = Field(..., description="Interview domain, e.g. Snowflake, Python, AWS")
	experience_level: ExperienceLevel = ExperienceLevel.mid
	role: Optional[str] = None
	additional_context: Optional[str] = None

	@field_validator("topic", mode="before")
	@classmethod
	def strip_topic(cls, v):
		return v.strip() if isinstance(v, str) else v


class TranscriptFragment(BaseModel):
	text: str
	final: bool = True


class AIResponse(BaseModel):
	success: bool
	answer: Optional[str] = None
	error: Optional[str] = None


class QuestionAnswerRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	question: str
	ai_answer: str
	suggestion: str
	timestamp: datetime = Field(default_factory=datetime.utcnow)


class InterviewSession(BaseModel):
	"""A finished session as kept by the session log store."""
	id: str
	date: datetime
	duration: int = Field(0, ge=0, description="Minutes between recording start and save")
	questions_count: int = 0
	transcript: str = ""
	questions: List[str] = Field(default_factory=list)
	records: List[QuestionAnswerRecord] = Field(default_factory=list)
	context: Optional[InterviewContext] = None


# API payloads


class CreateSessionResponse(BaseModel):
	session_id: str


class DetectedQuestion(BaseModel):
	question: str
	suggestion: str


class FragmentOut(BaseModel):
	accepted: bool
	is_question: bool = False
	duplicate: bool = False
	question: Optional[str] = None
	suggestion: Optional[str] = None
	answer: Optional[AIResponse] = None


class RegenerateIn(BaseModel):
	question: str = Field(..., min_length=1)


class RegenerateOut(BaseModel):
	question: str
	suggestion: str
	answer: AIResponse


class DetectIn(BaseModel):
	text: str


class DetectOut(BaseModel):
	is_question: bool
	suggestion: Optional[str] = None


class LiveSessionOut(BaseModel):
	session_id: str
	status: SessionStatus
	context: Optional[InterviewContext]
	transcript: str
	current_question: Optional[str]
	pending_answers: int
	last_error: Optional[str]
	records: List[QuestionAnswerRecord]
	detection_log: List[str]
	started_at: Optional[datetime]


class TranscriptOut(BaseModel):
	session_id: str
	markdown: str


class ProviderIn(BaseModel):
	provider: Provider


class ProviderOut(BaseModel):
	provider: Optional[Provider]
	configured: bool


class ApiKeyIn(BaseModel):
	api_key: str = Field(..., min_length=1)


class ApiKeysOut(BaseModel):
	keys: Dict[str, Optional[str]]


class SessionSummary(BaseModel):
	id: str
	date: datetime
	duration: int
	questions_count: int


class SessionList(BaseModel):
	items: List[SessionSummary]


class SessionStats(BaseModel):
	total_sessions: int
	total_duration: int
	average_duration: float
	total_questions: int
	total_duration_label: str


class PracticeQuestion(BaseModel):
	id: str
	question: str
	category: str
	suggestion: str


class PracticeBank(BaseModel):
	categories: Dict[str, List[PracticeQuestion]]

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from interview_copilot.schemas import (
	AIResponse,
	DetectedQuestion,
	InterviewContext,
	InterviewSession,
	QuestionAnswerRecord,
	TranscriptFragment,
)
from interview_copilot.services.config_store import ConfigStore, config_store
from interview_copilot.services.llm_service import LLMService, llm_service
from interview_copilot.services.question_detector import is_question
from interview_copilot.services.session_manager import ConfigurationError, RecordingSession
from interview_copilot.services.session_store import SessionStore, session_store
from interview_copilot.services.suggestion_service import classify
from interview_copilot.utils.audit import JsonlAuditor, auditor


logger = logging.getLogger(__name__)

# Conversation context sent with each question: tail of the running transcript
RECENT_TRANSCRIPT_CHARS = 500


@dataclass
class IngestResult:
	accepted: bool
	is_question: bool = False
	duplicate: bool = False
	detected: Optional[DetectedQuestion] = None


class InterviewCopilot:
	"""Glue between the transcript source, the classifiers and answer generation.

	Session state is owned by the caller and passed in; this object only holds
	its collaborators. ``ingest`` is synchronous on purpose: the processed-question
	set and the transcript are only touched between awaits.
	"""

	def __init__(
		self,
		llm: Optional[LLMService] = None,
		config: Optional[ConfigStore] = None,
		store: Optional[SessionStore] = None,
		audit: Optional[JsonlAuditor] = None,
	) -> None:
		self._llm = llm or llm_service
		self._config = config or config_store
		self._store = store or session_store
		self._audit = audit or auditor

	def ingest(self, session: RecordingSession, fragment: TranscriptFragment) -> IngestResult:
		if not fragment.final or not session.recording:
			return IngestResult(accepted=False)

		text = fragment.text.strip()
		if not text:
			return IngestResult(accepted=False)

		session.transcript += text + " "
		session.log(f'Heard: "{text}"')
		session.touch()

		if not is_question(text):
			session.log("Not a question")
			return IngestResult(accepted=True)

		if text in session.processed_questions:
			session.log("Question already processed, skipping")
			return IngestResult(accepted=True, is_question=True, duplicate=True)

		session.processed_questions.add(text)
		session.current_question = text
		detected = DetectedQuestion(question=text, suggestion=classify(text))
		session.log(f'QUESTION DETECTED: "{text}"')
		return IngestResult(accepted=True, is_question=True, detected=detected)

	def context_for(self, session: RecordingSession) -> Optional[InterviewContext]:
		"""Context for the next answer: the saved settings win over what the session started with."""
		return self._config.get_context() or session.context

	def recorded_context(self, session: RecordingSession) -> Optional[InterviewContext]:
		"""Context the session was recorded under, used for exports and saved sessions."""
		return session.context or self._config.get_context()

	async def answer(self, session: RecordingSession, detected: DetectedQuestion) -> AIResponse:
		"""Generate an answer and append it to ``session`` on success.

		Results are appended even if the session stopped while the request was in flight.
		"""
		session_id = session.session_id
		provider = self._config.get_provider()
		if provider is None:
			result = AIResponse(success=False, error="AI provider not configured. Please add an API key in settings.")
		else:
			context = self.context_for(session)
			window = session.recent_transcript(RECENT_TRANSCRIPT_CHARS)
			api_key = self._config.get_api_key(provider)
			if context is not None:
				session.log(f"Generating {context.topic} answer for {context.experience_level.value} level")
			session.pending_answers += 1
			try:
				result = await self._llm.generate_answer(
					detected.question,
					window,
					provider,
					context,
					api_key=api_key,
				)
			finally:
				session.pending_answers -= 1

		if result.success and result.answer:
			session.records.append(QuestionAnswerRecord(
				question=detected.question,
				ai_answer=result.answer,
				suggestion=detected.suggestion,
			))
			session.last_error = None
			session.log("Answer generated")
			await self._audit.answer(session_id, detected.question, provider.value, result.answer)
		else:
			error = result.error or "Failed to generate answer"
			session.last_error = error
			session.log(f"Answer failed: {error}")
			await self._audit.answer_error(session_id, detected.question, provider.value if provider else None, error)
		session.touch()
		return result

	async def process(self, session: RecordingSession, fragment: TranscriptFragment) -> Tuple[IngestResult, Optional[AIResponse]]:
		result = self.ingest(session, fragment)
		if result.detected is None:
			return result, None
		await self.record_detection(session, result.detected)
		return result, await self.answer(session, result.detected)

	async def record_detection(self, session: RecordingSession, detected: DetectedQuestion) -> None:
		await self._audit.question_detected(session.session_id, detected.question, detected.suggestion)

	async def regenerate(self, session: RecordingSession, question: str) -> Tuple[DetectedQuestion, AIResponse]:
		"""Manual re-ask; bypasses the processed-question set."""
		context = self.context_for(session)
		if context is None or not context.topic:
			session.log("Context not saved - cannot regenerate answer")
			raise ConfigurationError("Please set and save interview context first.")
		detected = DetectedQuestion(question=question.strip(), suggestion=classify(question))
		session.current_question = detected.question
		return detected, await self.answer(session, detected)

	def snapshot(self, session: RecordingSession) -> InterviewSession:
		if session.started_at is None or not session.transcript:
			raise ValueError("Nothing to save yet: record some of the interview first.")
		records = list(session.records)
		return InterviewSession(
			id=session.session_id,
			date=session.started_at,
			duration=session.duration_minutes(),
			questions_count=len(records),
			transcript=session.transcript,
			questions=[r.question for r in records],
			records=records,
			context=self.recorded_context(session),
		)

	async def save(self, session: RecordingSession) -> InterviewSession:
		saved = self.snapshot(session)
		await self._store.append(saved)
		session.log("Session saved")
		await self._audit.session_saved(saved.id, saved.questions_count, saved.duration)
		logger.info("Saved session %s with %d answers", saved.id, saved.questions_count)
		return saved


def format_transcript(session: RecordingSession, context: Optional[InterviewContext] = None) -> str:
	"""Markdown export: context header, answered questions, then the raw transcript."""
	if not session.transcript:
		return "No transcript available yet..."

	context = context or session.context
	parts = ["# Interview Transcript\n\n"]
	if context is not None:
		header = f"**Context:** {context.topic} • {context.experience_level.value} level"
		if context.role:
			header += f" • {context.role}"
		parts.append(header + "\n\n")

	if session.records:
		parts.append("## Questions & AI Answers:\n\n")
		for index, qa in enumerate(session.records, start=1):
			parts.append(f"**{index}. {qa.question}**\n\n")
			parts.append(f"*AI Answer Suggestion:*\n{qa.ai_answer}\n\n")
			parts.append(f"*Framework:* {qa.suggestion}\n\n")
			parts.append("---\n\n")

	parts.append("## Full Transcript:\n\n")
	parts.append(session.transcript)
	return "".join(parts)


copilot = InterviewCopilot()

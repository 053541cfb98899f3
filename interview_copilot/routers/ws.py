from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Set

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, Depends
from pydantic import ValidationError

from interview_copilot.dependencies import get_copilot, get_session_manager
from interview_copilot.schemas import DetectedQuestion, TranscriptFragment
from interview_copilot.services.copilot import InterviewCopilot
from interview_copilot.services.session_manager import RecordingSession, SessionManager


logger = logging.getLogger(__name__)

router = APIRouter()


async def _send(websocket: WebSocket, payload: Dict[str, Any]) -> None:
	try:
		await websocket.send_json(payload)
	except (WebSocketDisconnect, RuntimeError):
		# Client went away; the answer is still kept on the session
		logger.debug("Dropping %s event for closed websocket", payload.get("type"))


async def _answer_and_push(websocket: WebSocket, copilot: InterviewCopilot, state: RecordingSession, detected: DetectedQuestion) -> None:
	result = await copilot.answer(state, detected)
	if result.success:
		await _send(websocket, {"type": "answer", "question": detected.question, "answer": result.answer, "suggestion": detected.suggestion})
	else:
		await _send(websocket, {"type": "answer_error", "question": detected.question, "error": result.error})


async def _drain(pending: Set[asyncio.Task]) -> None:
	results = await asyncio.gather(*pending, return_exceptions=True)
	for result in results:
		if isinstance(result, Exception):
			logger.error("Answer task failed: %s", result, exc_info=result)


@router.websocket("/ws/transcript/{session_id}")
async def ws_transcript(
	websocket: WebSocket,
	session_id: str,
	manager: SessionManager = Depends(get_session_manager),
	copilot: InterviewCopilot = Depends(get_copilot),
):
	await websocket.accept()
	state = await manager.get(session_id)
	if state is None:
		await websocket.send_json({"type": "error", "error": "Session not found"})
		await websocket.close(code=4404)
		return

	# Strong references so in-flight answers are not garbage collected
	pending: Set[asyncio.Task] = set()
	try:
		while True:
			raw = await websocket.receive_text()
			if raw == "__end__":
				break
			try:
				fragment = TranscriptFragment.model_validate(json.loads(raw))
			except (ValueError, ValidationError):
				await websocket.send_json({"type": "error", "error": "Expected {\"text\": str, \"final\": bool}"})
				continue

			if not fragment.final:
				await websocket.send_json({"type": "interim", "text": fragment.text})
				continue

			result = copilot.ingest(state, fragment)
			if not result.accepted:
				await websocket.send_json({"type": "ignored", "status": state.status.value})
				continue
			await websocket.send_json({"type": "heard", "text": fragment.text.strip(), "is_question": result.is_question})
			if result.duplicate:
				await websocket.send_json({"type": "duplicate", "text": fragment.text.strip()})
			elif result.detected is not None:
				detected = result.detected
				await websocket.send_json({"type": "question", "question": detected.question, "suggestion": detected.suggestion})
				await copilot.record_detection(state, detected)
				task = asyncio.create_task(_answer_and_push(websocket, copilot, state, detected))
				pending.add(task)
				task.add_done_callback(pending.discard)
	except WebSocketDisconnect:
		# Answers still land on the session after the client leaves
		await _drain(pending)
		return
	await _drain(pending)
	await _send(websocket, {"type": "end"})

from fastapi import APIRouter, HTTPException, Depends

from interview_copilot.dependencies import get_config_store, get_copilot, get_session_manager
from interview_copilot.schemas import (
	CreateSessionResponse,
	FragmentOut,
	InterviewSession,
	LiveSessionOut,
	RegenerateIn,
	RegenerateOut,
	TranscriptFragment,
	TranscriptOut,
)
from interview_copilot.services.config_store import ConfigStore
from interview_copilot.services.copilot import InterviewCopilot, format_transcript
from interview_copilot.services.session_manager import ConfigurationError, RecordingSession, SessionManager


router = APIRouter()

NOT_FOUND = "Session not found. Create one via POST /api/interview and reuse its session_id."


def live_session_out(state: RecordingSession) -> LiveSessionOut:
	return LiveSessionOut(
		session_id=state.session_id,
		status=state.status,
		context=state.context,
		transcript=state.transcript,
		current_question=state.current_question,
		pending_answers=state.pending_answers,
		last_error=state.last_error,
		records=list(state.records),
		detection_log=list(state.detection_log),
		started_at=state.started_at,
	)


async def _require(manager: SessionManager, session_id: str) -> RecordingSession:
	try:
		return await manager.get_required(session_id)
	except KeyError:
		raise HTTPException(status_code=404, detail=NOT_FOUND)


@router.post("/interview", response_model=CreateSessionResponse)
async def create_session(
	manager: SessionManager = Depends(get_session_manager),
	config: ConfigStore = Depends(get_config_store),
):
	state = await manager.create_session(context=config.get_context())
	return CreateSessionResponse(session_id=state.session_id)


@router.get("/interview/{session_id}", response_model=LiveSessionOut)
async def get_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
	return live_session_out(await _require(manager, session_id))


@router.post("/interview/{session_id}/start", response_model=LiveSessionOut)
async def start_recording(
	session_id: str,
	manager: SessionManager = Depends(get_session_manager),
	config: ConfigStore = Depends(get_config_store),
):
	state = await _require(manager, session_id)
	try:
		state.start(config.get_context())
	except ConfigurationError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return live_session_out(state)


@router.post("/interview/{session_id}/stop", response_model=LiveSessionOut)
async def stop_recording(session_id: str, manager: SessionManager = Depends(get_session_manager)):
	state = await _require(manager, session_id)
	state.stop()
	return live_session_out(state)


@router.post("/interview/{session_id}/reset", response_model=LiveSessionOut)
async def reset_session(session_id: str, manager: SessionManager = Depends(get_session_manager)):
	try:
		state = await manager.reset(session_id)
	except KeyError:
		raise HTTPException(status_code=404, detail=NOT_FOUND)
	except ConfigurationError as e:
		raise HTTPException(status_code=409, detail=str(e))
	return live_session_out(state)


@router.post("/interview/{session_id}/fragments", response_model=FragmentOut)
async def submit_fragment(
	session_id: str,
	payload: TranscriptFragment,
	manager: SessionManager = Depends(get_session_manager),
	copilot: InterviewCopilot = Depends(get_copilot),
):
	state = await _require(manager, session_id)
	if payload.final and not state.recording:
		raise HTTPException(status_code=409, detail="Recording is not active for this session.")

	result, answer = await copilot.process(state, payload)
	detected = result.detected
	return FragmentOut(
		accepted=result.accepted,
		is_question=result.is_question,
		duplicate=result.duplicate,
		question=detected.question if detected else None,
		suggestion=detected.suggestion if detected else None,
		answer=answer,
	)


@router.post("/interview/{session_id}/regenerate", response_model=RegenerateOut)
async def regenerate_answer(
	session_id: str,
	payload: RegenerateIn,
	manager: SessionManager = Depends(get_session_manager),
	copilot: InterviewCopilot = Depends(get_copilot),
):
	state = await _require(manager, session_id)
	if not payload.question.strip():
		raise HTTPException(status_code=400, detail="Empty question")
	try:
		detected, answer = await copilot.regenerate(state, payload.question)
	except ConfigurationError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return RegenerateOut(question=detected.question, suggestion=detected.suggestion, answer=answer)


@router.get("/interview/{session_id}/transcript", response_model=TranscriptOut)
async def export_transcript(
	session_id: str,
	manager: SessionManager = Depends(get_session_manager),
	copilot: InterviewCopilot = Depends(get_copilot),
):
	state = await _require(manager, session_id)
	return TranscriptOut(session_id=state.session_id, markdown=format_transcript(state, copilot.recorded_context(state)))


@router.post("/interview/{session_id}/save", response_model=InterviewSession)
async def save_session(
	session_id: str,
	manager: SessionManager = Depends(get_session_manager),
	copilot: InterviewCopilot = Depends(get_copilot),
):
	state = await _require(manager, session_id)
	try:
		return await copilot.save(state)
	except ValueError as e:
		raise HTTPException(status_code=400, detail=str(e))

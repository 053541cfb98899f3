from fastapi import APIRouter, HTTPException, Depends

from interview_copilot.dependencies import get_session_store
from interview_copilot.schemas import InterviewSession, SessionList, SessionStats, SessionSummary
from interview_copilot.services.session_store import SessionStore


router = APIRouter()


@router.get("/sessions", response_model=SessionList)
async def list_sessions(store: SessionStore = Depends(get_session_store)):
	items = [
		SessionSummary(id=s.id, date=s.date, duration=s.duration, questions_count=s.questions_count)
		for s in await store.list_sessions()
	]
	return SessionList(items=items)


@router.get("/sessions/stats", response_model=SessionStats)
async def session_stats(store: SessionStore = Depends(get_session_store)):
	return await store.stats()


@router.get("/sessions/{session_id}", response_model=InterviewSession)
async def get_saved_session(session_id: str, store: SessionStore = Depends(get_session_store)):
	saved = await store.get(session_id)
	if saved is None:
		raise HTTPException(status_code=404, detail="Session not found")
	return saved


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, store: SessionStore = Depends(get_session_store)):
	deleted = await store.delete(session_id)
	if not deleted:
		raise HTTPException(status_code=404, detail="Session not found")
	return {"status": "ok", "deleted": True}

from typing import List

from fastapi import APIRouter

from interview_copilot.schemas import DetectIn, DetectOut, PracticeBank
from interview_copilot.services.question_bank import COMMON_QUESTIONS, practice_bank
from interview_copilot.services.question_detector import is_question
from interview_copilot.services.suggestion_service import classify


router = APIRouter()


@router.post("/detect", response_model=DetectOut)
async def detect(payload: DetectIn):
	"""Classify arbitrary text without touching any session."""
	if not is_question(payload.text):
		return DetectOut(is_question=False)
	return DetectOut(is_question=True, suggestion=classify(payload.text))


@router.get("/practice/questions", response_model=PracticeBank)
async def practice_questions():
	return PracticeBank(categories=practice_bank())


@router.get("/practice/common", response_model=List[str])
async def common_questions():
	return list(COMMON_QUESTIONS)

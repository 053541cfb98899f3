from __future__ import annotations

import json
from pathlib import Path
from datetime import datetime
from typing import Optional, Dict, Any
import asyncio


class JsonlAuditor:
	"""Append-only interview analytics: one JSON object per line.

	Disabled until ``configure`` is given a path. Answer text is never written,
	only its length, so the file can be shared for tuning the detector.
	"""

	def __init__(self, path: Optional[str] = None) -> None:
		self._path = Path(path) if path else None
		self._lock = asyncio.Lock()

	def configure(self, path: Optional[str]) -> None:
		self._path = Path(path) if path else None

	async def question_detected(self, session_id: str, question: str, suggestion: str) -> None:
		await self._write("question_detected", session_id, question=question, suggestion=suggestion)

	async def answer(self, session_id: str, question: str, provider: str, answer: str) -> None:
		await self._write("answer", session_id, question=question, provider=provider, answer_chars=len(answer))

	async def answer_error(self, session_id: str, question: str, provider: Optional[str], error: str) -> None:
		await self._write("answer_error", session_id, question=question, provider=provider, error=error)

	async def session_saved(self, session_id: str, questions_count: int, duration: int) -> None:
		await self._write("session_saved", session_id, questions_count=questions_count, duration=duration)

	async def _write(self, event: str, session_id: str, **fields: Any) -> None:
		if not self._path:
			return
		record: Dict[str, Any] = {"ts": datetime.utcnow().isoformat(), "type": event, "session_id": session_id, **fields}
		line = json.dumps(record, ensure_ascii=False)
		async with self._lock:
			self._path.parent.mkdir(parents=True, exist_ok=True)
			with self._path.open("a", encoding="utf-8") as f:
				f.write(line + "\n")


auditor = JsonlAuditor()

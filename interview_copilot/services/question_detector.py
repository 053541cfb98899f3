from __future__ import annotations

import re


# Prefix patterns intentionally have no trailing word boundary: "however, ..."
# still reads as "how". Misfires are accepted for a live heuristic.
QUESTION_PATTERNS = (
	re.compile(r"\?$"),
	re.compile(r"^(what|when|where|who|why|how|can you|could you|would you|will you|do you|did you|have you|are you|is there)"),
	re.compile(r"^tell (me|us) about"),
	re.compile(r"^describe"),
	re.compile(r"^explain"),
	re.compile(r"^give (me|us) an example"),
	re.compile(r"^walk (me|us) through"),
	re.compile(r"^share"),
	re.compile(r"^discuss"),
)


def is_question(text: str) -> bool:
	"""Return True when a finalized transcript fragment looks like an interview question."""
	lowered = (text or "").lower().strip()
	if not lowered:
		return False
	return any(pattern.search(lowered) for pattern in QUESTION_PATTERNS)

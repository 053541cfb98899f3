from __future__ import annotations

from typing import Callable, Tuple


Predicate = Callable[[str], bool]
SuggestionRule = Tuple[str, Predicate, str]


def _any_of(*phrases: str) -> Predicate:
	return lambda text: any(p in text for p in phrases)


def _all_of(*phrases: str) -> Predicate:
	return lambda text: all(p in text for p in phrases)


STAR_TIP = (
	"Use the STAR method: Situation (set context), Task (your role), Action (steps you took), "
	"Result (outcome & learnings). Be specific with metrics."
)
STRENGTHS_AND_WEAKNESSES_TIP = (
	"For strengths: Pick 2-3 relevant to the role with examples. For weaknesses: Choose a real one "
	"you're actively improving, show self-awareness and growth."
)
STRENGTHS_TIP = (
	"Choose 2-3 strengths directly relevant to this role. Back each with a specific example showing "
	"impact. Connect them to how you'll add value."
)
WEAKNESS_TIP = (
	"Pick a genuine area for improvement (not disguised strength). Explain steps you're taking to "
	"improve. Show self-awareness and commitment to growth."
)
INTRODUCTION_TIP = (
	"Present-Past-Future format: Current role/status (30 sec), relevant background (45 sec), why "
	"you're excited about this opportunity (15 sec). Keep under 90 seconds total."
)
COMPANY_TIP = (
	"Show you've researched them: Company values alignment, specific products/initiatives that excite "
	"you, how your skills match their needs. Be genuine and specific."
)
CONFLICT_TIP = (
	"Use STAR to show emotional intelligence: Focus on resolution, not blame. Highlight communication, "
	"empathy, and finding common ground. End with positive outcome."
)
LEADERSHIP_TIP = (
	"Share example with: Team size/context, your leadership approach, how you motivated others, "
	"measurable results. Show you can both lead and collaborate."
)
FAILURE_TIP = (
	"Choose a real failure (not disguised success). Own it completely. Focus on what you learned and "
	"how you've applied those lessons. Show resilience and growth."
)
TECHNICAL_TIP = (
	"List relevant technologies/tools with proficiency levels. Give brief example of recent project "
	"using them. Mention what you're currently learning."
)
FUTURE_TIP = (
	"Show ambition aligned with company growth. Mention skills you want to develop, impact you want "
	"to make. Balance personal goals with how you'll contribute to team."
)
INTERVIEWER_QUESTIONS_TIP = (
	"Ask about: Team dynamics, success metrics for this role, challenges the team faces, growth "
	"opportunities, company culture. Avoid salary/benefits in first round."
)
PROBLEM_SOLVING_TIP = (
	"Walk through your process: Understand the problem, gather information, consider options, choose "
	"solution, implement, measure results. Show logical thinking."
)
DEFAULT_TIP = (
	"Structure your answer: Brief context, your specific actions/role, concrete results/impact. Use "
	"numbers when possible. Keep it concise (1-2 minutes) and relevant to the role."
)


# Order matters: the first matching rule wins, so combined checks precede
# the single-keyword rules they overlap with.
SUGGESTION_RULES: Tuple[SuggestionRule, ...] = (
	("behavioral", _any_of("tell me about a time", "describe a situation", "give an example", "when have you"), STAR_TIP),
	("strengths_and_weaknesses", _all_of("strength", "weakness"), STRENGTHS_AND_WEAKNESSES_TIP),
	("strengths", _any_of("strength"), STRENGTHS_TIP),
	("weaknesses", _any_of("weakness"), WEAKNESS_TIP),
	("introduction", _any_of("tell me about yourself", "introduce yourself", "background"), INTRODUCTION_TIP),
	("company", _any_of("why do you want to work here", "why this company", "interested in our company"), COMPANY_TIP),
	("conflict", _any_of("conflict", "disagree", "difficult person"), CONFLICT_TIP),
	("leadership", _any_of("lead", "manage"), LEADERSHIP_TIP),
	("failure", _any_of("fail", "mistake"), FAILURE_TIP),
	("technical", _any_of("technical", "technology", "tools", "programming"), TECHNICAL_TIP),
	("future", _any_of("5 years", "career goals", "future"), FUTURE_TIP),
	("interviewer_questions", _any_of("questions for me", "questions for us", "any questions"), INTERVIEWER_QUESTIONS_TIP),
	("problem_solving", _any_of("solve", "approach", "handle"), PROBLEM_SOLVING_TIP),
)


def match_category(question: str) -> str:
	"""Name of the first rule matching ``question``, or ``"default"``."""
	lowered = (question or "").lower()
	for name, predicate, _tip in SUGGESTION_RULES:
		if predicate(lowered):
			return name
	return "default"


def classify(question: str) -> str:
	lowered = (question or "").lower()
	for _name, predicate, tip in SUGGESTION_RULES:
		if predicate(lowered):
			return tip
	return DEFAULT_TIP

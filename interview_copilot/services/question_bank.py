from __future__ import annotations

from typing import Dict, List

from interview_copilot.schemas import PracticeQuestion
from interview_copilot.services.suggestion_service import classify


COMMON_QUESTIONS = (
	"Tell me about yourself",
	"What are your greatest strengths?",
	"What is your biggest weakness?",
	"Why do you want to work here?",
	"Where do you see yourself in 5 years?",
	"Tell me about a time you faced a challenge at work",
	"Describe a situation where you had to work with a difficult person",
	"Give me an example of a goal you set and how you achieved it",
	"Tell me about a time you failed",
	"Why should we hire you?",
	"What's your leadership style?",
	"How do you handle stress and pressure?",
	"Describe a time you had to learn something new quickly",
	"Tell me about a time you went above and beyond",
	"How do you prioritize tasks when everything is urgent?",
)

PRACTICE_QUESTIONS = {
	"behavioral": (
		("b1", "Tell me about a time you faced a significant challenge at work"),
		("b2", "Describe a situation where you had to work with a difficult team member"),
		("b3", "Give me an example of a goal you set and how you achieved it"),
		("b4", "Tell me about a time you failed and what you learned"),
		("b5", "Describe a time you went above and beyond your job duties"),
		("b6", "Tell me about a time you had to adapt to change quickly"),
	),
	"introduction": (
		("i1", "Tell me about yourself"),
		("i2", "Walk me through your resume"),
		("i3", "What interests you about this role?"),
		("i4", "Why are you looking for a new opportunity?"),
	),
	"strengths": (
		("s1", "What are your greatest strengths?"),
		("s2", "What is your biggest weakness?"),
		("s3", "Why should we hire you?"),
		("s4", "What makes you unique compared to other candidates?"),
	),
	"leadership": (
		("l1", "Describe your leadership style"),
		("l2", "Tell me about a time you had to motivate a team"),
		("l3", "How do you handle conflicts within your team?"),
		("l4", "Give an example of a difficult decision you had to make"),
	),
	"technical": (
		("t1", "What technologies are you most comfortable with?"),
		("t2", "Describe your development process"),
		("t3", "How do you stay updated with new technologies?"),
		("t4", "Tell me about a complex technical problem you solved"),
	),
	"future": (
		("f1", "Where do you see yourself in 5 years?"),
		("f2", "What are your career goals?"),
		("f3", "What do you hope to accomplish in your first 90 days?"),
		("f4", "What questions do you have for me?"),
	),
}


def practice_bank() -> Dict[str, List[PracticeQuestion]]:
	return {
		category: [
			PracticeQuestion(id=qid, question=text, category=category, suggestion=classify(text))
			for qid, text in items
		]
		for category, items in PRACTICE_QUESTIONS.items()
	}

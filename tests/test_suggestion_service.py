import pytest

from interview_copilot.services import suggestion_service as s


def test_default_tip_for_unmatched_question():
	assert s.classify("What's your favorite color?") == s.DEFAULT_TIP
	assert s.DEFAULT_TIP.startswith("Structure your answer:")


def test_classify_is_deterministic():
	q = "Tell me about a time you led a migration"
	assert s.classify(q) == s.classify(q)


def test_combined_strengths_and_weaknesses_wins():
	assert s.classify("What are your strengths and weaknesses?") == s.STRENGTHS_AND_WEAKNESSES_TIP


@pytest.mark.parametrize("question,tip", [
	("Tell me about a time you failed", s.STAR_TIP),
	("When have you had to lead a team?", s.STAR_TIP),
	("What is your greatest strength?", s.STRENGTHS_TIP),
	("What is your biggest weakness?", s.WEAKNESS_TIP),
	("Tell me about yourself", s.INTRODUCTION_TIP),
	("Walk me through your background", s.INTRODUCTION_TIP),
	("Why do you want to work here?", s.COMPANY_TIP),
	("How do you deal with a difficult person?", s.CONFLICT_TIP),
	("How do you manage priorities?", s.LEADERSHIP_TIP),
	("What was your biggest mistake?", s.FAILURE_TIP),
	("Which tools do you use?", s.TECHNICAL_TIP),
	("Where do you see yourself in 5 years?", s.FUTURE_TIP),
	("Do you have any questions?", s.INTERVIEWER_QUESTIONS_TIP),
	("How would you solve this?", s.PROBLEM_SOLVING_TIP),
])
def test_rule_priority(question, tip):
	assert s.classify(question) == tip


def test_earlier_rule_shadows_later_one():
	# "lead" (leadership) is checked before "fail" (failure)
	assert s.match_category("Did you ever fail to lead well?") == "leadership"
	assert s.match_category("Favorite color?") == "default"


def test_rule_table_order_is_fixed():
	names = [name for name, _predicate, _tip in s.SUGGESTION_RULES]
	assert names == [
		"behavioral",
		"strengths_and_weaknesses",
		"strengths",
		"weaknesses",
		"introduction",
		"company",
		"conflict",
		"leadership",
		"failure",
		"technical",
		"future",
		"interviewer_questions",
		"problem_solving",
	]

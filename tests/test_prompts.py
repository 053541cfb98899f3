from interview_copilot.schemas import ExperienceLevel, InterviewContext
from interview_copilot.services.prompts import (
	CONTEXT_PRESETS,
	EXPERIENCE_GUIDANCE,
	GENERIC_COACH_PROMPT,
	build_system_prompt,
	build_user_message,
)


def test_generic_prompt_without_context():
	assert build_system_prompt(None) == GENERIC_COACH_PROMPT
	assert "STAR" in GENERIC_COACH_PROMPT
	assert "90 seconds" in GENERIC_COACH_PROMPT


def test_empty_topic_falls_back_to_generic():
	assert build_system_prompt(InterviewContext(topic="")) == GENERIC_COACH_PROMPT


def test_context_prompt_is_domain_scoped():
	prompt = build_system_prompt(InterviewContext(topic="Snowflake"))
	assert "Snowflake" in prompt
	assert prompt != GENERIC_COACH_PROMPT
	assert "ALL answers must be specific to Snowflake" in prompt


def test_role_and_additional_context_included_verbatim():
	ctx = InterviewContext(
		topic="AWS",
		experience_level=ExperienceLevel.senior,
		role="Cloud Architect",
		additional_context="Infrastructure, security, and cost optimization",
	)
	prompt = build_system_prompt(ctx)
	assert "- Target Role: Cloud Architect" in prompt
	assert "- Additional Context: Infrastructure, security, and cost optimization" in prompt


def test_optional_fields_omitted_when_absent():
	prompt = build_system_prompt(InterviewContext(topic="SQL"))
	assert "Target Role" not in prompt
	assert "Additional Context:" not in prompt


def test_experience_tiers_are_distinct():
	prompts = {level: build_system_prompt(InterviewContext(topic="Python", experience_level=level)) for level in ExperienceLevel}
	assert len(set(prompts.values())) == 4
	assert len(set(EXPERIENCE_GUIDANCE.values())) == 4
	assert "Entry-level candidate" in prompts[ExperienceLevel.entry]
	assert "Expert candidate" in prompts[ExperienceLevel.expert]


def test_user_message_embeds_question_and_window():
	msg = build_user_message("What is Time Travel?", "we talked about backups")
	assert "Interview Question: What is Time Travel?" in msg
	assert "Conversation Context: we talked about backups" in msg


def test_presets_have_topics():
	assert [p.topic for p in CONTEXT_PRESETS] == ["Snowflake", "Python", "React", "AWS", "Data Science", "SQL"]

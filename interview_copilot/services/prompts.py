from __future__ import annotations

from typing import Optional

from interview_copilot.schemas import ExperienceLevel, InterviewContext


GENERIC_COACH_PROMPT = (
	"You are an expert interview coach. Provide concise, professional answers to interview questions "
	"using the STAR method when applicable. Keep answers under 90 seconds of speaking time. "
	"Be specific and include relevant examples."
)

ANSWER_REQUEST = "Provide a strong, professional answer that would impress an interviewer."

EXPERIENCE_GUIDANCE = {
	ExperienceLevel.entry: (
		"Entry-level candidate (0-2 years): Focus on foundational {topic} concepts, learning ability, "
		"academic projects, internships, and enthusiasm. Show potential and willingness to learn. "
		"Avoid claiming deep expertise."
	),
	ExperienceLevel.mid: (
		"Mid-level candidate (3-5 years): Balance {topic} technical depth with 3-5 years of practical "
		"experience. Show problem-solving skills, project ownership, and real-world examples. "
		"Demonstrate solid technical competence."
	),
	ExperienceLevel.senior: (
		"Senior candidate (6-10 years): Emphasize {topic} leadership, system design thinking, strategic "
		"impact, and 6-10 years of deep expertise. Discuss trade-offs, scalability, mentoring, and "
		"architecture decisions."
	),
	ExperienceLevel.expert: (
		"Expert candidate (10+ years): Demonstrate {topic} thought leadership, complex architecture "
		"decisions, industry best practices, innovation, and organizational impact. Show mastery and vision."
	),
}


def build_system_prompt(context: Optional[InterviewContext] = None) -> str:
	if context is None or not context.topic:
		return GENERIC_COACH_PROMPT

	topic = context.topic
	level = context.experience_level.value

	lines = [
		f"You are an expert {topic} interview coach helping a candidate prepare for a {topic} interview.",
		"",
		"CRITICAL CONTEXT - READ CAREFULLY:",
		f"- Interview Domain: {topic}",
		f"- Candidate Level: {level}",
	]
	if context.role:
		lines.append(f"- Target Role: {context.role}")
	if context.additional_context:
		lines.append(f"- Additional Context: {context.additional_context}")

	lines += [
		"",
		"EXTREMELY IMPORTANT:",
		f"ALL answers must be specific to {topic}. When the candidate is asked ANY question "
		f"(including \"tell me about yourself\", \"what is time travel\", etc.), you MUST answer from "
		f"the perspective of a {topic} professional.",
		"",
		"For example:",
		f"- \"Tell me about yourself\" -> Answer as a {topic} {level} professional",
		"- \"What is time travel\" in a Snowflake interview -> Discuss the Snowflake Time Travel feature, NOT physics",
		f"- \"What are your strengths\" -> Focus on {topic}-relevant technical and professional strengths",
		"",
		f"EXPERIENCE LEVEL GUIDANCE ({level}):",
		EXPERIENCE_GUIDANCE[context.experience_level].format(topic=topic),
		"",
		"ANSWER FORMAT:",
		"- Keep answers under 90 seconds of speaking time",
		"- Use STAR method for behavioral questions (Situation, Task, Action, Result)",
		f"- Include specific {topic} technical details and examples",
		"- Be professional, confident, and authentic",
		"- Focus on achievements and measurable results when possible",
		"",
		"NEVER:",
		"- Give generic answers that could apply to any field",
		f"- Discuss topics outside of {topic} domain",
		f"- Claim expertise beyond the {level} level",
		"- Provide answers that don't match the interview context",
	]
	return "\n".join(lines)


def build_user_message(question: str, transcript_window: str) -> str:
	return (
		f"Interview Question: {question}\n\n"
		f"Conversation Context: {transcript_window}\n\n"
		f"{ANSWER_REQUEST}"
	)


# Presets offered by the settings screen
CONTEXT_PRESETS = (
	InterviewContext(
		topic="Snowflake",
		experience_level=ExperienceLevel.mid,
		role="Data Engineer",
		additional_context="Focus on data warehousing, SQL, and cloud architecture",
	),
	InterviewContext(
		topic="Python",
		experience_level=ExperienceLevel.senior,
		role="Backend Engineer",
		additional_context="Emphasis on scalable systems and best practices",
	),
	InterviewContext(
		topic="React",
		experience_level=ExperienceLevel.mid,
		role="Frontend Developer",
		additional_context="Modern React patterns, hooks, and performance",
	),
	InterviewContext(
		topic="AWS",
		experience_level=ExperienceLevel.senior,
		role="Cloud Architect",
		additional_context="Infrastructure, security, and cost optimization",
	),
	InterviewContext(
		topic="Data Science",
		experience_level=ExperienceLevel.entry,
		role="Data Analyst",
		additional_context="Statistics, visualization, and basic ML concepts",
	),
	InterviewContext(
		topic="SQL",
		experience_level=ExperienceLevel.mid,
		role="Database Developer",
		additional_context="Query optimization, indexing, and database design",
	),
)

from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List
from dotenv import load_dotenv


# Ensure .env is loaded eagerly
load_dotenv(dotenv_path=".env")


class Settings(BaseSettings):
	# Server
	host: str = "0.0.0.0"
	port: int = 8000
	cors_allow_origins: List[str] = [
		"http://localhost:3000",
		"http://localhost:5173",
		"http://127.0.0.1:3000",
		"http://127.0.0.1:5173",
	]

	# LLM Provider Selection
	llm_provider: str = "gemini"  # options: openai, groq, anthropic, gemini

	# Provider credentials (the config store takes precedence when a key is saved there)
	openai_api_key: str | None = None
	groq_api_key: str | None = None
	anthropic_api_key: str | None = None
	gemini_api_key: str | None = None

	# Models
	openai_model: str = "gpt-4o-mini"
	groq_model: str = "llama-3.3-70b-versatile"
	anthropic_model: str = "claude-3-5-sonnet-20241022"
	gemini_model: str = "gemini-1.5-flash"

	# Sampling
	answer_temperature: float = 0.7
	answer_max_tokens: int = 400
	request_timeout_seconds: float = 30.0

	# Storage
	data_dir: str = "data"
	max_saved_sessions: int = 50

	# Logging
	log_level: str = "INFO"
	analytics_path: str | None = None  # e.g., logs/qna.jsonl

	@field_validator("answer_temperature")
	@classmethod
	def clamp_temperature(cls, v: float) -> float:
		return max(0.0, min(1.0, v))

	@field_validator("cors_allow_origins", mode="before")
	@classmethod
	def parse_cors_origins(cls, v):
		# Allow environment variable override
		if isinstance(v, str):
			return [origin.strip() for origin in v.split(",")]
		return v

	@field_validator("llm_provider")
	@classmethod
	def normalize_provider(cls, v: str) -> str:
		return (v or "gemini").strip().lower()

	def provider_api_key(self, provider: str) -> str | None:
		return getattr(self, f"{provider}_api_key", None)

	def provider_model(self, provider: str) -> str | None:
		return getattr(self, f"{provider}_model", None)

	class Config:
		env_file = ".env"
		env_file_encoding = "utf-8"


settings = Settings()

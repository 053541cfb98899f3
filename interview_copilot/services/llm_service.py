from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

import httpx

from interview_copilot.config import settings
from interview_copilot.schemas import AIResponse, InterviewContext, Provider
from interview_copilot.services.prompts import build_system_prompt, build_user_message


logger = logging.getLogger(__name__)


class ProviderError(Exception):
	"""Failure talking to an AI provider. Never escapes ``LLMService``."""


class TransportError(ProviderError):
	def __init__(self, message: str, status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.status_code = status_code


class ResponseShapeError(ProviderError):
	pass


@dataclass
class ProviderRequest:
	url: str
	headers: Dict[str, str]
	json: Dict[str, Any]
	params: Dict[str, str] = field(default_factory=dict)


class ProviderAdapter:
	"""Request/response shape of one provider.

	Subclasses only describe the wire format; ``LLMService`` owns the HTTP
	call and the error normalization.
	"""

	provider: Provider
	label: str
	default_model: str

	def __init__(self, model: Optional[str] = None, temperature: float = 0.7, max_tokens: int = 400) -> None:
		self.model = model or self.default_model
		self.temperature = temperature
		self.max_tokens = max_tokens

	def build_request(self, api_key: str, system_prompt: str, question: str, transcript_window: str) -> ProviderRequest:
		raise NotImplementedError

	def extract_answer(self, body: Any) -> str:
		raise NotImplementedError

	def _shape_error(self) -> ResponseShapeError:
		return ResponseShapeError(f"Invalid response format from {self.label} API")


class OpenAICompatibleAdapter(ProviderAdapter):
	url: str

	def build_request(self, api_key: str, system_prompt: str, question: str, transcript_window: str) -> ProviderRequest:
		return ProviderRequest(
			url=self.url,
			headers={
				"Content-Type": "application/json",
				"Authorization": f"Bearer {api_key}",
			},
			json={
				"model": self.model,
				"messages": [
					{"role": "system", "content": system_prompt},
					{"role": "user", "content": build_user_message(question, transcript_window)},
				],
				"temperature": self.temperature,
				"max_tokens": self.max_tokens,
			},
		)

	def extract_answer(self, body: Any) -> str:
		try:
			text = body["choices"][0]["message"]["content"]
		except (KeyError, IndexError, TypeError):
			raise self._shape_error()
		if not isinstance(text, str) or not text.strip():
			raise self._shape_error()
		return text


class OpenAIAdapter(OpenAICompatibleAdapter):
	provider = Provider.openai
	label = "OpenAI"
	default_model = "gpt-4o-mini"
	url = "https://api.openai.com/v1/chat/completions"


class GroqAdapter(OpenAICompatibleAdapter):
	provider = Provider.groq
	label = "Groq"
	default_model = "llama-3.3-70b-versatile"
	url = "https://api.groq.com/openai/v1/chat/completions"


class AnthropicAdapter(ProviderAdapter):
	provider = Provider.anthropic
	label = "Anthropic"
	default_model = "claude-3-5-sonnet-20241022"
	url = "https://api.anthropic.com/v1/messages"
	api_version = "2023-06-01"

	def build_request(self, api_key: str, system_prompt: str, question: str, transcript_window: str) -> ProviderRequest:
		# System prompt travels inside the single user turn
		return ProviderRequest(
			url=self.url,
			headers={
				"Content-Type": "application/json",
				"x-api-key": api_key,
				"anthropic-version": self.api_version,
			},
			json={
				"model": self.model,
				"max_tokens": self.max_tokens,
				"temperature": self.temperature,
				"messages": [
					{"role": "user", "content": f"{system_prompt}\n\n{build_user_message(question, transcript_window)}"},
				],
			},
		)

	def extract_answer(self, body: Any) -> str:
		try:
			text = body["content"][0]["text"]
		except (KeyError, IndexError, TypeError):
			raise self._shape_error()
		if not isinstance(text, str) or not text.strip():
			raise self._shape_error()
		return text


class GeminiAdapter(ProviderAdapter):
	provider = Provider.gemini
	label = "Google Gemini"
	default_model = "gemini-1.5-flash"
	base_url = "https://generativelanguage.googleapis.com/v1beta/models"

	def build_request(self, api_key: str, system_prompt: str, question: str, transcript_window: str) -> ProviderRequest:
		return ProviderRequest(
			url=f"{self.base_url}/{self.model}:generateContent",
			headers={
				"Content-Type": "application/json",
				"x-goog-api-key": api_key,
			},
			json={
				"contents": [
					{"parts": [{"text": f"{system_prompt}\n\n{build_user_message(question, transcript_window)}"}]},
				],
				"generationConfig": {
					"temperature": self.temperature,
					"maxOutputTokens": self.max_tokens,
					"topP": 0.95,
					"topK": 40,
				},
			},
		)

	def extract_answer(self, body: Any) -> str:
		try:
			text = body["candidates"][0]["content"]["parts"][0]["text"]
		except (KeyError, IndexError, TypeError):
			raise self._shape_error()
		if not isinstance(text, str) or not text.strip():
			raise self._shape_error()
		return text


ADAPTERS = {
	Provider.openai: OpenAIAdapter,
	Provider.groq: GroqAdapter,
	Provider.anthropic: AnthropicAdapter,
	Provider.gemini: GeminiAdapter,
}


def parse_provider(value: Union[str, Provider, None]) -> Optional[Provider]:
	if isinstance(value, Provider):
		return value
	try:
		return Provider((value or "").strip().lower())
	except ValueError:
		return None


def _error_detail(response: httpx.Response) -> str:
	"""Best-effort extraction of a provider's error message."""
	try:
		data = response.json()
	except ValueError:
		return response.text[:200].strip()
	if isinstance(data, dict):
		err = data.get("error")
		if isinstance(err, dict) and err.get("message"):
			return str(err["message"])
		if isinstance(err, str):
			return err
	return ""


class LLMService:
	def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None, timeout: Optional[float] = None) -> None:
		# transport is only swapped out by tests
		self._transport = transport
		self._timeout = timeout if timeout is not None else settings.request_timeout_seconds

	def adapter_for(self, provider: Provider) -> ProviderAdapter:
		return ADAPTERS[provider](
			model=settings.provider_model(provider.value),
			temperature=settings.answer_temperature,
			max_tokens=settings.answer_max_tokens,
		)

	async def generate_answer(
		self,
		question: str,
		transcript_window: str = "",
		provider: Union[str, Provider, None] = Provider.gemini,
		context: Optional[InterviewContext] = None,
		*,
		api_key: Optional[str] = None,
	) -> AIResponse:
		resolved = parse_provider(provider)
		if resolved is None:
			return AIResponse(success=False, error="Invalid AI provider")

		adapter = self.adapter_for(resolved)
		if not api_key:
			return AIResponse(success=False, error=f"{adapter.label} API key not configured")

		system_prompt = build_system_prompt(context)
		request = adapter.build_request(api_key, system_prompt, question, transcript_window)
		try:
			body = await self._post(adapter, request)
			answer = adapter.extract_answer(body)
		except ProviderError as e:
			logger.warning("%s answer failed: %s", adapter.label, e)
			return AIResponse(success=False, error=str(e) or "Failed to generate answer")
		return AIResponse(success=True, answer=answer.strip())

	async def _post(self, adapter: ProviderAdapter, request: ProviderRequest) -> Any:
		try:
			async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
				response = await client.post(request.url, headers=request.headers, params=request.params or None, json=request.json)
		except httpx.TimeoutException:
			raise TransportError(f"{adapter.label} API error: request timed out after {self._timeout:g}s")
		except httpx.HTTPError as e:
			raise TransportError(f"{adapter.label} API error: {e.__class__.__name__}: {e}")

		if not response.is_success:
			detail = _error_detail(response)
			message = f"{adapter.label} API error: {response.status_code}"
			if detail:
				message += f" - {detail}"
			raise TransportError(message, status_code=response.status_code)

		try:
			return response.json()
		except ValueError:
			raise ResponseShapeError(f"Invalid response format from {adapter.label} API")


llm_service = LLMService()

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from interview_copilot.config import Settings, settings
from interview_copilot.schemas import InterviewContext, Provider


logger = logging.getLogger(__name__)

PROVIDER_KEY = "ai_provider"
CONTEXT_KEY = "interview_context"

# Used when no provider was chosen explicitly: first one with a key wins
AUTO_DETECT_ORDER = (Provider.gemini, Provider.groq, Provider.openai, Provider.anthropic)


def api_key_name(provider: Provider) -> str:
	return f"{provider.value}_api_key"


class ConfigStore:
	"""Flat key -> string store persisted as one JSON file.

	Every read goes back to disk so edits from another request (or by hand)
	are picked up by the next call.
	"""

	def __init__(self, path: Optional[Path] = None, env: Optional[Settings] = None) -> None:
		self._path = path or Path(settings.data_dir) / "config.json"
		self._env = env or settings

	def _read(self) -> Dict[str, str]:
		if not self._path.exists():
			return {}
		try:
			with self._path.open("r", encoding="utf-8") as f:
				raw = json.load(f)
		except (OSError, ValueError) as e:
			logger.warning("Ignoring unreadable config store %s: %s", self._path, e)
			return {}
		if not isinstance(raw, dict):
			return {}
		return {str(k): str(v) for k, v in raw.items() if v is not None}

	def _write(self, data: Dict[str, str]) -> None:
		self._path.parent.mkdir(parents=True, exist_ok=True)
		tmp = self._path.with_suffix(".tmp")
		with tmp.open("w", encoding="utf-8") as f:
			json.dump(data, f, ensure_ascii=False, indent=2)
		tmp.replace(self._path)

	def get(self, key: str) -> Optional[str]:
		return self._read().get(key)

	def set(self, key: str, value: str) -> None:
		data = self._read()
		data[key] = value
		self._write(data)

	def delete(self, key: str) -> None:
		data = self._read()
		if data.pop(key, None) is not None:
			self._write(data)

	# Credentials

	def get_api_key(self, provider: Provider) -> Optional[str]:
		stored = self.get(api_key_name(provider))
		if stored and stored.strip():
			return stored.strip()
		# A blank env value means unset
		return (self._env.provider_api_key(provider.value) or "").strip() or None

	def save_api_key(self, provider: Provider, api_key: str) -> None:
		self.set(api_key_name(provider), api_key.strip())

	def masked_keys(self) -> Dict[str, Optional[str]]:
		masked: Dict[str, Optional[str]] = {}
		for provider in Provider:
			key = self.get_api_key(provider)
			masked[provider.value] = f"...{key[-4:]}" if key and len(key) > 8 else ("set" if key else None)
		return masked

	# Provider choice

	def get_provider(self) -> Optional[Provider]:
		saved = self.get(PROVIDER_KEY)
		if saved:
			try:
				return Provider(saved)
			except ValueError:
				logger.warning("Unknown provider %r in config store", saved)
		try:
			env_choice = Provider(self._env.llm_provider)
		except ValueError:
			env_choice = None
		if env_choice is not None and self.get_api_key(env_choice):
			return env_choice
		for provider in AUTO_DETECT_ORDER:
			if self.get_api_key(provider):
				return provider
		return None

	def save_provider(self, provider: Provider) -> None:
		self.set(PROVIDER_KEY, provider.value)

	# Interview context

	def get_context(self) -> Optional[InterviewContext]:
		stored = self.get(CONTEXT_KEY)
		if not stored:
			return None
		try:
			return InterviewContext.model_validate_json(stored)
		except ValidationError:
			return None

	def save_context(self, context: InterviewContext) -> None:
		self.set(CONTEXT_KEY, context.model_dump_json())

	def clear_context(self) -> None:
		self.delete(CONTEXT_KEY)


config_store = ConfigStore()

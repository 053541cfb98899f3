from typing import List

from fastapi import APIRouter, HTTPException, Depends

from interview_copilot.dependencies import get_config_store
from interview_copilot.schemas import ApiKeyIn, ApiKeysOut, InterviewContext, Provider, ProviderIn, ProviderOut
from interview_copilot.services.config_store import ConfigStore
from interview_copilot.services.prompts import CONTEXT_PRESETS


router = APIRouter()


def _provider_out(config: ConfigStore) -> ProviderOut:
	provider = config.get_provider()
	return ProviderOut(provider=provider, configured=bool(provider and config.get_api_key(provider)))


@router.get("/settings/provider", response_model=ProviderOut)
async def get_provider(config: ConfigStore = Depends(get_config_store)):
	return _provider_out(config)


@router.put("/settings/provider", response_model=ProviderOut)
async def set_provider(payload: ProviderIn, config: ConfigStore = Depends(get_config_store)):
	config.save_provider(payload.provider)
	return _provider_out(config)


@router.get("/settings/keys", response_model=ApiKeysOut)
async def get_keys(config: ConfigStore = Depends(get_config_store)):
	return ApiKeysOut(keys=config.masked_keys())


@router.put("/settings/keys/{provider}", response_model=ApiKeysOut)
async def set_key(provider: Provider, payload: ApiKeyIn, config: ConfigStore = Depends(get_config_store)):
	if not payload.api_key.strip():
		raise HTTPException(status_code=400, detail="Empty API key")
	config.save_api_key(provider, payload.api_key)
	return ApiKeysOut(keys=config.masked_keys())


@router.get("/settings/context", response_model=InterviewContext)
async def get_context(config: ConfigStore = Depends(get_config_store)):
	context = config.get_context()
	if context is None:
		raise HTTPException(status_code=404, detail="No interview context saved yet.")
	return context


@router.put("/settings/context", response_model=InterviewContext)
async def save_context(payload: InterviewContext, config: ConfigStore = Depends(get_config_store)):
	if not payload.topic:
		raise HTTPException(status_code=400, detail="Please enter an interview topic (e.g., Snowflake, Python, AWS)")
	config.save_context(payload)
	return payload


@router.delete("/settings/context")
async def clear_context(config: ConfigStore = Depends(get_config_store)):
	config.clear_context()
	return {"status": "ok"}


@router.get("/settings/presets", response_model=List[InterviewContext])
async def get_presets():
	return list(CONTEXT_PRESETS)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from interview_copilot.config import settings
from interview_copilot.utils.logging import configure_logging
from interview_copilot.routers.interview import router as interview_router
from interview_copilot.routers.settings import router as settings_router
from interview_copilot.routers.sessions import router as sessions_router
from interview_copilot.routers.practice import router as practice_router
from interview_copilot.routers.ws import router as ws_router
from interview_copilot.services.config_store import config_store
from interview_copilot.utils.audit import auditor


configure_logging(settings.log_level)
auditor.configure(settings.analytics_path)
app = FastAPI(title="Interview Co-Pilot Backend", version="0.1.0")

# CORS
app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_allow_origins,
	# Browsers reject credentialed requests against a wildcard origin
	allow_credentials=False if settings.cors_allow_origins == ["*"] else True,
	allow_methods=["*"],
	allow_headers=["*"],
	max_age=3600,
)


@app.get("/health")
async def health() -> JSONResponse:
	provider = config_store.get_provider()
	return JSONResponse({
		"status": "ok",
		"version": app.version,
		"llm": {
			"provider": provider.value if provider else None,
			"enabled": bool(provider and config_store.get_api_key(provider)),
		},
	})


# Routers
app.include_router(interview_router, prefix="/api", tags=["interview"])
app.include_router(settings_router, prefix="/api", tags=["settings"])
app.include_router(sessions_router, prefix="/api", tags=["sessions"])
app.include_router(practice_router, prefix="/api", tags=["practice"])
app.include_router(ws_router, tags=["realtime"])

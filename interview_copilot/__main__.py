import uvicorn

from interview_copilot.config import settings


if __name__ == "__main__":
	uvicorn.run("interview_copilot.main:app", host=settings.host, port=settings.port)

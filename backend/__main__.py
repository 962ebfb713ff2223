"""
Entry point for running the session server with `python -m backend`.

Auto-reload is only enabled in development: a reload restarts the process,
which stops every live countdown (stored sessions resume with timers stopped).
"""
import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.is_development,
    )

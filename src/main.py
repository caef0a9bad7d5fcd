"""
Three men's morris backend: FastAPI application and entry point.

Run with `morris-server` (or `uvicorn src.main:app`).
"""

import logging
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.routes import register_exception_handlers, router
from src.core.config import Settings, get_settings
from src.db.database import build_session_factory
from src.db.memory_repository import InMemoryGameRepository

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a single game store, chosen by the settings."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Three Men's Morris API")
    app.state.settings = settings
    if settings.game_store == "sql":
        app.state.session_factory = build_session_factory(
            settings.database_url, echo=settings.debug
        )
    else:
        app.state.repository = InMemoryGameRepository()
    logger.info("Using %s game store", settings.game_store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    register_exception_handlers(app)

    # Frontend files. Mounted last so the API routes take precedence over "/"
    static_path = Path(settings.static_dir)
    if static_path.is_dir():
        app.mount(
            "/", StaticFiles(directory=str(static_path), html=True), name="frontend"
        )
    else:
        logger.debug("No static directory at %s, not serving a frontend", static_path)

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


app = create_app()

if __name__ == "__main__":
    run()

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.base import api_router
from app.config import Settings, get_settings
from app.features.tasks.repository import JsonTaskRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.getLevelNamesMapping().get(level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The task repository is created here from the configured tasks file and
    shared by all requests through app.state.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server running on http://{settings.host}:{settings.port}")
        logger.info(f"Serving tasks from {settings.tasks_file}")
        if not settings.tasks_file.exists():
            logger.warning(f"Tasks file {settings.tasks_file} does not exist; requests will fail until it is created")
        yield

    app = FastAPI(
        title="Task Board API",
        description="REST backend for task records stored in a JSON file",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.task_repository = JsonTaskRepository(
        settings.tasks_file,
        lock_writes=settings.lock_writes,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include all API routes
    app.include_router(api_router)

    # Static front-end, mounted last so API routes take precedence
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory {settings.static_dir} not found; front-end is not served")

    return app


def run() -> None:
    """Console entry point: start uvicorn with the configured host and port"""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


configure_logging(get_settings().log_level)

app = create_app()


if __name__ == "__main__":
    run()

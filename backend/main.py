"""
AI Site Editor Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import chat, config, diff, session
from services.config_manager import ConfigManager
from services.session_registry import SessionRegistry

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging once for the server process"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("[Backend] Starting AI Site Editor Backend...")
    config_manager = ConfigManager.get_instance()
    logger.info("[Backend] ConfigManager initialized (%s)", config_manager.config_file)

    app.state.registry = SessionRegistry(
        max_depth=config_manager.history_max_depth(),
        context_size=config_manager.diff_context_size(),
    )
    logger.info("[Backend] SessionRegistry initialized (max_depth=%s)", app.state.registry.max_depth)

    yield
    logger.info("[Backend] Shutting down AI Site Editor Backend (%d sessions)", len(app.state.registry))


app = FastAPI(
    title="AI Site Editor Backend",
    description="Content history, diff review and streaming chat for the AI site editor",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser editor
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(session.router, prefix="/api/sessions", tags=["sessions"])
app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "site-editor-backend"}


if __name__ == "__main__":
    import uvicorn

    setup_logging()
    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))

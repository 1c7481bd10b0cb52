"""
Just Paste Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, patch
from services.config_manager import ConfigManager
from services.preview_store import PreviewStore

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    configure_logging(config_manager.get("logging", {}).get("level", "INFO"))
    logger.info("[Backend] Starting Just Paste Diff Backend...")
    logger.info("[Backend] ConfigManager initialized from %s", config_manager.config_file)

    yield
    # Shutdown: leave an empty preview behind
    PreviewStore.get_instance().reset()
    logger.info("[Backend] Shutting down Just Paste Diff Backend...")


app = FastAPI(
    title="Just Paste Diff Backend",
    description="Apply pasted +/- line diffs to editor documents",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for editor plugin communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Editor plugins run locally
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(patch.router, prefix="/api/patch", tags=["patch"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "just-paste-diff-backend"}


def run():
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()

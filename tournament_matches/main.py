"""
Tournament Matches - FastAPI Application

Provides the REST API for reading tournament brackets and reporting match scores.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .api.routes import router as matches_router
from .delegate import get_delegate

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Build the delegate (and load SEED_FILE) before serving requests
    logger.info(f"Starting with {config.DELEGATE_TYPE} delegate")
    if config.SEED_FILE:
        logger.info(f"Seeding matches from {config.SEED_FILE}")
    get_delegate()
    logger.info("App is ready.")

    yield

    logger.info("Shutting down...")


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="Tournament Matches",
    description="Tournament bracket matches and score reporting",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matches_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


# Run with: uvicorn tournament_matches.main:app --reload
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)

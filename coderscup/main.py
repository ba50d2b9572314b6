"""
FastAPI main application
Coders Cup - Team standings and house leaderboard

Modular architecture with separated API routers in coderscup/api/:
- health.py: Health check and system status
- teams.py: Team table (search / filter / sort) and top teams
- leaderboard.py: House leaderboard data
- config.py: Configuration retrieval

All routers access shared state via coderscup.state module.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from coderscup import state
from coderscup.config import load_config, resolve_config_path
from coderscup.records import load_records

# Import all API routers
from coderscup.api import health, teams, leaderboard
from coderscup.api import config as config_router


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: Load config and score records into global state
    try:
        config_path = resolve_config_path()
        state.CONFIG = load_config(config_path)
        state.RECORDS = load_records(state.CONFIG.data_path)
        logger.info(
            f"✅ Server started with {len(state.RECORDS)} score records "
            f"across {len(state.CONFIG.houses)} houses"
        )
    except Exception as e:
        logger.error(f"❌ Failed to load scoreboard data: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Coders Cup - Scoreboard",
    description="Team standings and house leaderboard",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Team table (GET /api/teams, /api/teams/top)
app.include_router(teams.router)

# House leaderboard (GET /api/houses)
app.include_router(leaderboard.router)

# Config endpoint (GET /config)
app.include_router(config_router.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

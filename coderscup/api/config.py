"""
Configuration endpoints
"""
from fastapi import APIRouter

from coderscup import state


router = APIRouter(tags=["config"])


@router.get("/config")
async def get_config():
    """Get the effective scoreboard configuration"""
    return {
        **state.CONFIG.model_dump(mode="json"),
        "records_loaded": state.RECORDS is not None,
    }

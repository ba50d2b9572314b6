"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from coderscup import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": state.CONFIG.title,
        "version": "1.0.0",
        "total_records": len(state.RECORDS) if state.RECORDS is not None else 0,
        "total_houses": len(state.CONFIG.houses),
    }

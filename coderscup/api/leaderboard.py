"""
House leaderboard endpoints
"""
from fastapi import APIRouter, HTTPException

from coderscup import state
from coderscup.services.leaderboard import get_leaderboard_data


router = APIRouter(tags=["leaderboard"])


@router.get("/api/houses")
async def get_house_leaderboard():
    """
    Get the house leaderboard

    Returns data for rendering the leaderboard UI with:
    - Houses ranked by total score (rank, total, team count, MVP)
    - Progress of each house against the leader (percent)
    - Chart series (labels + totals)
    - Teams whose house is not recognized
    """
    if state.RECORDS is None:
        raise HTTPException(status_code=503, detail="Score records are not loaded")

    return get_leaderboard_data(state.RECORDS, state.CONFIG.houses)

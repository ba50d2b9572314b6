"""
Team table endpoints
"""
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from coderscup import state
from coderscup.models import House, QueryState, SortDirection, SortField
from coderscup.services.standings import get_standings, get_top_teams


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("")
async def list_teams(
    search: str = "",
    house: Optional[House] = None,
    sort_key: Optional[int] = Query(default=None, ge=0, le=len(SortField) - 1),
    sort_direction: SortDirection = SortDirection.ASC,
):
    """
    Get the team table

    Query:
        search: case-insensitive substring of any column
        house: only teams of this house
        sort_key: column index (0 = team name, 1 = score, 2 = house)
        sort_direction: "asc" | "desc"

    Without sort_key the table is ranked by score (highest first).
    """
    if state.RECORDS is None:
        raise HTTPException(status_code=503, detail="Score records are not loaded")

    table_state = QueryState(
        search_term=search,
        house_filter=house,
        sort_key=None if sort_key is None else SortField(sort_key),
        sort_direction=sort_direction,
    )
    logger.debug(f"Team table query: {table_state}")

    return get_standings(state.RECORDS, table_state, state.CONFIG.score_order)


@router.get("/top")
async def list_top_teams(n: Optional[int] = Query(default=None, ge=0)):
    """Get the N highest-scoring teams (default N from config)"""
    if state.RECORDS is None:
        raise HTTPException(status_code=503, detail="Score records are not loaded")

    return get_top_teams(state.RECORDS, state.CONFIG.top_n if n is None else n)

"""
Standings service - Team table and top teams
"""
from typing import Dict

from coderscup.core.query import query, top_teams
from coderscup.models import QueryState, ScoreOrder
from coderscup.records import RecordStore


TABLE_FIELDS = ["Team Name", "Score", "House"]


def get_standings(
    store: RecordStore,
    state: QueryState,
    score_order: ScoreOrder = ScoreOrder.NUMERIC,
) -> Dict:
    """
    Get the filtered and sorted team table

    Args:
        store: Loaded score records
        state: Search / filter / sort state
        score_order: Comparison used when sorting the score column

    Returns:
        Column titles, matching teams in display order, and the echoed state
    """
    rows = query(store, state, score_order)

    return {
        "fields": TABLE_FIELDS,
        "teams": [r.model_dump() for r in rows],
        "total_teams": len(rows),
        "query": state.model_dump(mode="json"),
    }


def get_top_teams(store: RecordStore, n: int) -> Dict:
    """Top-N teams by score, independent of table state"""
    teams = top_teams(store, n)
    return {
        "teams": [r.model_dump() for r in teams],
        "count": len(teams),
    }

"""
Leaderboard service - Assemble and format house leaderboard data
"""
from typing import Dict, Sequence

from coderscup.core.aggregation import aggregate, leader_total, share_of_leader
from coderscup.models import House
from coderscup.records import RecordStore


def get_leaderboard_data(store: RecordStore, houses: Sequence[House] = tuple(House)) -> Dict:
    """
    Get house leaderboard data for display

    Args:
        store: Loaded score records
        houses: Houses to rank

    Returns:
        Ranked houses with progress against the leader, chart series
        and the labels of teams that belong to no known house
    """
    ranked = aggregate(store, houses)
    leader = leader_total(ranked)

    return {
        "houses": [
            {
                **house_stats.model_dump(mode="json"),
                "progress": round(share_of_leader(house_stats, leader), 1),
            }
            for house_stats in ranked
        ],
        "leader_total": leader,
        "chart": {
            "labels": [s.house.value for s in ranked],
            "values": [s.total_score for s in ranked],
        },
        "unassigned_teams": [r.team_name for r in store if r.category is None],
    }

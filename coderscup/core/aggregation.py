"""
House Aggregation Engine

For every known house:
  total_score = sum of the scores of its records
  team_count  = number of its records
  mvp         = record with the highest score (first one wins a tie)

Rules:
  - Records whose house is unknown (or not aggregated) count nowhere
  - Every aggregated house gets an entry, even with no records (mvp = None)
  - Output is sorted by total_score descending; ties keep house order
  - rank = 1-based position in the sorted output
"""
from typing import Dict, Iterable, List, Sequence

from coderscup.models import House, HouseAggregate, ScoreRecord, TeamScore


def aggregate(
    records: Iterable[ScoreRecord],
    houses: Sequence[House] = tuple(House),
) -> List[HouseAggregate]:
    """
    Compute per-house totals, MVPs and ranks in a single pass

    Args:
        records: Score records in input order
        houses: Houses to aggregate, in tie-break order

    Returns:
        One HouseAggregate per house, ranked by total score
    """
    stats: Dict[House, HouseAggregate] = {
        house: HouseAggregate(house=house) for house in houses
    }

    for record in records:
        house_stats = stats.get(record.category)
        if house_stats is None:
            continue

        house_stats.total_score += record.score
        house_stats.team_count += 1

        # Strict '>' keeps the earliest team on ties
        if house_stats.mvp is None or record.score > house_stats.mvp.score:
            house_stats.mvp = TeamScore(team_name=record.team_name, score=record.score)

    ranked = sorted(stats.values(), key=lambda s: s.total_score, reverse=True)

    for index, house_stats in enumerate(ranked):
        house_stats.rank = index + 1

    return ranked


def leader_total(aggregates: Sequence[HouseAggregate]) -> int:
    """Highest house total (0 when there are no houses)"""
    return max((a.total_score for a in aggregates), default=0)


def share_of_leader(house_stats: HouseAggregate, leader: int) -> float:
    """
    Percentage of the leading total reached by a house

    Args:
        house_stats: House aggregate
        leader: Highest total across houses

    Returns:
        Percentage in range [0.0, 100.0] (0.0 when leader is 0)
    """
    if leader <= 0:
        return 0.0
    return house_stats.total_score / leader * 100

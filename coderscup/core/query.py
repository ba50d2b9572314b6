"""
Team table Query Engine

Pipeline for the team table:
  1. Base order: numeric score descending (stable on input order)
  2. Filter: search term (case-insensitive, any rendered column)
             AND house filter (if set)
  3. Sort: by the selected column and direction (stable)

Column comparison:
  - Team name, house: rendered string
  - Score: numeric (ScoreOrder.NUMERIC) or rendered string (ScoreOrder.TEXT)
"""
from typing import Callable, Iterable, List

from coderscup.models import (
    House,
    QueryState,
    ScoreOrder,
    ScoreRecord,
    SortDirection,
    SortField,
)


def rank_by_score(records: Iterable[ScoreRecord]) -> List[ScoreRecord]:
    """Records ordered by numeric score descending, ties in input order"""
    return sorted(records, key=lambda r: r.score, reverse=True)


def matches(record: ScoreRecord, state: QueryState) -> bool:
    """True if the record passes the search term and house filter"""
    if state.house_filter is not None and record.house != state.house_filter.value:
        return False

    term = state.search_term.lower()
    if not term:
        return True
    return any(term in field.lower() for field in record.fields())


def sort_key_for(field: SortField, score_order: ScoreOrder = ScoreOrder.NUMERIC) -> Callable:
    """Comparison key for one table column"""
    if field == SortField.SCORE and score_order == ScoreOrder.NUMERIC:
        return lambda r: r.score
    return lambda r: r.fields()[field]


def query(
    records: Iterable[ScoreRecord],
    state: QueryState,
    score_order: ScoreOrder = ScoreOrder.NUMERIC,
) -> List[ScoreRecord]:
    """
    Apply search, house filter and sort to the team table

    Args:
        records: Score records in input order
        state: Current table state
        score_order: Comparison used when sorting the score column

    Returns:
        New list of matching records in display order
    """
    rows = [r for r in rank_by_score(records) if matches(r, state)]

    if state.sort_key is not None:
        rows.sort(
            key=sort_key_for(state.sort_key, score_order),
            reverse=state.sort_direction == SortDirection.DESC,
        )

    return rows


def top_teams(records: Iterable[ScoreRecord], n: int = 3) -> List[ScoreRecord]:
    """
    Highest-scoring records overall (ignores search and filter)

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return rank_by_score(records)[:n]


def request_sort(state: QueryState, key: SortField) -> QueryState:
    """
    Next state after a column header click

    The same column sorted ascending flips to descending; any other
    click sorts ascending.
    """
    direction = SortDirection.ASC
    if state.sort_key == key and state.sort_direction == SortDirection.ASC:
        direction = SortDirection.DESC
    return state.model_copy(update={"sort_key": key, "sort_direction": direction})


def toggle_house_filter(state: QueryState, house: House) -> QueryState:
    """Select a house filter, or clear it if that house is already selected"""
    selected = None if state.house_filter == house else house
    return state.model_copy(update={"house_filter": selected})


def with_search(state: QueryState, term: str) -> QueryState:
    return state.model_copy(update={"search_term": term})

"""
Data models for the scoreboard
"""
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from coderscup.utils import coerce_score


class House(str, Enum):
    """Closed set of houses, in leaderboard tie-break order"""
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    FULLSTACK = "FullStack"
    DEVOPS = "DevOps"

    @classmethod
    def lookup(cls, label: str) -> Optional["House"]:
        """Return the house for an exact label, or None if unknown"""
        try:
            return cls(label)
        except ValueError:
            return None


class SortField(IntEnum):
    """Table column index"""
    TEAM_NAME = 0
    SCORE = 1
    HOUSE = 2


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ScoreOrder(str, Enum):
    """How a user-triggered sort compares the score column"""
    NUMERIC = "numeric"
    TEXT = "text"


class ScoreRecord(BaseModel):
    """One (team, score, house) observation"""
    model_config = ConfigDict(frozen=True)

    team_name: str
    score: int = Field(ge=0)
    house: str  # raw label, may be outside House for orphan records

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value):
        return coerce_score(value)

    @classmethod
    def from_row(cls, row: Tuple[str, str, str]) -> "ScoreRecord":
        """Build from a raw (team name, score string, house string) tuple"""
        team_name, score, house = row
        return cls(team_name=team_name, score=score, house=house)

    @property
    def category(self) -> Optional[House]:
        return House.lookup(self.house)

    def fields(self) -> Tuple[str, str, str]:
        """Rendered string form of each column, in SortField order"""
        return (self.team_name, str(self.score), self.house)


class TeamScore(BaseModel):
    """Team name and score pair (used for MVPs)"""
    team_name: str
    score: int


class HouseAggregate(BaseModel):
    """Derived per-house standing"""
    house: House
    total_score: int = 0
    team_count: int = 0
    mvp: Optional[TeamScore] = None  # None when the house has no teams
    rank: int = 0


class QueryState(BaseModel):
    """Search / filter / sort state of the team table"""
    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    house_filter: Optional[House] = None
    sort_key: Optional[SortField] = None
    sort_direction: SortDirection = SortDirection.ASC


class ScoreboardConfig(BaseModel):
    """Scoreboard configuration (loaded from YAML)"""
    title: str = "Coders Cup Standings"
    data_path: str = "data/scores.csv"
    houses: List[House] = Field(default_factory=lambda: list(House))
    top_n: int = Field(default=3, ge=0)
    score_order: ScoreOrder = ScoreOrder.NUMERIC

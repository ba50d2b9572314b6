"""
Record store and CSV loader
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple

from coderscup.models import ScoreRecord


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("team_name", "score", "house")


class RecordStore:
    """Immutable, ordered snapshot of score records"""

    def __init__(self, records: Iterable[ScoreRecord] = ()):
        self._records: Tuple[ScoreRecord, ...] = tuple(records)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "RecordStore":
        """Build a store from raw (team name, score, house) tuples"""
        return cls(ScoreRecord.from_row(tuple(row)) for row in rows)

    @property
    def records(self) -> Tuple[ScoreRecord, ...]:
        return self._records

    def unknown_houses(self) -> List[str]:
        """House labels that are not a known House, in first-seen order"""
        seen = []
        for record in self._records:
            if record.category is None and record.house not in seen:
                seen.append(record.house)
        return seen

    def __iter__(self) -> Iterator[ScoreRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"


def load_records(csv_path: str) -> RecordStore:
    """
    Load score records from CSV file

    CSV format:
        team_name,score,house
        React Rebels,875,Frontend
        Node Ninjas,762,Backend

    Scores are coerced permissively (unparseable -> 0). Rows with an
    unknown house are kept and reported as warnings.

    Args:
        csv_path: Path to CSV file

    Returns:
        RecordStore in file order

    Raises:
        FileNotFoundError: If CSV file not found
        ValueError: If a required column is missing
    """
    path = Path(csv_path)

    if not path.exists():
        raise FileNotFoundError(f"Score file not found: {csv_path}")

    records = []

    with open(path, 'r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)

        missing = [col for col in REQUIRED_COLUMNS if col not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{csv_path}: missing column(s) {', '.join(missing)}")

        for row in reader:
            team_name = (row['team_name'] or '').strip()
            house = (row['house'] or '').strip()
            score = row['score'] or ''

            # Skip blank lines
            if not team_name and not house and not score.strip():
                continue

            records.append(ScoreRecord(team_name=team_name, score=score, house=house))

    store = RecordStore(records)

    for label in store.unknown_houses():
        logger.warning(f"Unknown house '{label}' in {csv_path}; excluded from house totals")

    logger.info(f"Loaded {len(store)} score records from {csv_path}")

    return store

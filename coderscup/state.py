"""
Global application state
Shared resources accessible across all modules
"""
from typing import Optional

from coderscup.models import ScoreboardConfig
from coderscup.records import RecordStore

# Effective configuration (replaced at startup by the loaded YAML)
CONFIG: ScoreboardConfig = ScoreboardConfig()

# Score records, loaded once at startup and read-only afterwards
RECORDS: Optional[RecordStore] = None

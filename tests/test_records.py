"""
Tests for score records, coercion and the CSV loader
"""
import logging

import pytest
from pydantic import ValidationError

from coderscup.models import House, ScoreRecord
from coderscup.records import RecordStore, load_records
from coderscup.utils import coerce_score


@pytest.mark.parametrize("raw, expected", [
    ("875", 875),
    (" 42", 42),
    ("12pts", 12),
    ("+7", 7),
    ("-5", 0),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (13, 13),
    (9.9, 9),
    (float("nan"), 0),
])
def test_coerce_score(raw, expected):
    assert coerce_score(raw) == expected


def test_record_from_row():
    """Raw tuples become typed records"""
    record = ScoreRecord.from_row(("React Rebels", "875", "Frontend"))
    assert record.team_name == "React Rebels"
    assert record.score == 875
    assert record.category == House.FRONTEND
    assert record.fields() == ("React Rebels", "875", "Frontend")


def test_record_unknown_house():
    """Unknown labels are kept but have no category"""
    record = ScoreRecord.from_row(("Swift Squad", "10", "Mobile"))
    assert record.house == "Mobile"
    assert record.category is None


def test_house_lookup_is_exact():
    assert House.lookup("DevOps") == House.DEVOPS
    assert House.lookup("devops") is None


def test_record_is_frozen():
    record = ScoreRecord.from_row(("A", "1", "Backend"))
    with pytest.raises(ValidationError):
        record.score = 99


def test_store_basics():
    store = RecordStore.from_rows([
        ("A", "1", "Backend"),
        ("B", "2", "Mobile"),
        ("C", "3", "Data"),
        ("D", "4", "Mobile"),
    ])
    assert len(store) == 4
    assert [r.team_name for r in store] == ["A", "B", "C", "D"]
    assert store.unknown_houses() == ["Mobile", "Data"]
    assert isinstance(store.records, tuple)


def test_load_records(tmp_path):
    """CSV rows load in file order with coerced scores"""
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text(
        "team_name,score,house\n"
        "React Rebels,875,Frontend\n"
        "\n"
        " Node Ninjas ,oops,Backend\n",
        encoding="utf-8",
    )
    store = load_records(str(csv_file))
    assert [(r.team_name, r.score, r.house) for r in store] == [
        ("React Rebels", 875, "Frontend"),
        ("Node Ninjas", 0, "Backend"),
    ]


def test_load_records_warns_unknown_house(tmp_path, caplog):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text("team_name,score,house\nSwift Squad,10,Mobile\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="coderscup.records"):
        store = load_records(str(csv_file))
    assert len(store) == 1
    assert "Mobile" in caplog.text


def test_load_records_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "nope.csv"))


def test_load_records_missing_column(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text("team_name,score\nA,1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="house"):
        load_records(str(csv_file))


def test_load_records_header_only(tmp_path):
    csv_file = tmp_path / "scores.csv"
    csv_file.write_text("team_name,score,house\n", encoding="utf-8")
    assert len(load_records(str(csv_file))) == 0

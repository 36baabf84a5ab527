import pytest

from core.exceptions import ReportSourceNotFound
from services.csv_loader import load_csv, load_events, load_players, load_rsvps


def _write(path, content):
    path.write_text(content, encoding="utf-8")
    return path


def test_load_csv_missing_file(tmp_path):
    missing = tmp_path / "players.csv"

    with pytest.raises(ReportSourceNotFound) as exc_info:
        load_csv(missing)

    assert exc_info.value.path == missing
    assert "Input file not found" in str(exc_info.value)


def test_load_players_ignores_extra_columns(tmp_path):
    path = _write(tmp_path / "players.csv",
                  "player_id,player_name,player_email,gender,age,nickname\n"
                  "1,Alice,alice@test.com,F,30,Ace\n"
                  "2,,bob@test.com,M,25,\n")

    players = load_players(path)

    assert [(p.player_id, p.player_name) for p in players] == [("1", "Alice"), ("2", "")]


def test_load_events_short_rows_become_none(tmp_path):
    path = _write(tmp_path / "events.csv",
                  "event_id,event_name,event_location,event_date\n"
                  "1,Opener\n")

    events = load_events(path)

    assert events[0].event_id == "1"
    assert events[0].event_name == "Opener"
    assert events[0].event_date is None


def test_load_rsvps_surplus_cells_dropped(tmp_path):
    path = _write(tmp_path / "rsvp.csv",
                  "rsvp_id,event_id,player_id,status\n"
                  "1,2,3,Yes,extra\n")

    rsvps = load_rsvps(path)

    assert rsvps[0].model_dump() == {"rsvp_id": "1", "event_id": "2", "player_id": "3", "status": "Yes"}


def test_load_rsvps_missing_column(tmp_path):
    path = _write(tmp_path / "rsvp.csv", "rsvp_id,player_id,status\n1,3,Yes\n")

    rsvps = load_rsvps(path)

    assert rsvps[0].event_id is None

import logging

import generate_attendance_report
from config import Settings
from core.logger import ConsoleLogger
from main import run_demo
from models import RsvpStatus


def test_run_demo(caplog):
    caplog.set_level(logging.INFO, logger="rsvp.demo")

    registry = run_demo(ConsoleLogger("rsvp.demo"))

    counts = registry.counts()
    assert (counts.total, counts.confirmed, counts.declined, counts.maybe) == (5, 2, 1, 2)
    assert registry.get_status("player3") == RsvpStatus.MAYBE
    assert registry.get_status("player6") is None

    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert errors == ['upsert called with invalid status "Invalid" for player player6.']


def test_report_script_exit_codes(tmp_path, monkeypatch):
    settings = Settings(_env_file=None, data_dir=tmp_path)
    monkeypatch.setattr(generate_attendance_report, "get_settings", lambda: settings)

    assert generate_attendance_report.main() == 1

    (tmp_path / "players.csv").write_text("player_id,player_name\n1,Alice\n", encoding="utf-8")
    (tmp_path / "events.csv").write_text("event_id,event_name\n1,Opener\n", encoding="utf-8")
    (tmp_path / "rsvp.csv").write_text("rsvp_id,event_id,player_id,status\n1,1,1,Yes\n", encoding="utf-8")

    assert generate_attendance_report.main() == 0
    assert "<td>Alice</td>" in settings.report_path.read_text(encoding="utf-8")

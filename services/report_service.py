"""
Attendance report service

Flow:
1. Read players / events / rsvps CSV files
2. Stage them in a throwaway SQLite database
3. Join Yes RSVPs to players and events
4. Render one HTML table per run and write it to disk

Broken references never abort the run: an unknown player becomes a
placeholder name, an unknown event drops the RSVP. Both are logged as
warnings. A missing input file does abort the run (ReportSourceNotFound).
"""
import html
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from config import Settings
from core.exceptions import UnknownEventReference, UnknownPlayerReference
from database import create_report_engine, get_db, transactional
from models import EventRecord, PlayerRecord, RsvpRecord, RsvpStatus
from schemas import EventAttendance, EventRow, PlayerRow, RsvpRow
from services.csv_loader import load_events, load_players, load_rsvps

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER_NAME = "Unknown Player"
UNNAMED_EVENT_NAME = "Unnamed Event"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def unknown_player_placeholder(player_id: str) -> str:
    return f"{UNKNOWN_PLAYER_NAME} (ID: {player_id})"


def numeric_event_id(event_id: str) -> Optional[int]:
    """
    Integer prefix of an event id, or None if it does not start with digits

    Examples:
        "12" -> 12, " 7b" -> 7, "abc" -> None, "" -> None
    """
    match = _LEADING_INT.match(event_id or "")
    if not match:
        return None
    return int(match.group(1))


@transactional
def stage_report_data(
    db: Session,
    players: Sequence[PlayerRow],
    events: Sequence[EventRow],
    rsvps: Sequence[RsvpRow],
) -> None:
    """
    Copy CSV rows into the staging tables

    Rules:
    - players without player_id are dropped; blank names become "Unknown Player"
    - events without event_id are dropped with a warning; blank names become
      "Unnamed Event"
    - a repeated player_id / event_id overwrites the earlier row
    - rsvps missing event_id or player_id are dropped with a warning
    """
    for player in players:
        if not player.player_id:
            continue
        name = player.player_name or UNKNOWN_PLAYER_NAME
        record = db.query(PlayerRecord).filter(PlayerRecord.player_id == player.player_id).first()
        if record:
            record.player_name = name
        else:
            db.add(PlayerRecord(player_id=player.player_id, player_name=name))
        db.flush()

    for event in events:
        if not event.event_id:
            logger.warning(f"Warning: Skipping event with missing or invalid event_id: {event.model_dump()}")
            continue
        name = event.event_name or UNNAMED_EVENT_NAME
        record = db.query(EventRecord).filter(EventRecord.event_id == event.event_id).first()
        if record:
            record.event_name = name
        else:
            db.add(EventRecord(event_id=event.event_id, event_name=name))
        db.flush()

    for rsvp in rsvps:
        if not rsvp.event_id or not rsvp.player_id:
            logger.warning(f"Warning: Skipping RSVP entry with missing IDs: {rsvp.model_dump()}")
            continue
        db.add(RsvpRecord(
            rsvp_id=rsvp.rsvp_id,
            event_id=rsvp.event_id,
            player_id=rsvp.player_id,
            status=rsvp.status,
        ))


def _attendee_name(rsvp: RsvpRecord, player_name: Optional[str]) -> str:
    if player_name is None:
        raise UnknownPlayerReference(rsvp.player_id, rsvp.event_id)
    return player_name


def build_event_attendance(db: Session) -> List[EventAttendance]:
    """
    Confirmed attendees per event, sorted by numeric event id

    Events whose id has no integer prefix are left out of the result.
    Attendees keep the order of the RSVP file.
    """
    attendance: Dict[str, EventAttendance] = {}
    for event in db.query(EventRecord).order_by(EventRecord.id).all():
        attendance[event.event_id] = EventAttendance(
            event_id=event.event_id,
            event_name=event.event_name,
        )

    rows = (
        db.query(RsvpRecord, PlayerRecord.player_name)
        .outerjoin(PlayerRecord, PlayerRecord.player_id == RsvpRecord.player_id)
        .filter(RsvpRecord.status == RsvpStatus.YES.value)
        .order_by(RsvpRecord.id)
        .all()
    )

    for rsvp, player_name in rows:
        try:
            event_attendance = attendance.get(rsvp.event_id)
            if event_attendance is None:
                raise UnknownEventReference(rsvp.event_id)
            name = _attendee_name(rsvp, player_name)
        except UnknownEventReference as e:
            logger.warning(f"Warning: {e}")
            continue
        except UnknownPlayerReference as e:
            logger.warning(f"Warning: {e}")
            name = unknown_player_placeholder(rsvp.player_id)

        event_attendance.attendee_names.append(name)

    report = [a for a in attendance.values() if numeric_event_id(a.event_id) is not None]
    report.sort(key=lambda a: numeric_event_id(a.event_id))
    return report


def render_html_report(report: Sequence[EventAttendance]) -> str:
    total_attendees = sum(event.attendee_count for event in report)

    rows = []
    for index, event in enumerate(report, start=1):
        if event.attendee_names:
            attendees = ", ".join(html.escape(name) for name in event.attendee_names)
        else:
            attendees = "<em>None</em>"
        rows.append(f"""
            <tr>
                <td>{index}</td>
                <td>{html.escape(event.event_name)}</td>
                <td>{attendees}</td>
                <td>{event.attendee_count}</td>
            </tr>""")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Event Attendance Report</title>
    <style>
        body {{ font-family: sans-serif; line-height: 1.6; padding: 20px; }}
        table {{ border-collapse: collapse; width: 100%; margin-top: 20px; }}
        th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; vertical-align: top; }}
        th {{ background-color: #f2f2f2; }}
        tr:nth-child(even) {{ background-color: #f9f9f9; }}
    </style>
</head>
<body>
    <h1>Event Attendance Report</h1>
    <table>
        <thead>
            <tr style="text-align:center">
                <th style="text-align:center">Serial Number</th>
                <th style="text-align:center">Event Name</th>
                <th style="text-align:center">Confirmed Attendees</th>
                <th style="text-align:center">Number of Attendees <br>({total_attendees} Total)</th>
            </tr>
        </thead>
        <tbody>{"".join(rows)}
        </tbody>
    </table>
</body>
</html>"""


def generate_html_report(settings: Settings) -> Path:
    """
    Run the whole report pipeline and return the path of the written file

    Raises:
        ReportSourceNotFound: one of the CSV inputs is missing
    """
    logger.info("Reading CSV files...")
    players = load_players(settings.players_path)
    events = load_events(settings.events_path)
    rsvps = load_rsvps(settings.rsvp_path)
    logger.info(f"Read {len(players)} players, {len(events)} events, and {len(rsvps)} RSVPs.")

    engine = create_report_engine(settings.database_url)
    try:
        with get_db(engine) as db:
            stage_report_data(db, players, events, rsvps)
            report = build_event_attendance(db)
    finally:
        engine.dispose()

    logger.info("Generating HTML report content...")
    content = render_html_report(report)

    output_path = settings.report_path
    logger.info(f"Writing HTML report to {output_path}...")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")

    logger.info("HTML attendance report generated successfully!")
    return output_path

"""
Domain enums and report staging tables

The staging tables only exist for the lifetime of one report run; they back
an in-memory SQLite database so the join can be expressed as queries.
"""
import enum

from sqlalchemy import Column, Integer, String

from database import Base


class RsvpStatus(str, enum.Enum):
    YES = "Yes"
    NO = "No"
    MAYBE = "Maybe"


class PlayerRecord(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    player_id = Column(String, nullable=False, index=True)
    player_name = Column(String, nullable=False)


class EventRecord(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String, nullable=False, index=True)
    event_name = Column(String, nullable=False)


class RsvpRecord(Base):
    __tablename__ = "rsvps"

    # CSV status is kept as raw text; only "Yes" rows matter for the report
    id = Column(Integer, primary_key=True, autoincrement=True)
    rsvp_id = Column(String, nullable=True)
    event_id = Column(String, nullable=False)
    player_id = Column(String, nullable=False)
    status = Column(String, nullable=True)

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class RsvpEntry(BaseModel):
    """Candidate entry for bulk-loading a registry (validated later, not here)"""
    player_id: Optional[str] = None
    status: Optional[str] = None


class RsvpCounts(BaseModel):
    total: int = 0
    confirmed: int = 0
    declined: int = 0
    maybe: int = 0


# ============ CSV rows ============

class PlayerRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    player_id: Optional[str] = None
    player_name: Optional[str] = None
    player_email: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[str] = None


class EventRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    event_id: Optional[str] = None
    event_name: Optional[str] = None
    event_location: Optional[str] = None
    event_date: Optional[str] = None


class RsvpRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rsvp_id: Optional[str] = None
    event_id: Optional[str] = None
    player_id: Optional[str] = None
    status: Optional[str] = None


# ============ Report ============

class EventAttendance(BaseModel):
    event_id: str
    event_name: str
    attendee_names: List[str] = []

    @property
    def attendee_count(self) -> int:
        return len(self.attendee_names)

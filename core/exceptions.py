"""
Custom exception classes

All RSVP and report errors live here so callers can handle them in one place.
The registry never lets these escape: it catches them and reports through its
logger. Only ReportSourceNotFound is allowed to end a report run.
"""


class RsvpTrackerException(Exception):
    """Base class for every RSVP tracker error"""
    pass


# ============ Input validation ============

class InvalidInput(RsvpTrackerException):
    """A mutation was rejected because its input is malformed"""
    pass


class InvalidPlayerId(InvalidInput):
    """Player id is empty, missing or not a string"""
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"upsert called with invalid playerId {player_id!r}.")


class InvalidRsvpStatus(InvalidInput):
    """Status is not one of Yes / No / Maybe"""
    def __init__(self, status, player_id):
        self.status = status
        self.player_id = player_id
        super().__init__(
            f'upsert called with invalid status "{status}" for player {player_id}.'
        )


# ============ Report references ============

class MissingReference(RsvpTrackerException):
    """An RSVP row points at a record that was never loaded"""
    pass


class UnknownPlayerReference(MissingReference):
    def __init__(self, player_id, event_id):
        self.player_id = player_id
        self.event_id = event_id
        super().__init__(
            f"Found RSVP 'Yes' for unknown player_id: {player_id} at event {event_id}"
        )


class UnknownEventReference(MissingReference):
    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(
            f"Found RSVP for event_id not present in events file: {event_id}"
        )


# ============ Report sources ============

class ReportSourceNotFound(RsvpTrackerException):
    """A CSV input file does not exist"""
    def __init__(self, path):
        self.path = path
        super().__init__(f"Input file not found: {path}")

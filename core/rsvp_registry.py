"""
RsvpRegistry: in-memory RSVP state for a single event

Responsibilities:
1. Hold the player_id -> RsvpStatus mapping (one registry, one mapping)
2. Validate every mutation before it touches state
3. Derive confirmed attendees and aggregate counts on demand

Invalid input is never raised to the caller. Each rejected call is reported
through the injected logger at error severity and the registry stays usable.
Not thread-safe: hosts must serialize access themselves.
"""
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

from core.exceptions import InvalidInput, InvalidPlayerId, InvalidRsvpStatus
from core.logger import RsvpLogger
from models import RsvpStatus
from schemas import RsvpCounts


def _candidate_fields(candidate: Any) -> Tuple[Any, Any]:
    """Pull (player_id, status) out of a mapping or an object with those attributes"""
    if candidate is None:
        return None, None
    if isinstance(candidate, Mapping):
        return candidate.get("player_id"), candidate.get("status")
    return getattr(candidate, "player_id", None), getattr(candidate, "status", None)


def validate_player_id(player_id: Any) -> str:
    if not isinstance(player_id, str) or not player_id:
        raise InvalidPlayerId(player_id)
    return player_id


def parse_status(status: Any, player_id: str) -> RsvpStatus:
    """
    Normalize a raw status into RsvpStatus

    Accepts enum members and their string values ("Yes", "No", "Maybe").
    Matching is case-sensitive.

    Raises:
        InvalidRsvpStatus: anything outside the closed set
    """
    try:
        return RsvpStatus(status)
    except (ValueError, TypeError):
        raise InvalidRsvpStatus(
            status.value if isinstance(status, RsvpStatus) else status, player_id
        )


class RsvpRegistry:
    """Player RSVP registry"""

    def __init__(self, logger: RsvpLogger, initial_entries: Iterable[Any] = ()):
        self._logger = logger
        self._rsvps: Dict[str, RsvpStatus] = {}

        entries = list(initial_entries or ())
        if not entries:
            self._logger.log("Initializing RsvpRegistry with empty state.")
            return

        self._logger.log(f"Initializing RsvpRegistry with {len(entries)} entries.")

        for entry in entries:
            player_id, status = _candidate_fields(entry)
            if not player_id or not status:
                self._logger.warn("Skipping invalid initial entry:", entry)
                continue
            # Same path as runtime calls, minus the per-entry info log
            self.upsert(player_id, status, is_initialization=True)

    def upsert(self, player_id: Any, status: Any, is_initialization: bool = False) -> None:
        """
        Add or update the RSVP status for a player (last write wins)

        Validation order:
        1. player_id must be a non-empty string
        2. status must be Yes / No / Maybe

        Parameters:
            player_id: player identifier
            status: RsvpStatus or its string value
            is_initialization: set by the constructor to silence the
                added/updated log during bulk load

        Note:
            An upsert with the same status as before still logs
            "Updated ... from X to X."
        """
        try:
            player_id = validate_player_id(player_id)
            new_status = parse_status(status, player_id)
        except InvalidInput as e:
            self._logger.error(str(e))
            return

        previous_status = self._rsvps.get(player_id)
        self._rsvps[player_id] = new_status

        if is_initialization:
            self._debug(f"Loaded initial RSVP for player {player_id}: {new_status.value}.")
            return

        if previous_status is not None:
            self._logger.log(
                f"Updated RSVP for player {player_id} "
                f"from {previous_status.value} to {new_status.value}."
            )
        else:
            self._logger.log(f"Added new RSVP for player {player_id}: {new_status.value}.")

    def confirmed_attendees(self) -> List[str]:
        """
        Player ids whose current status is Yes

        Order follows insertion into the mapping; callers should not depend on it.
        """
        confirmed_ids = [
            player_id for player_id, status in self._rsvps.items()
            if status == RsvpStatus.YES
        ]
        self._logger.log(f"Retrieved {len(confirmed_ids)} confirmed attendees.")
        return confirmed_ids

    def counts(self) -> RsvpCounts:
        counts = RsvpCounts()

        for status in self._rsvps.values():
            counts.total += 1
            if status == RsvpStatus.YES:
                counts.confirmed += 1
            elif status == RsvpStatus.NO:
                counts.declined += 1
            elif status == RsvpStatus.MAYBE:
                counts.maybe += 1

        self._logger.log("Calculated RSVP counts:", counts.model_dump())
        return counts

    def get_status(self, player_id: str) -> Optional[RsvpStatus]:
        """Status for player_id, or None if the player has not responded"""
        return self._rsvps.get(player_id)

    def __len__(self) -> int:
        return len(self._rsvps)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._rsvps

    def _debug(self, message: str, *context) -> None:
        # debug is optional on injected loggers
        debug = getattr(self._logger, "debug", None)
        if callable(debug):
            debug(message, *context)

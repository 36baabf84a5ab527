import logging

from config import get_settings
from core.logger import ConsoleLogger, configure_logging
from core.rsvp_registry import RsvpRegistry
from models import RsvpStatus
from schemas import RsvpEntry

logger = logging.getLogger(__name__)


def run_demo(rsvp_logger: ConsoleLogger) -> RsvpRegistry:
    """Exercise every registry operation once against sample data"""
    rsvp_logger.log("Application starting...")

    initial_rsvps = [
        RsvpEntry(player_id="player1", status=RsvpStatus.MAYBE),
        RsvpEntry(player_id="player2", status=RsvpStatus.NO),
        RsvpEntry(player_id="player3", status=RsvpStatus.MAYBE),
        RsvpEntry(player_id="player4", status=RsvpStatus.YES),
    ]
    registry = RsvpRegistry(rsvp_logger, initial_rsvps)

    rsvp_logger.log("--- Using the RSVP registry ---")

    registry.upsert("player5", RsvpStatus.YES)
    registry.upsert("player2", RsvpStatus.NO)
    # Rejected and logged, registry unchanged
    registry.upsert("player6", "Invalid")

    rsvp_logger.log("Confirmed attendees:", registry.confirmed_attendees())
    rsvp_logger.log("RSVP counts:", registry.counts().model_dump())

    player3_status = registry.get_status("player3")
    rsvp_logger.log(f"Status for player3: {player3_status.value if player3_status else None}")
    rsvp_logger.log(f"Status for player_unknown: {registry.get_status('player_unknown')}")

    rsvp_logger.log("--- Application finished ---")
    return registry


if __name__ == "__main__":
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug_enabled else settings.log_level)
    run_demo(ConsoleLogger("rsvp", debug_enabled=settings.debug_enabled))

import logging
import sys

from config import get_settings
from core.exceptions import RsvpTrackerException
from core.logger import configure_logging
from services.report_service import generate_html_report

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        generate_html_report(settings)
    except (RsvpTrackerException, OSError) as e:
        logger.error(f"Error generating HTML report with names: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = "production"
    log_level: str = "INFO"

    data_dir: Path = Path(".")
    players_file: str = "players.csv"
    events_file: str = "events.csv"
    rsvp_file: str = "rsvp.csv"
    report_file: str = "attendance_report.html"

    # In-memory by default: staging tables never outlive a report run
    database_url: str = "sqlite://"

    class Config:
        env_file = ".env"
        env_prefix = "RSVP_"

    @property
    def debug_enabled(self) -> bool:
        return self.app_env == "development"

    @property
    def players_path(self) -> Path:
        return self.data_dir / self.players_file

    @property
    def events_path(self) -> Path:
        return self.data_dir / self.events_file

    @property
    def rsvp_path(self) -> Path:
        return self.data_dir / self.rsvp_file

    @property
    def report_path(self) -> Path:
        return self.data_dir / self.report_file


@lru_cache()
def get_settings():
    return Settings()

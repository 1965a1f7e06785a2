from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parent.parent / ".env.local"


class Settings(BaseSettings):
    # Environment settings
    environment: str = "development"
    debug: bool = False
    LOG_LEVEL: str = "INFO"

    # Airtable settings (roster store)
    NEIGHBORHOOD_AIRTABLE_API_KEY: str | None = None
    NEIGHBORHOOD_AIRTABLE_BASE_ID: str | None = None
    AIRTABLE_API_URL: str = "https://api.airtable.com"
    AIRTABLE_NEIGHBORS_TABLE: str = "Neighbors"
    AIRTABLE_PAGE_SIZE: int = 100
    AIRTABLE_TIMEOUT: float = 30.0

    # Hackatime settings (activity spans)
    HACKATIME_BASE_URL: str = "https://hackatime.hackclub.com"
    HACKATIME_TIMEOUT: float = 15.0

    # IANA zone for week boundaries; unset means host local time
    LEADERBOARD_TIMEZONE: str | None = None

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_airtable_config(self) -> dict:
        """
        Get Airtable client configuration.
        Consumed once at startup to build the roster client.
        """
        return {
            "api_key": self.NEIGHBORHOOD_AIRTABLE_API_KEY,
            "base_id": self.NEIGHBORHOOD_AIRTABLE_BASE_ID,
            "api_url": self.AIRTABLE_API_URL,
            "page_size": self.AIRTABLE_PAGE_SIZE,
            "timeout": self.AIRTABLE_TIMEOUT,
        }


settings = Settings()

"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from expense_bot.errors import ConfigurationError


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    telegram_bot_token: str = ""

    google_sheets_id: str = ""
    google_credentials_file: str = ""
    sheets_api_base_url: str = "https://sheets.googleapis.com/v4"
    sheets_timeout_seconds: float = 30.0

    reference_sheet: str = Field(default="Категории", description="Sheet holding the reference columns")
    ledger_sheet: str = Field(default="Расходы", description="Sheet receiving expense rows")

    reference_cache_ttl_seconds: float = Field(default=300.0, gt=0)
    keyboard_columns: int = Field(default=2, ge=1)
    state_store_buckets: int = Field(default=16, ge=1)

    allowed_user_ids: str = ""

    log_level: str = "INFO"

    @property
    def sheet_url(self) -> str:
        """Browser link to the spreadsheet, shown in the greeting."""

        return f"https://docs.google.com/spreadsheets/d/{self.google_sheets_id}/edit"

    def require_runtime(self) -> None:
        """Fail fast when configuration needed by the bot process is missing."""

        required = {
            "TELEGRAM_BOT_TOKEN": self.telegram_bot_token,
            "GOOGLE_SHEETS_ID": self.google_sheets_id,
            "GOOGLE_CREDENTIALS_FILE": self.google_credentials_file,
            "ALLOWED_USER_IDS": self.allowed_user_ids,
        }
        missing = [name for name, value in required.items() if not value.strip()]
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

        from expense_bot.security.telegram_auth import parse_allowed_ids

        if not parse_allowed_ids(self.allowed_user_ids):
            raise ConfigurationError("ALLOWED_USER_IDS must list at least one user ID")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from loginflow import BASE_DIR
from loginflow.infrastructure.types import LogHandler
from loginflow.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOGINFLOW_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    # CSV file with a "username,password" header used to seed the users.
    USERS_FILE: Path | None = None

    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_HANDLERS: list[LogHandler] = [LogHandler.CONSOLE]


app_settings = AppSettings()

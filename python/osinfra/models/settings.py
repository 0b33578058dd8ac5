# osinfra/models/settings.py

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class InfraSettings(BaseSettings):
    """
    Pydantic settings for the osinfra CLI.
    By default, these fields map to environment variables prefixed with `OSINFRA_`.
    For example, `OSINFRA_TERRAFORM_DIR`, `OSINFRA_LOG_LEVEL`, etc.
    """

    # OSINFRA_TERRAFORM_DIR="/tf" populates terraform_dir, and so on.
    model_config = SettingsConfigDict(env_prefix="OSINFRA_")

    terraform_dir: str = "."
    command_retries: int = 0
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

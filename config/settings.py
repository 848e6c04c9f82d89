from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global configuration for the plotclip tooling.

    Utilizes Pydantic BaseSettings so a bad value in the environment or `.env`
    fails at import time instead of mid-run. The clipping functions do not
    read these values; only the CLI and logging layers do.
    """

    # Project Root Directory Modeled dynamically
    BASE_DIR: Path = Path(__file__).parent.parent

    # Where `clip` writes results when no explicit output path is given
    OUTPUT_DIR: Path = Field(default_factory=lambda: Path(__file__).parent.parent / "output")

    LOG_LEVEL: str = Field(default="DEBUG")

    # Decimal places kept in JSON output
    OUTPUT_PRECISION: int = Field(default=9, ge=0)

    # Load from environment variables and an optional .env file
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Initialize central settings instance
settings = Settings()

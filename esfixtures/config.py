"""Configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration for the fixture loader command line.

    Values are loaded from ``ESFIXTURES_*`` environment variables or a .env
    file in the working directory, when one exists.
    """

    # Search service
    service_url: str = "http://localhost:9200"
    request_timeout: float = 30.0  # seconds, applied to the whole httpx client

    # Logging
    json_logs: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "ESFIXTURES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_file_ignore_empty": True,
        "extra": "ignore",
    }

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, Optional

class EngineSettings(BaseSettings):
    """
    Centralized configuration for the Docker Engine MCP tools.
    Reads from environment variables, .env file, and defaults.

    Instances are frozen: the same object is handed to every tool and
    shared across concurrent invocations.
    """
    # Target Docker Engine API
    BASE_URL: str = "http://localhost:2375"
    API_TOKEN: Optional[str] = None  # Sent as "Authorization: Bearer <token>" when set
    VERIFY_SSL: bool = True
    REQUEST_TIMEOUT: Optional[float] = None  # None keeps the HTTP client default (no timeout)

    # Path and query values are sent verbatim unless this is enabled
    PERCENT_ENCODE: bool = False

    # Server Configuration
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"

    # Load from .env file if present
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCKER_MCP_",  # Variables must start with DOCKER_MCP_, e.g., DOCKER_MCP_BASE_URL
        extra='ignore',
        frozen=True
    )

    @field_validator("BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            return "INFO"
        return level

    def get_auth_headers(self) -> Dict[str, str]:
        """Headers carrying the configured auth material (empty when none)."""
        if self.API_TOKEN:
            return {"Authorization": f"Bearer {self.API_TOKEN}"}
        return {}

# Instantiate global settings object
settings = EngineSettings()

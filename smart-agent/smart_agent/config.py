"""
Configuration for SMART Agent.

Reads from environment variables with sensible defaults.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="SMART_AGENT_")

    # API server
    api_host: str = "localhost"
    api_port: int = 9090

    # External tools
    lsblk_binary: str = "lsblk"
    smartctl_binary: str = "smartctl"

    # Device paths are built as device_prefix + lsblk name
    device_prefix: str = "/dev/"

    # Seconds; None blocks until the tool exits
    command_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"


settings = Settings()

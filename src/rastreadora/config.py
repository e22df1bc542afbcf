# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to network, logging and concurrency settings

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rastreadora.extraction.fetch import DEFAULT_USER_AGENT, NetworkConfig


class Unset(Enum):
    """Marks a network override that was not given, since None already means "no limit"."""

    TOKEN = "unset"


UNSET = Unset.TOKEN


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="RASTREADORA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
        env_parse_none_str="none",
    )

    # Network Configuration
    request_timeout: float | None = Field(
        default=30.0, gt=0, description="Per-request timeout in seconds, 'none' to wait forever"
    )
    max_concurrency: int | None = Field(
        default=None, ge=1, description="Maximum simultaneous page requests, 'none' for no limit"
    )
    skip_verify: bool = Field(default=False, description="Skip TLS certificate and hostname verification")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header sent with every request")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    def network(
        self,
        skip_verify: bool | None = None,
        timeout: float | None | Unset = UNSET,
        max_concurrency: int | None | Unset = UNSET,
    ) -> NetworkConfig:
        """Build the network settings, letting explicit arguments override the environment.

        ``timeout=None`` disables the timeout and ``max_concurrency=None`` lifts the
        limit; leave them out to keep the configured values.
        """
        return NetworkConfig(
            skip_verify=self.skip_verify if skip_verify is None else skip_verify,
            timeout=self.request_timeout if timeout is UNSET else timeout,
            max_concurrency=self.max_concurrency if max_concurrency is UNSET else max_concurrency,
            user_agent=self.user_agent,
        )


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance

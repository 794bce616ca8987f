"""Configuration management using Pydantic settings."""

from typing import Optional, TYPE_CHECKING

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provider settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Controller connection
    aap_host: Optional[AnyHttpUrl] = None
    aap_username: Optional[str] = None
    aap_password: Optional[str] = None
    aap_insecure_skip_verify: bool = False
    aap_timeout_seconds: float = 5.0  # per request, connect and read

    def get_aap_host(self) -> Optional[str]:
        """Return the configured controller URL without a trailing slash."""

        if not self.aap_host:
            return None

        return str(self.aap_host).rstrip("/")

    def has_basic_auth(self) -> bool:
        """Check if both basic auth credentials are configured."""
        return bool(self.aap_username and self.aap_password)


settings = Settings()


if TYPE_CHECKING:  # pragma: no cover - only for type hints
    from .config_validation import ConfigValidationResult

# Cache of the configuration validation result so it can be reused across modules
_config_validation_result: Optional["ConfigValidationResult"] = None


def set_config_validation_result(result: "ConfigValidationResult") -> None:
    """Persist the configuration validation result for reuse."""

    global _config_validation_result
    _config_validation_result = result


def get_config_validation_result() -> Optional["ConfigValidationResult"]:
    """Return the cached configuration validation result, if available."""

    return _config_validation_result

"""Configuration validation utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from .config import (
    Settings,
    settings,
    set_config_validation_result,
    get_config_validation_result,
)


@dataclass
class ConfigIssue:
    """Represents a single configuration issue."""

    message: str
    hint: Optional[str] = None


@dataclass
class ConfigValidationResult:
    """Outcome of running configuration checks."""

    checked_at: datetime
    errors: List[ConfigIssue] = field(default_factory=list)
    warnings: List[ConfigIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def _warn(result: ConfigValidationResult, message: str, hint: Optional[str] = None) -> None:
    result.warnings.append(ConfigIssue(message=message, hint=hint))


def _error(result: ConfigValidationResult, message: str, hint: Optional[str] = None) -> None:
    result.errors.append(ConfigIssue(message=message, hint=hint))


def run_config_checks(
    force: bool = False, config: Optional[Settings] = None
) -> ConfigValidationResult:
    """Validate configuration combinations and cache the result.

    An explicit ``config`` is always checked afresh and is not cached.
    """

    explicit = config is not None
    if config is None:
        config = settings

    if not force and not explicit:
        cached = get_config_validation_result()
        if cached is not None:
            return cached

    result = ConfigValidationResult(checked_at=datetime.now(timezone.utc))

    host = config.get_aap_host()
    if not host:
        _error(
            result,
            "AAP_HOST is required.",
            "Set AAP_HOST to the base URL of the automation controller.",
        )
    elif host.startswith("http://"):
        _warn(
            result,
            "AAP_HOST uses plain HTTP.",
            "Credentials are sent with every request; use an https:// URL.",
        )

    # Credentials - error on partial configuration, warn when absent.
    if config.aap_username and not config.aap_password:
        _error(
            result,
            "AAP_USERNAME is set but AAP_PASSWORD is missing.",
            "Set AAP_PASSWORD for the configured user.",
        )
    elif config.aap_password and not config.aap_username:
        _error(
            result,
            "AAP_PASSWORD is set but AAP_USERNAME is missing.",
            "Set AAP_USERNAME to the account owning the password.",
        )
    elif not config.has_basic_auth():
        _warn(
            result,
            "AAP credentials are not configured.",
            "Provide AAP_USERNAME and AAP_PASSWORD unless the controller allows anonymous access.",
        )

    if config.aap_insecure_skip_verify:
        _warn(
            result,
            "AAP_INSECURE_SKIP_VERIFY is enabled.",
            "Only skip TLS certificate verification for controlled test environments.",
        )

    if config.aap_timeout_seconds <= 0:
        _error(
            result,
            "AAP_TIMEOUT_SECONDS must be greater than zero.",
            "Set AAP_TIMEOUT_SECONDS to the number of seconds to wait for each request.",
        )

    if not explicit:
        set_config_validation_result(result)
    return result

"""HTTP transport used to reach the automation controller."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import httpx

from ..core.config import Settings, settings as default_settings
from ..core.config_validation import run_config_checks
from ..core.errors import PreconditionViolation, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status code and raw body of one HTTP exchange."""

    status_code: int
    body: bytes = b""


class Transport(Protocol):
    """Performs one HTTP request against a path or absolute URL."""

    def do_request(
        self, method: str, path: str, body: Optional[bytes] = None
    ) -> TransportResponse:
        """Send ``body`` with ``method`` to ``path``.

        Raises:
            TransportError: when no response was received (connection
                failure, timeout, cancelled request).
        """
        ...


class HttpxTransport:
    """Transport backed by a synchronous ``httpx.Client``."""

    def __init__(self, client: httpx.Client):
        self._client = client

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "HttpxTransport":
        """Build a transport from provider settings.

        Raises:
            PreconditionViolation: when the configuration checks report
                errors, for example a missing ``AAP_HOST``.
        """

        if config is None:
            config_result = run_config_checks()
            config = default_settings
        else:
            config_result = run_config_checks(config=config)

        for issue in config_result.warnings:
            logger.warning("Configuration warning: %s", issue.message)
            if issue.hint:
                logger.warning("Hint: %s", issue.hint)

        if config_result.has_errors:
            for issue in config_result.errors:
                logger.error("Configuration error: %s", issue.message)
                if issue.hint:
                    logger.error("Hint: %s", issue.hint)
            raise PreconditionViolation(
                "Cannot create a transport: "
                + " ".join(issue.message for issue in config_result.errors)
            )

        host = config.get_aap_host()

        auth = None
        if config.has_basic_auth():
            auth = httpx.BasicAuth(config.aap_username, config.aap_password)

        client = httpx.Client(
            base_url=host,
            auth=auth,
            verify=not config.aap_insecure_skip_verify,
            timeout=config.aap_timeout_seconds,
            headers={"Accept": "application/json"},
        )
        logger.debug("Created HTTP transport for %s", host)
        return cls(client)

    def do_request(
        self, method: str, path: str, body: Optional[bytes] = None
    ) -> TransportResponse:
        headers = {"Content-Type": "application/json"} if body is not None else None
        try:
            response = self._client.request(method, path, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            raise TransportError(method, path, f"request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(method, path, str(exc) or type(exc).__name__) from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return TransportResponse(status_code=response.status_code, body=response.content)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["HttpxTransport", "Transport", "TransportResponse"]

"""Thin REST client mapping AAP status codes onto provider errors."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Type

from ..core.errors import MethodNotAllowedError, NotFoundError, RemoteRejection
from .transport import Transport

logger = logging.getLogger(__name__)

_REJECTIONS: Dict[int, Type[RemoteRejection]] = {
    404: NotFoundError,
    405: MethodNotAllowedError,
}


class AAPClient:
    """Issue create/read/update/delete calls through a transport.

    Each helper knows which status codes mean success for its verb and
    raises a :class:`RemoteRejection` subclass for anything else.
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    def create(
        self,
        path: str,
        body: Optional[bytes] = None,
        expected: Iterable[int] = (201,),
    ) -> bytes:
        return self._request("POST", path, body, expected)

    def get(self, path: str) -> bytes:
        return self._request("GET", path, None, (200,))

    def update(self, path: str, body: Optional[bytes]) -> bytes:
        return self._request("PUT", path, body, (200,))

    def delete(self, path: str) -> bytes:
        return self._request("DELETE", path, None, (202, 204))

    def _request(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        expected: Iterable[int],
    ) -> bytes:
        expected_codes = tuple(expected)
        response = self._transport.do_request(method, path, body)

        if response.status_code in expected_codes:
            return response.body

        error_cls = _REJECTIONS.get(response.status_code, RemoteRejection)
        logger.error(
            "%s %s returned HTTP %s (expected %s)",
            method,
            path,
            response.status_code,
            expected_codes,
        )
        raise error_cls(
            method,
            path,
            response.status_code,
            response.body,
            expected_codes,
        )


__all__ = ["AAPClient"]

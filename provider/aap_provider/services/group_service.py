"""Create, read, update and delete inventory groups."""
from __future__ import annotations

import logging

from ..core.errors import PreconditionViolation
from ..core.models import GROUPS_PATH, GroupResourceState
from ..core.optional import known_text
from ..core.reconciler import parse_group_response
from ..core.request_body import create_group_request_body
from .aap_client import AAPClient

logger = logging.getLogger(__name__)


class GroupService:
    """Manage ``/api/v2/groups/`` resources."""

    def __init__(self, client: AAPClient):
        self._client = client

    def create(self, state: GroupResourceState) -> GroupResourceState:
        body = create_group_request_body(state)
        logger.info("Creating group %s", known_text(state.name))
        response_body = self._client.create(GROUPS_PATH, body)
        return parse_group_response(response_body, state)

    def read(self, state: GroupResourceState) -> GroupResourceState:
        url = self._require_url(state, "read")
        response_body = self._client.get(url)
        return parse_group_response(response_body, state)

    def update(self, state: GroupResourceState) -> GroupResourceState:
        url = self._require_url(state, "update")
        body = create_group_request_body(state)
        logger.info("Updating group %s", url)
        response_body = self._client.update(url, body)
        return parse_group_response(response_body, state)

    def delete(self, state: GroupResourceState) -> None:
        url = self._require_url(state, "delete")
        logger.info("Deleting group %s", url)
        self._client.delete(url)

    @staticmethod
    def _require_url(state: GroupResourceState, action: str) -> str:
        url = known_text(state.url)
        if url is None:
            raise PreconditionViolation(f"Cannot {action} a group that has no URL")
        return url


__all__ = ["GroupService"]

"""Request body construction for launch and group calls."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .errors import MalformedInput
from .models import GroupAPIModel, GroupResourceState, JobLaunchRequest
from .optional import AttrValue, require_known, value_or_none

logger = logging.getLogger(__name__)


def normalize_json(text: str) -> str:
    """Return a canonical serialization of a JSON document.

    Two documents that differ only in whitespace or key order normalize to
    the same string.
    """

    return json.dumps(json.loads(text), sort_keys=True, separators=(",", ":"))


def _parse_extra_vars(text: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInput("extra_vars", f"not valid JSON ({exc})") from exc

    if not isinstance(parsed, dict):
        raise MalformedInput(
            "extra_vars", f"expected a JSON object, got {type(parsed).__name__}"
        )
    return parsed


def create_job_request_body(
    inventory_id: AttrValue[int], extra_vars: AttrValue[str]
) -> Optional[bytes]:
    """Build the JSON body for a job template launch.

    Returns ``None`` when neither an inventory override nor extra variables
    are present, meaning the template launches with its defaults.

    Raises:
        PreconditionViolation: if either attribute is still unknown.
        MalformedInput: if ``extra_vars`` is not a JSON object.
    """

    inventory = value_or_none(inventory_id, "inventory_id")
    extra_vars_text = value_or_none(extra_vars, "extra_vars")

    if inventory is None and extra_vars_text is None:
        return None

    request = JobLaunchRequest(
        inventory=inventory,
        extra_vars=_parse_extra_vars(extra_vars_text) if extra_vars_text is not None else None,
    )
    body = request.model_dump_json(exclude_none=True)
    logger.debug("Built job launch body: %s", body)
    return body.encode("utf-8")


def create_group_request_body(state: GroupResourceState) -> bytes:
    """Build the JSON body for creating or updating a group.

    ``description`` and ``variables`` are omitted when null or empty.
    ``variables`` stays a JSON string, which is what the groups endpoint
    stores.
    """

    inventory = require_known(state.inventory_id, "inventory_id")
    name = require_known(state.name, "name")
    description = value_or_none(state.description, "description") or None
    variables = value_or_none(state.variables, "variables") or None

    if variables:
        try:
            json.loads(variables)
        except json.JSONDecodeError as exc:
            raise MalformedInput("variables", f"not valid JSON ({exc})") from exc

    group = GroupAPIModel(
        inventory=inventory,
        name=name,
        description=description,
        variables=variables,
    )
    body = group.model_dump_json(
        include={"inventory", "name", "description", "variables"},
        exclude_none=True,
    )
    return body.encode("utf-8")


__all__ = [
    "create_group_request_body",
    "create_job_request_body",
    "normalize_json",
]

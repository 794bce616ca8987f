"""Map AAP API responses onto resource state.

Responses are first validated into an intermediate pydantic model and then
copied onto the state one attribute at a time, so that an absent or empty
field always becomes ``NULL`` rather than an empty ``Known`` value.

Parsing never mutates the state it is given. On failure the caller keeps its
prior state; on success it receives a new one.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import ResponseParseError
from .models import GroupAPIModel, GroupResourceState, JobAPIResponse, JobResourceState
from .optional import NULL, AttrValue, Known, known_or_null, known_text

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: Type[ModelT], body: bytes, resource: str) -> ModelT:
    if not body or not body.strip():
        raise ResponseParseError(f"Empty response body for {resource}")
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise ResponseParseError(
            f"Error parsing JSON response for {resource}: {exc}"
        ) from exc


def _text(value: Optional[str]) -> AttrValue[str]:
    return Known(value) if value else NULL


def extract_ignored_fields(ignored: Optional[dict]) -> Tuple[str, ...]:
    """Return the names of fields the server ignored, sorted."""

    if not ignored:
        return ()
    return tuple(sorted(ignored))


def parse_job_response(body: bytes, prior: JobResourceState) -> JobResourceState:
    """Reconcile a job launch or job detail response into a new state.

    Caller-owned attributes are carried over from ``prior``. Server-owned
    attributes are replaced wholesale by what the response holds, except
    that a known ``url`` survives a response that does not echo it.

    Raises:
        ResponseParseError: if ``body`` is not a JSON object of the expected
            shape.
    """

    response = _validate(JobAPIResponse, body, "job")

    url = _text(response.url)
    if url.is_null and known_text(prior.url):
        # the url is the job identity for the life of the resource
        url = prior.url

    ignored_fields = extract_ignored_fields(response.ignored_fields)
    if ignored_fields:
        logger.warning(
            "AAP ignored fields for job %s: %s",
            known_text(url) or "<no url>",
            ", ".join(ignored_fields),
        )

    return replace(
        prior,
        job_type=_text(response.job_type),
        url=url,
        status=_text(response.status),
        job_id=known_or_null(response.id),
        ignored_fields=Known(ignored_fields),
    )


def parse_group_response(body: bytes, prior: GroupResourceState) -> GroupResourceState:
    """Reconcile a group response into a new state."""

    response = _validate(GroupAPIModel, body, "group")

    return replace(
        prior,
        inventory_id=Known(response.inventory),
        name=Known(response.name),
        description=_text(response.description),
        variables=_text(response.variables),
        url=_text(response.url),
        id=known_or_null(response.id),
    )


__all__ = [
    "extract_ignored_fields",
    "parse_group_response",
    "parse_job_response",
]

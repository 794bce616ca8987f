"""Launch and track AAP jobs.

A job cannot be modified once launched. "Updating" a job resource means
deciding whether the declared inputs still match the job that was launched
and launching a new one when they do not.
"""
from __future__ import annotations

import json
import logging
from typing import Optional

from ..core.errors import NotFoundError, PreconditionViolation
from ..core.models import JOB_TEMPLATE_LAUNCH_PATH, JobResourceState
from ..core.optional import AttrValue, Known, Unknown, known_text, require_known
from ..core.reconciler import parse_job_response
from ..core.request_body import create_job_request_body, normalize_json
from .aap_client import AAPClient

logger = logging.getLogger(__name__)


def _extra_vars_key(extra_vars: AttrValue[str]) -> Optional[str]:
    """Comparison key for extra variables, ignoring formatting."""

    text = known_text(extra_vars)
    if text is None:
        return None
    try:
        return normalize_json(text)
    except json.JSONDecodeError:
        return text


class JobService:
    """Launch jobs from templates and refresh their status."""

    def __init__(self, client: AAPClient):
        self._client = client

    def launch(self, state: JobResourceState) -> JobResourceState:
        """Launch a new job from ``state.template_id``.

        Returns the state populated from the launch response. This is the
        only operation that assigns ``url``.

        Raises:
            PreconditionViolation: template id missing, or an input still
                unknown. No request is sent.
            MalformedInput: ``extra_vars`` is not a JSON object. No request
                is sent.
            RemoteRejection: the controller refused the launch.
            TransportError: the request did not complete.
            ResponseParseError: the launch response could not be parsed.
        """

        template_id = require_known(state.template_id, "template_id")
        body = create_job_request_body(state.inventory_id, state.extra_vars)

        path = JOB_TEMPLATE_LAUNCH_PATH.format(template_id=template_id)
        logger.info("Launching job from template %s", template_id)
        response_body = self._client.create(path, body, expected=(200, 201))

        launched = parse_job_response(response_body, state)
        logger.info(
            "Launched job %s from template %s",
            known_text(launched.url) or "<no url>",
            template_id,
        )
        return launched

    def refresh(self, state: JobResourceState) -> JobResourceState:
        """Re-read the job at ``state.url``.

        Without a URL there is nothing to read yet; the state is returned
        with every server-owned attribute reset and no request is sent.

        Raises:
            NotFoundError: the job no longer exists remotely. The caller
                decides whether to drop it from tracked state.
        """

        url = known_text(state.url)
        if url is None:
            logger.debug("Job has no URL yet; skipping refresh")
            return state.cleared()

        try:
            response_body = self._client.get(url)
        except NotFoundError:
            logger.warning("Job %s no longer exists on the controller", url)
            raise

        refreshed = parse_job_response(response_body, state)
        logger.info(
            "Refreshed job %s: status=%s",
            url,
            known_text(refreshed.status) or "<unset>",
        )
        return refreshed

    @staticmethod
    def requires_relaunch(prior: JobResourceState, declared: JobResourceState) -> bool:
        """Return True if ``declared`` no longer matches the job launched for ``prior``."""

        for attr in (declared.template_id, declared.inventory_id, declared.extra_vars):
            if isinstance(attr, Unknown):
                raise PreconditionViolation(
                    "Declared job inputs must be resolved before deciding on a relaunch"
                )

        if not isinstance(prior.url, Known) or not prior.url.value:
            return True
        if prior.template_id != declared.template_id:
            return True
        if prior.inventory_id != declared.inventory_id:
            return True
        return _extra_vars_key(prior.extra_vars) != _extra_vars_key(declared.extra_vars)

    def update(self, prior: JobResourceState, declared: JobResourceState) -> JobResourceState:
        """Reconcile declared inputs against the previously launched job.

        Launches a new job when the inputs changed; otherwise refreshes the
        existing one and keeps its URL.
        """

        if self.requires_relaunch(prior, declared):
            logger.info(
                "Job inputs changed for %s; launching a new job",
                known_text(prior.url) or "<unlaunched job>",
            )
            return self.launch(declared.cleared())

        return self.refresh(prior)

    def delete(self, state: JobResourceState) -> None:
        """Forget a job. Launched jobs are history, so nothing is sent."""

        logger.info(
            "Removing job %s from tracked state; no remote call is made",
            known_text(state.url) or "<unlaunched job>",
        )


__all__ = ["JobService"]

"""Data models for job and group resources."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .optional import NULL, AttrValue


JOB_TEMPLATE_LAUNCH_PATH = "/api/v2/job_templates/{template_id}/launch/"
GROUPS_PATH = "/api/v2/groups/"


# ============================================================================
# Resource state
# ============================================================================


@dataclass(frozen=True)
class JobResourceState:
    """Attribute set of a launched job.

    ``template_id``, ``inventory_id`` and ``extra_vars`` come from the caller.
    Everything else is written only by reconciling a server response.
    """

    template_id: AttrValue[int] = NULL
    job_type: AttrValue[str] = NULL
    url: AttrValue[str] = NULL
    status: AttrValue[str] = NULL
    inventory_id: AttrValue[int] = NULL
    extra_vars: AttrValue[str] = NULL
    ignored_fields: AttrValue[Tuple[str, ...]] = NULL
    job_id: AttrValue[int] = NULL

    def cleared(self) -> "JobResourceState":
        """Return this state with every server-owned attribute reset."""

        return replace(
            self,
            job_type=NULL,
            url=NULL,
            status=NULL,
            ignored_fields=NULL,
            job_id=NULL,
        )


@dataclass(frozen=True)
class GroupResourceState:
    """Attribute set of an inventory group."""

    inventory_id: AttrValue[int] = NULL
    name: AttrValue[str] = NULL
    description: AttrValue[str] = NULL
    variables: AttrValue[str] = NULL
    url: AttrValue[str] = NULL
    id: AttrValue[int] = NULL


# ============================================================================
# Wire payloads
# ============================================================================


class JobLaunchRequest(BaseModel):
    """Body of ``POST /api/v2/job_templates/{id}/launch/``."""

    inventory: Optional[int] = Field(
        None, description="Inventory overriding the template default"
    )
    extra_vars: Optional[Dict[str, Any]] = Field(
        None, description="Variables merged into the playbook run"
    )


class JobAPIResponse(BaseModel):
    """Fields of a job document the provider tracks.

    String fields are ``None`` when missing or sent as JSON ``null``; the
    reconciler maps both, and the empty string, to ``NULL``.
    """

    model_config = ConfigDict(extra="ignore")

    job_type: Optional[str] = None
    url: Optional[str] = None
    status: Optional[str] = None
    id: Optional[int] = None
    ignored_fields: Optional[Dict[str, Any]] = None


class GroupAPIModel(BaseModel):
    """Group document as sent to and returned by ``/api/v2/groups/``."""

    model_config = ConfigDict(extra="ignore")

    inventory: int
    name: str
    description: Optional[str] = None
    variables: Optional[str] = None
    url: Optional[str] = None
    id: Optional[int] = None


__all__ = [
    "GROUPS_PATH",
    "GroupAPIModel",
    "GroupResourceState",
    "JOB_TEMPLATE_LAUNCH_PATH",
    "JobAPIResponse",
    "JobLaunchRequest",
    "JobResourceState",
]

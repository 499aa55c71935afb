"""
Option resolution for helm2_cleanup.

Turns the raw cleanup flags into a validated, immutable CleanupPlan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_LABEL, DEFAULT_STORAGE_TYPE, DEFAULT_TILLER_LABEL, DEFAULT_TILLER_NAMESPACE
from .exceptions import ValidationError

SINGULAR_RELEASE_MESSAGE = (
    "cleanup of a specific release is a singular operation. Other operations like "
    "configuration cleanup or Tiller cleanup are not allowed in conjunction with the operation"
)


@dataclass(frozen=True)
class CleanupRequest:
    """Cleanup flags exactly as the operator passed them."""

    config_cleanup: bool = False
    release_cleanup: bool = False
    tiller_cleanup: bool = False
    release_name: Optional[str] = None
    dry_run: bool = False
    skip_confirmation: bool = False
    storage_type: str = DEFAULT_STORAGE_TYPE
    tiller_namespace: str = DEFAULT_TILLER_NAMESPACE
    label: str = DEFAULT_LABEL
    tiller_label: str = DEFAULT_TILLER_LABEL
    tiller_out_cluster: bool = False


@dataclass(frozen=True)
class CleanupPlan:
    """Validated cleanup plan; built once by resolve_plan and never changed."""

    config_cleanup: bool
    release_cleanup: bool
    tiller_cleanup: bool
    release_name: Optional[str]
    dry_run: bool
    skip_confirmation: bool
    storage_type: str
    tiller_namespace: str
    label: str
    tiller_label: str
    tiller_out_cluster: bool

    @property
    def scoped_to_release(self) -> bool:
        return self.release_name is not None

    @property
    def run_tiller_phase(self) -> bool:
        """Tiller is not managed by this tool when it runs outside the cluster."""
        return self.tiller_cleanup and not self.tiller_out_cluster


def resolve_plan(request: CleanupRequest) -> CleanupPlan:
    """
    Validate the requested flags and apply the defaulting rules.

    A named release forces release cleanup and excludes the other categories.
    Without a name and without any category, all three categories are selected.

    Raises:
        ValidationError: If a release name is combined with config or Tiller cleanup.
    """
    release_name = request.release_name or None
    config_cleanup = request.config_cleanup
    release_cleanup = request.release_cleanup
    tiller_cleanup = request.tiller_cleanup

    if release_name is not None:
        if config_cleanup or tiller_cleanup:
            raise ValidationError(SINGULAR_RELEASE_MESSAGE)
        release_cleanup = True
    elif not (config_cleanup or release_cleanup or tiller_cleanup):
        config_cleanup = release_cleanup = tiller_cleanup = True

    return CleanupPlan(
        config_cleanup=config_cleanup,
        release_cleanup=release_cleanup,
        tiller_cleanup=tiller_cleanup,
        release_name=release_name,
        dry_run=request.dry_run,
        skip_confirmation=request.skip_confirmation,
        storage_type=request.storage_type,
        tiller_namespace=request.tiller_namespace,
        label=request.label,
        tiller_label=request.tiller_label,
        tiller_out_cluster=request.tiller_out_cluster,
    )

"""
Helm v2 cleanup package.

Remove Helm v2 configuration, release data and the Tiller deployment once a
cluster no longer needs them.
"""

from . import (
    args_parser,
    collaborators,
    config,
    confirmation,
    exceptions,
    home,
    kube,
    options,
    releases,
    sequencer,
    tiller,
)
from .exceptions import (
    CleanupError,
    ConfirmationError,
    DeletionError,
    KubectlError,
    PhaseFailedError,
    ReleaseLookupError,
    ValidationError,
)
from .options import CleanupPlan, CleanupRequest, resolve_plan
from .releases import ReleaseVersionRef
from .sequencer import CleanupResult, CleanupSequencer, CleanupStatus, Phase, run_cleanup

__all__ = [
    "CleanupError",
    "CleanupPlan",
    "CleanupRequest",
    "CleanupResult",
    "CleanupSequencer",
    "CleanupStatus",
    "ConfirmationError",
    "DeletionError",
    "KubectlError",
    "Phase",
    "PhaseFailedError",
    "ReleaseLookupError",
    "ReleaseVersionRef",
    "ValidationError",
    "args_parser",
    "collaborators",
    "config",
    "confirmation",
    "exceptions",
    "home",
    "kube",
    "options",
    "releases",
    "resolve_plan",
    "run_cleanup",
    "sequencer",
    "tiller",
]

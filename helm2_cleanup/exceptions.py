"""
Exceptions for the helm2_cleanup package.
"""

from __future__ import annotations


class CleanupError(RuntimeError):
    """Base class for every failure surfaced by the cleanup workflow."""


class ValidationError(CleanupError, ValueError):
    """Raised when the requested cleanup options cannot be combined."""


class ConfirmationError(CleanupError, OSError):
    """Raised when the confirmation prompt cannot be read."""


class KubectlError(CleanupError):
    """Raised when a kubectl invocation fails or kubectl is missing."""

    def __init__(self, args: list[str], detail: str):
        self.kubectl_args = list(args)
        self.detail = detail
        super().__init__(f"kubectl {' '.join(args)} failed: {detail}")


class ReleaseLookupError(CleanupError):
    """Raised when the versions of a named release cannot be listed."""

    def __init__(self, release_name: str, detail: str):
        self.release_name = release_name
        super().__init__(f"failed to list versions of release '{release_name}': {detail}")


class DeletionError(CleanupError):
    """Raised when removing release data, Tiller or the Helm v2 home fails."""

    def __init__(self, target: str, detail: str):
        self.target = target
        super().__init__(f"failed to remove {target}: {detail}")


class PhaseFailedError(CleanupError):
    """Raised by the sequencer when a phase fails; earlier phases stay applied."""

    def __init__(self, phase, completed_phases, cause: Exception):
        self.phase = phase
        self.completed_phases = tuple(completed_phases)
        self.cause = cause
        super().__init__(f"{phase.label} cleanup failed: {cause}")

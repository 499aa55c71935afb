"""
Ordered execution of the cleanup phases.

Phases run one after another (releases, Tiller, configuration). The first
failure stops the run; phases that already completed are not rolled back, and
the raised PhaseFailedError records which ones they were.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from .confirmation import ConfirmPrompt, confirm_action, confirm_cleanup
from .exceptions import CleanupError, PhaseFailedError
from .options import CleanupPlan
from .releases import ReleaseVersionRef


class Phase(enum.Enum):
    """Cleanup phases in execution order."""

    RELEASES = "Release Data"
    TILLER = "Tiller"
    CONFIG = "Helm v2 Configuration"

    @property
    def label(self) -> str:
        return self.value


class CleanupStatus(enum.Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of a cleanup run that did not fail."""

    status: CleanupStatus
    completed_phases: tuple[Phase, ...] = ()
    dry_run: bool = False


class CleanupCollaborators(Protocol):
    """Services that perform (or, in dry run, describe) the actual removals."""

    def list_release_versions(self, release_name: str) -> list[ReleaseVersionRef]: ...

    def delete_all_release_versions(self, dry_run: bool) -> None: ...

    def delete_release_versions(self, release_name: str, versions: Iterable[int], dry_run: bool) -> None: ...

    def remove_tiller(self, namespace: str, label: str, dry_run: bool) -> None: ...

    def remove_home_folder(self, dry_run: bool) -> None: ...


def log_dry_run_banner():
    logging.info("NOTE: This is in dry-run mode, the following actions will not be executed.")
    logging.info("Run without --dry-run to take the actions described below:")


class CleanupSequencer:
    """Runs the phases enabled by a plan against a set of collaborators."""

    def __init__(self, plan: CleanupPlan, collaborators: CleanupCollaborators):
        self.plan = plan
        self.collaborators = collaborators

    def enabled_phases(self) -> list[Phase]:
        """Return the phases this plan runs, in execution order."""
        phases = []
        if self.plan.release_cleanup:
            phases.append(Phase.RELEASES)
        if self.plan.run_tiller_phase:
            phases.append(Phase.TILLER)
        if self.plan.config_cleanup:
            phases.append(Phase.CONFIG)
        return phases

    def run(self) -> CleanupResult:
        """
        Execute every enabled phase in order.

        Raises:
            PhaseFailedError: If a phase fails. Later phases are not run.
        """
        logging.info("Helm v2 data will be cleaned up.")
        completed: list[Phase] = []
        for phase in self.enabled_phases():
            try:
                self._run_phase(phase)
            except CleanupError as exc:
                raise PhaseFailedError(phase, completed, exc) from exc
            completed.append(phase)

        if self.plan.dry_run:
            logging.info("Dry run complete: the actions above were only described, nothing was removed.")
        else:
            logging.info("Helm v2 data was cleaned up successfully.")
        return CleanupResult(CleanupStatus.COMPLETED, tuple(completed), self.plan.dry_run)

    def _run_phase(self, phase: Phase):
        if phase is Phase.RELEASES:
            self._cleanup_releases()
        elif phase is Phase.TILLER:
            self._cleanup_tiller()
        else:
            self._cleanup_config()

    def _cleanup_releases(self):
        plan = self.plan
        if plan.release_name is None:
            logging.info("[Helm 2] Releases will be deleted.")
            self.collaborators.delete_all_release_versions(plan.dry_run)
        else:
            logging.info("[Helm 2] Release '%s' will be deleted.", plan.release_name)
            # Deleting a release means deleting every stored version of it
            refs = self.collaborators.list_release_versions(plan.release_name)
            versions = {ref.version for ref in refs}
            self.collaborators.delete_release_versions(plan.release_name, versions, plan.dry_run)

        if not plan.dry_run:
            if plan.release_name is None:
                logging.info("[Helm 2] Releases deleted.")
            else:
                logging.info("[Helm 2] Release '%s' deleted.", plan.release_name)

    def _cleanup_tiller(self):
        namespace = self.plan.tiller_namespace
        logging.info('[Helm 2] Tiller in "%s" namespace will be removed.', namespace)
        self.collaborators.remove_tiller(namespace, self.plan.tiller_label, self.plan.dry_run)
        if not self.plan.dry_run:
            logging.info('[Helm 2] Tiller in "%s" namespace was removed.', namespace)

    def _cleanup_config(self):
        self.collaborators.remove_home_folder(self.plan.dry_run)


def run_cleanup(
    plan: CleanupPlan,
    collaborators: CleanupCollaborators,
    prompt: Optional[ConfirmPrompt] = None,
) -> CleanupResult:
    """
    Confirm and execute a validated plan.

    Returns an ABORTED result when the operator declines; nothing is touched in
    that case. Confirmation read failures and phase failures propagate.
    """
    if plan.dry_run:
        log_dry_run_banner()

    if not confirm_cleanup(plan, prompt or confirm_action):
        return CleanupResult(CleanupStatus.ABORTED, (), plan.dry_run)

    return CleanupSequencer(plan, collaborators).run()

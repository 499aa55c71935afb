"""
Command-line interface and main entry point for helm2_cleanup.

Handles workflow orchestration, operator reporting and exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .args_parser import parse_args
from .collaborators import KubectlCollaborators
from .config import EnvSettings, load_settings
from .exceptions import ConfirmationError, PhaseFailedError, ValidationError
from .kube import KubeConfig
from .options import CleanupRequest, resolve_plan
from .sequencer import CleanupStatus, run_cleanup


def build_request(args: argparse.Namespace, settings: EnvSettings) -> CleanupRequest:
    """Combine parsed flags with environment settings; flags win."""
    return CleanupRequest(
        config_cleanup=args.config_cleanup,
        release_cleanup=args.release_cleanup,
        tiller_cleanup=args.tiller_cleanup,
        release_name=args.release_name,
        dry_run=args.dry_run,
        skip_confirmation=args.skip_confirmation,
        storage_type=args.storage_type,
        tiller_namespace=args.tiller_namespace or settings.tiller_namespace,
        label=args.label,
        tiller_label=args.tiller_label,
        tiller_out_cluster=args.tiller_out_cluster,
    )


def build_kube_config(args: argparse.Namespace, settings: EnvSettings) -> KubeConfig:
    return KubeConfig(
        context=args.kube_context or settings.kube_context,
        file=args.kubeconfig or settings.kubeconfig,
    )


def _report_partial_cleanup(exc: PhaseFailedError) -> None:
    """Tell the operator what failed and what was already removed."""
    logging.error("Error: %s", exc)
    if exc.completed_phases:
        done = ", ".join(f'"{phase.label}"' for phase in exc.completed_phases)
        logging.error("Cleanup stopped after partial completion. Already removed: %s.", done)
    else:
        logging.error("Cleanup stopped before any category was removed.")
    logging.error("Resolve the problem and re-run the cleanup for the remaining categories.")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the helm2_cleanup CLI."""
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    settings = load_settings(args.env_file)
    try:
        plan = resolve_plan(build_request(args, settings))
    except ValidationError as exc:
        logging.error("Error: %s", exc)
        return 1

    collaborators = KubectlCollaborators.from_plan(plan, build_kube_config(args, settings), settings.helm_home)
    try:
        result = run_cleanup(plan, collaborators)
    except ConfirmationError as exc:
        logging.error("Error: %s", exc)
        return 1
    except PhaseFailedError as exc:
        _report_partial_cleanup(exc)
        return 1

    if result.status is CleanupStatus.ABORTED:
        logging.debug("Cleanup declined; nothing was removed.")
    return 0

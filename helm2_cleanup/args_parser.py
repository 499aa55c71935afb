"""
Argument parsing for the helm2_cleanup CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse

from .config import DEFAULT_LABEL, DEFAULT_STORAGE_TYPE, DEFAULT_TILLER_LABEL, STORAGE_TYPES


def add_cleanup_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the category toggles and the release scoping flag."""
    parser.add_argument(
        "--config-cleanup",
        action="store_true",
        help="If set, configuration cleanup is performed.",
    )
    parser.add_argument(
        "--release-cleanup",
        action="store_true",
        help="If set, release data cleanup is performed.",
    )
    parser.add_argument(
        "--tiller-cleanup",
        action="store_true",
        help="If set, Tiller cleanup is performed.",
    )
    parser.add_argument(
        "--name",
        dest="release_name",
        default="",
        help=(
            "The release name. When it is specified, the named release and its versions "
            "will be removed only. Should not be used with other cleanup operations."
        ),
    )


def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add dry-run and confirmation arguments."""
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Simulate the cleanup: describe the actions without removing anything.",
    )
    parser.add_argument(
        "--skip-confirmation",
        action="store_true",
        help="Skip the confirmation prompt before performing cleanup.",
    )


def add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    """Add cluster, storage and Tiller location arguments."""
    parser.add_argument(
        "--tiller-ns",
        dest="tiller_namespace",
        help="Namespace of Tiller (default: $TILLER_NAMESPACE or kube-system).",
    )
    parser.add_argument(
        "-l",
        "--label",
        default=DEFAULT_LABEL,
        help="Label selecting Tiller's release records (default: %(default)s).",
    )
    parser.add_argument(
        "--tiller-label",
        default=DEFAULT_TILLER_LABEL,
        help="Label selecting the Tiller deployment and service (default: %(default)s).",
    )
    parser.add_argument(
        "-t",
        "--tiller-out-cluster",
        action="store_true",
        help="When Tiller is not running in the cluster, e.g. Tillerless.",
    )
    parser.add_argument(
        "-s",
        "--release-storage",
        dest="storage_type",
        choices=STORAGE_TYPES,
        default=DEFAULT_STORAGE_TYPE,
        help="Storage type of Helm v2 releases (default: %(default)s).",
    )
    parser.add_argument("--kube-context", help="Name of the kubeconfig context to use.")
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file.")


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--env-file", help="Optional .env file with environment overrides (default: ~/.env).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def _validate_and_transform_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate and normalize parsed arguments."""
    if args.release_name and not args.release_name.strip():
        parser.error("--name must not be blank.")
    args.release_name = args.release_name or None
    if args.tiller_namespace is not None and not args.tiller_namespace.strip():
        parser.error("--tiller-ns must not be empty.")
    if not args.label.strip():
        parser.error("--label must not be empty.")
    if not args.tiller_label.strip():
        parser.error("--tiller-label must not be empty.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helm2-cleanup",
        description="Cleanup Helm v2 configuration, release data and Tiller deployment.",
    )
    add_cleanup_arguments(parser)
    add_action_arguments(parser)
    add_connection_arguments(parser)
    add_output_arguments(parser)
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and process command-line arguments for helm2_cleanup."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_and_transform_args(args, parser)
    return args

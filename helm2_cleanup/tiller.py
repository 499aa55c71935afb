"""Removal of the Tiller deployment and its service."""

from __future__ import annotations

import logging

from .exceptions import DeletionError, KubectlError
from .kube import KubeConfig, run_kubectl

TILLER_RESOURCE_KINDS = "deployment,service"


def remove_tiller(namespace: str, label: str, kube_config: KubeConfig, dry_run: bool):
    """Delete the Tiller deployment and service selected by namespace and label."""
    if dry_run:
        logging.info(
            '[Helm 2] Would delete %s labelled "%s" in "%s" namespace.',
            TILLER_RESOURCE_KINDS,
            label,
            namespace,
        )
        return
    try:
        output = run_kubectl(
            ["delete", TILLER_RESOURCE_KINDS, "-n", namespace, "-l", label],
            kube_config,
        )
    except KubectlError as exc:
        raise DeletionError(f'Tiller in "{namespace}" namespace', exc.detail) from exc
    for line in output.splitlines():
        if line.strip():
            logging.debug("kubectl: %s", line.strip())

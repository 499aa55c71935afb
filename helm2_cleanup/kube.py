"""
Thin kubectl wrapper shared by the cluster-facing collaborators.
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .exceptions import KubectlError

KUBECTL_BINARY = "kubectl"


@dataclass(frozen=True)
class KubeConfig:
    """Cluster connection context passed to every kubectl call."""

    context: Optional[str] = None
    file: Optional[str] = None

    def global_args(self) -> list[str]:
        """Return the kubectl flags selecting this context and kubeconfig file."""
        args: list[str] = []
        if self.file:
            args.extend(["--kubeconfig", self.file])
        if self.context:
            args.extend(["--context", self.context])
        return args


def run_kubectl(args: list[str], kube_config: KubeConfig) -> str:
    """Run kubectl with the given arguments and return its stdout."""
    command = [KUBECTL_BINARY, *kube_config.global_args(), *args]
    logging.debug("Running %s", " ".join(command))
    try:
        result = subprocess.run(command, capture_output=True, text=True, errors="replace", check=False)
    except FileNotFoundError as exc:
        raise KubectlError(args, f"{KUBECTL_BINARY} executable not found") from exc
    except OSError as exc:
        raise KubectlError(args, str(exc)) from exc
    except ValueError as exc:
        raise KubectlError(args, f"unreadable output: {exc}") from exc

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise KubectlError(args, detail)
    return result.stdout


def get_json(args: list[str], kube_config: KubeConfig) -> dict:
    """Run a kubectl read command with JSON output and decode it."""
    output = run_kubectl([*args, "-o", "json"], kube_config)
    try:
        return json.loads(output or "{}")
    except json.JSONDecodeError as exc:
        raise KubectlError(args, f"invalid JSON output: {exc}") from exc

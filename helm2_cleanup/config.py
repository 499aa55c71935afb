"""
Configuration and environment resolution for helm2_cleanup.

Holds the Helm v2 defaults and loads overrides from a .env file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_TILLER_NAMESPACE = "kube-system"
# Owner label Tiller puts on every release version record
DEFAULT_LABEL = "OWNER=TILLER"
# Selector matching the tiller-deploy deployment and service
DEFAULT_TILLER_LABEL = "app=helm,name=tiller"
DEFAULT_STORAGE_TYPE = "configmaps"
STORAGE_TYPES = ("configmaps", "secrets")

ENV_FILE_VARIABLE = "HELM2_CLEANUP_ENV_FILE"


@dataclass(frozen=True)
class EnvSettings:
    """Settings resolved from the environment before CLI flags are applied."""

    tiller_namespace: str
    kube_context: Optional[str]
    kubeconfig: Optional[str]
    helm_home: Path


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be loaded.

    Priority order:
      1. Explicit parameter
      2. HELM2_CLEANUP_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    env_file = os.environ.get(ENV_FILE_VARIABLE)
    if env_file:
        return env_file
    return str(Path.home() / ".env")


def default_helm_home() -> Path:
    """Return the Helm v2 home directory (HELM_V2_HOME, then HELM_HOME, then ~/.helm)."""
    for name in ("HELM_V2_HOME", "HELM_HOME"):
        env_val = os.environ.get(name)
        if env_val:
            return Path(env_val).expanduser()
    return Path.home() / ".helm"


def load_settings(env_path: Optional[str] = None) -> EnvSettings:
    """Load the .env file, if any, and read the Helm v2 settings from the environment."""
    resolved_path = _resolve_env_path(env_path)
    if load_dotenv(resolved_path):
        logging.debug("Loaded environment overrides from %s", resolved_path)

    return EnvSettings(
        tiller_namespace=os.environ.get("TILLER_NAMESPACE") or DEFAULT_TILLER_NAMESPACE,
        kube_context=os.environ.get("HELM_KUBECONTEXT") or None,
        kubeconfig=os.environ.get("KUBECONFIG") or None,
        helm_home=default_helm_home(),
    )

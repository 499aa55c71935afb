"""
Helm v2 release storage: list and delete release version records.

Tiller keeps one ConfigMap (or Secret) per release version in its namespace,
named ``<release>.v<version>`` and labelled ``OWNER=TILLER``, ``NAME`` and
``VERSION``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .config import DEFAULT_LABEL, DEFAULT_STORAGE_TYPE, DEFAULT_TILLER_NAMESPACE, STORAGE_TYPES
from .exceptions import DeletionError, KubectlError, ReleaseLookupError
from .kube import KubeConfig, get_json, run_kubectl


@dataclass(frozen=True)
class ReleaseVersionRef:
    """A stored release version record."""

    name: str
    version: int

    @property
    def record_name(self) -> str:
        return release_version_name(self.name, self.version)


@dataclass(frozen=True)
class RetrieveOptions:
    """Where the release records live."""

    tiller_namespace: str = DEFAULT_TILLER_NAMESPACE
    label: str = DEFAULT_LABEL
    storage_type: str = DEFAULT_STORAGE_TYPE

    def __post_init__(self):
        if self.storage_type not in STORAGE_TYPES:
            raise ValueError(
                f"unsupported release storage '{self.storage_type}' "
                f"(expected one of: {', '.join(STORAGE_TYPES)})"
            )


def release_version_name(release_name: str, version: int) -> str:
    """Return the storage object name of a release version."""
    return f"{release_name}.v{version}"


def _parse_versions(release_name: str, payload: dict) -> list[ReleaseVersionRef]:
    items = payload.get("items", []) if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise ReleaseLookupError(release_name, "unexpected kubectl listing format")
    refs = []
    for item in items:
        metadata = item.get("metadata") if isinstance(item, dict) else None
        if not isinstance(metadata, dict):
            raise ReleaseLookupError(release_name, f"release record without metadata: {item!r}")
        labels = metadata.get("labels")
        if not isinstance(labels, dict):
            labels = {}
        raw_version = labels.get("VERSION")
        try:
            version = int(raw_version)
        except (TypeError, ValueError) as exc:
            object_name = metadata.get("name", "<unnamed>")
            raise ReleaseLookupError(
                release_name, f"record {object_name} has invalid VERSION label {raw_version!r}"
            ) from exc
        refs.append(ReleaseVersionRef(release_name, version))
    return sorted(refs, key=lambda ref: ref.version)


def list_release_versions(
    release_name: str, options: RetrieveOptions, kube_config: KubeConfig
) -> list[ReleaseVersionRef]:
    """Return every stored version of the named release, oldest first."""
    selector = f"{options.label},NAME={release_name}"
    try:
        payload = get_json(
            ["get", options.storage_type, "-n", options.tiller_namespace, "-l", selector],
            kube_config,
        )
    except KubectlError as exc:
        raise ReleaseLookupError(release_name, exc.detail) from exc
    return _parse_versions(release_name, payload)


def delete_all_release_versions(options: RetrieveOptions, kube_config: KubeConfig, dry_run: bool):
    """Delete every version of every release in a single request."""
    logging.info(
        '[Helm 2] All release versions labelled "%s" in "%s" namespace will be deleted.',
        options.label,
        options.tiller_namespace,
    )
    if dry_run:
        return
    try:
        run_kubectl(
            ["delete", options.storage_type, "-n", options.tiller_namespace, "-l", options.label],
            kube_config,
        )
    except KubectlError as exc:
        raise DeletionError("release data", exc.detail) from exc


def delete_release_versions(
    release_name: str,
    versions: Iterable[int],
    options: RetrieveOptions,
    kube_config: KubeConfig,
    dry_run: bool,
):
    """Delete exactly the given versions of the named release."""
    names = [release_version_name(release_name, version) for version in sorted(set(versions))]
    for name in names:
        logging.info('[Helm 2] ReleaseVersion "%s" will be deleted.', name)
    if dry_run or not names:
        return
    try:
        run_kubectl(
            ["delete", options.storage_type, "-n", options.tiller_namespace, *names],
            kube_config,
        )
    except KubectlError as exc:
        raise DeletionError(f"release '{release_name}' data", exc.detail) from exc
    for name in names:
        logging.info('[Helm 2] ReleaseVersion "%s" deleted.', name)

"""kubectl and filesystem backed implementation of the cleanup collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .home import remove_home_folder
from .kube import KubeConfig
from .options import CleanupPlan
from .releases import (
    ReleaseVersionRef,
    RetrieveOptions,
    delete_all_release_versions,
    delete_release_versions,
    list_release_versions,
)
from .tiller import remove_tiller


@dataclass(frozen=True)
class KubectlCollaborators:
    """Binds the release, Tiller and home folder operations to one cluster and home directory."""

    retrieve_options: RetrieveOptions
    kube_config: KubeConfig
    helm_home: Path

    @classmethod
    def from_plan(cls, plan: CleanupPlan, kube_config: KubeConfig, helm_home: Path) -> "KubectlCollaborators":
        return cls(
            retrieve_options=RetrieveOptions(
                tiller_namespace=plan.tiller_namespace,
                label=plan.label,
                storage_type=plan.storage_type,
            ),
            kube_config=kube_config,
            helm_home=helm_home,
        )

    def list_release_versions(self, release_name: str) -> list[ReleaseVersionRef]:
        return list_release_versions(release_name, self.retrieve_options, self.kube_config)

    def delete_all_release_versions(self, dry_run: bool):
        delete_all_release_versions(self.retrieve_options, self.kube_config, dry_run)

    def delete_release_versions(self, release_name: str, versions: Iterable[int], dry_run: bool):
        delete_release_versions(release_name, versions, self.retrieve_options, self.kube_config, dry_run)

    def remove_tiller(self, namespace: str, label: str, dry_run: bool):
        remove_tiller(namespace, label, self.kube_config, dry_run)

    def remove_home_folder(self, dry_run: bool):
        remove_home_folder(self.helm_home, dry_run)

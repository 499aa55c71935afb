"""Shared pytest fixtures for the helm2_cleanup tests."""

from __future__ import annotations

import os
from unittest import mock

import pytest

from helm2_cleanup.exceptions import DeletionError
from helm2_cleanup.options import CleanupRequest, resolve_plan
from helm2_cleanup.releases import ReleaseVersionRef


class RecordingCollaborators:
    """Fake collaborator set that records every call in order."""

    def __init__(self, versions=None, failures=None):
        self.versions = list(versions or [])
        self.failures = dict(failures or {})
        self.calls: list[tuple] = []

    def _record(self, name, *args):
        self.calls.append((name, *args))
        failure = self.failures.get(name)
        if failure is not None:
            raise failure

    def list_release_versions(self, release_name):
        self._record("list_release_versions", release_name)
        return [ReleaseVersionRef(release_name, version) for version in self.versions]

    def delete_all_release_versions(self, dry_run):
        self._record("delete_all_release_versions", dry_run)

    def delete_release_versions(self, release_name, versions, dry_run):
        self._record("delete_release_versions", release_name, set(versions), dry_run)

    def remove_tiller(self, namespace, label, dry_run):
        self._record("remove_tiller", namespace, label, dry_run)

    def remove_home_folder(self, dry_run):
        self._record("remove_home_folder", dry_run)

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture(autouse=True)
def isolated_env_file(tmp_path, monkeypatch):
    """Point the .env lookup at an empty temporary file and restore os.environ afterwards."""
    env_file = tmp_path / ".env"
    env_file.write_text("")
    with mock.patch.dict(os.environ):
        for name in ("TILLER_NAMESPACE", "HELM_KUBECONTEXT", "KUBECONFIG", "HELM_V2_HOME", "HELM_HOME"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("HELM2_CLEANUP_ENV_FILE", str(env_file))
        yield env_file


@pytest.fixture(name="make_plan")
def fixture_make_plan():
    """Build a validated plan from request keyword arguments."""

    def _make_plan(**overrides):
        return resolve_plan(CleanupRequest(**overrides))

    return _make_plan


@pytest.fixture(name="collaborators")
def fixture_collaborators():
    return RecordingCollaborators(versions=[1, 2, 3])


@pytest.fixture(name="failing_release_collaborators")
def fixture_failing_release_collaborators():
    return RecordingCollaborators(
        failures={"delete_all_release_versions": DeletionError("release data", "forbidden")}
    )

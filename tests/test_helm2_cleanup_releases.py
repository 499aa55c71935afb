"""Tests for helm2_cleanup/releases.py module."""

from __future__ import annotations

import json
import logging
import subprocess
from unittest.mock import patch

import pytest

from helm2_cleanup.exceptions import DeletionError, ReleaseLookupError
from helm2_cleanup.kube import KubeConfig
from helm2_cleanup.releases import (
    ReleaseVersionRef,
    RetrieveOptions,
    delete_all_release_versions,
    delete_release_versions,
    list_release_versions,
    release_version_name,
)

KUBE = KubeConfig()
OPTIONS = RetrieveOptions(tiller_namespace="kube-system", label="OWNER=TILLER", storage_type="configmaps")


def _completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=["kubectl"], returncode=returncode, stdout=stdout, stderr=stderr)


def _records(name, versions):
    return json.dumps(
        {
            "items": [
                {"metadata": {"name": release_version_name(name, v), "labels": {"NAME": name, "VERSION": str(v)}}}
                for v in versions
            ]
        }
    )


def test_release_version_name():
    assert release_version_name("app1", 3) == "app1.v3"
    assert ReleaseVersionRef("app1", 7).record_name == "app1.v7"


def test_retrieve_options_rejects_unknown_storage():
    with pytest.raises(ValueError, match="unsupported release storage"):
        RetrieveOptions(storage_type="memory")


class TestListReleaseVersions:
    """Tests for list_release_versions"""

    def test_returns_sorted_versions(self):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(_records("app1", [3, 1, 2]))) as run:
            refs = list_release_versions("app1", OPTIONS, KUBE)
        assert refs == [ReleaseVersionRef("app1", 1), ReleaseVersionRef("app1", 2), ReleaseVersionRef("app1", 3)]
        command = run.call_args[0][0]
        assert command == [
            "kubectl",
            "get",
            "configmaps",
            "-n",
            "kube-system",
            "-l",
            "OWNER=TILLER,NAME=app1",
            "-o",
            "json",
        ]

    def test_no_records_is_empty_list(self):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(json.dumps({"items": []}))):
            assert list_release_versions("app1", OPTIONS, KUBE) == []

    def test_kubectl_failure_raises_lookup_error(self):
        with patch(
            "helm2_cleanup.kube.subprocess.run",
            return_value=_completed(returncode=1, stderr="connection refused"),
        ):
            with pytest.raises(ReleaseLookupError, match="connection refused"):
                list_release_versions("app1", OPTIONS, KUBE)

    def test_bad_version_label_raises_lookup_error(self):
        payload = json.dumps({"items": [{"metadata": {"name": "app1.vx", "labels": {"VERSION": "x"}}}]})
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(payload)):
            with pytest.raises(ReleaseLookupError, match="invalid VERSION label"):
                list_release_versions("app1", OPTIONS, KUBE)


class TestDeleteAllReleaseVersions:
    """Tests for delete_all_release_versions"""

    def test_single_bulk_request(self):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed()) as run:
            delete_all_release_versions(OPTIONS, KUBE, dry_run=False)
        run.assert_called_once()
        assert run.call_args[0][0] == ["kubectl", "delete", "configmaps", "-n", "kube-system", "-l", "OWNER=TILLER"]

    def test_dry_run_makes_no_call(self, caplog):
        caplog.set_level(logging.INFO)
        with patch("helm2_cleanup.kube.subprocess.run") as run:
            delete_all_release_versions(OPTIONS, KUBE, dry_run=True)
        run.assert_not_called()
        assert "will be deleted" in caplog.text

    def test_failure_raises_deletion_error(self):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(returncode=1, stderr="forbidden")):
            with pytest.raises(DeletionError, match="release data"):
                delete_all_release_versions(OPTIONS, KUBE, dry_run=False)


class TestDeleteReleaseVersions:
    """Tests for delete_release_versions"""

    def test_deletes_named_versions_in_one_request(self, caplog):
        caplog.set_level(logging.INFO)
        secrets = RetrieveOptions(tiller_namespace="tiller", storage_type="secrets")
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed()) as run:
            delete_release_versions("app1", {3, 1, 2}, secrets, KUBE, dry_run=False)
        assert run.call_args[0][0] == [
            "kubectl",
            "delete",
            "secrets",
            "-n",
            "tiller",
            "app1.v1",
            "app1.v2",
            "app1.v3",
        ]
        assert '[Helm 2] ReleaseVersion "app1.v2" deleted.' in caplog.text

    def test_empty_set_makes_no_call(self):
        with patch("helm2_cleanup.kube.subprocess.run") as run:
            delete_release_versions("app1", set(), OPTIONS, KUBE, dry_run=False)
        run.assert_not_called()

    def test_dry_run_only_reports(self, caplog):
        caplog.set_level(logging.INFO)
        with patch("helm2_cleanup.kube.subprocess.run") as run:
            delete_release_versions("app1", [1, 2], OPTIONS, KUBE, dry_run=True)
        run.assert_not_called()
        assert '[Helm 2] ReleaseVersion "app1.v1" will be deleted.' in caplog.text
        assert "deleted." not in caplog.text.replace("will be deleted.", "")

    def test_failure_names_the_release(self):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(returncode=1, stderr="nope")):
            with pytest.raises(DeletionError, match="release 'app1' data"):
                delete_release_versions("app1", [1], OPTIONS, KUBE, dry_run=False)


class TestMalformedListing:
    """Tests for listings that do not have the expected shape"""

    @pytest.mark.parametrize(
        "payload",
        [[], {"items": {}}, {"items": ["app1.v1"]}, {"items": [{"metadata": None}]}],
    )
    def test_malformed_listing_raises_lookup_error(self, payload):
        with patch("helm2_cleanup.kube.subprocess.run", return_value=_completed(json.dumps(payload))):
            with pytest.raises(ReleaseLookupError):
                list_release_versions("app1", OPTIONS, KUBE)

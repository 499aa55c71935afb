"""Removal of the local Helm v2 home directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .exceptions import DeletionError


def remove_home_folder(helm_home: Path, dry_run: bool):
    """Delete the Helm v2 home directory; a missing directory counts as removed."""
    logging.info('[Helm 2] Home folder "%s" will be deleted.', helm_home)
    if dry_run:
        return
    if not helm_home.exists() and not helm_home.is_symlink():
        logging.info('[Helm 2] Home folder "%s" does not exist, nothing to delete.', helm_home)
        return
    try:
        if helm_home.is_symlink() or helm_home.is_file():
            helm_home.unlink()
        else:
            shutil.rmtree(helm_home)
    except OSError as exc:
        raise DeletionError(f'Helm v2 home folder "{helm_home}"', str(exc)) from exc
    logging.info('[Helm 2] Home folder "%s" deleted.', helm_home)

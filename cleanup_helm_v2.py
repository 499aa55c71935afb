#!/usr/bin/env python3
"""
Cleanup Helm v2 configuration, release data and the Tiller deployment.

Helm v2 is not usable afterwards unless the cleanup is scoped to a single
release with --name.

This is a thin wrapper around the helm2_cleanup package.
"""
from __future__ import annotations

from helm2_cleanup.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""natspec_py.version — version string for the package and the CLI.

Lookup order: NATSPEC_PY_VERSION, installed distribution metadata, then
BASE_VERSION with a git-describe local segment when run from a checkout.
"""

from __future__ import annotations

import os
import re
import subprocess
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Optional

# Bump whenever an output format (ABI, interface text, userdoc, devdoc) changes.
BASE_VERSION = "0.1.0"

DIST_NAME = "natspec-py"


def _local_segment(describe: str) -> str:
    # 'v0.1.0-3-gabc1234-dirty' -> '0.1.0.3.gabc1234.dirty'
    cleaned = re.sub(r"[^A-Za-z0-9]+", ".", describe.strip().lstrip("v"))
    return cleaned.strip(".")


@lru_cache(maxsize=1)
def git_describe() -> Optional[str]:
    """`git describe --tags --dirty --always` for the source checkout, if any."""
    try:
        proc = subprocess.run(
            ["git", "describe", "--tags", "--dirty", "--always"],
            cwd=Path(__file__).resolve().parent,
            capture_output=True,
            text=True,
            timeout=1.5,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


@lru_cache(maxsize=1)
def compute_version() -> str:
    override = os.getenv("NATSPEC_PY_VERSION")
    if override:
        return override
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        pass
    describe = git_describe()
    if describe:
        return f"{BASE_VERSION}+{_local_segment(describe)}"
    return f"{BASE_VERSION}+dev"


__version__ = compute_version()

__all__ = ["__version__", "BASE_VERSION", "DIST_NAME", "git_describe", "compute_version"]

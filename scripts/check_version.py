#!/usr/bin/env python
"""Verify that the pyproject.toml version matches a release tag.

Run before publishing:
    python scripts/check_version.py v0.1.0
"""

import argparse
import sys
import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def project_version(pyproject: Path = PYPROJECT) -> str:
    with pyproject.open("rb") as f:
        return tomllib.load(f)["project"]["version"]


def check_release_version(tag: str, pyproject: Path = PYPROJECT) -> bool:
    """Return True when ``tag`` is ``v`` followed by the manifest version."""
    return tag == f"v{project_version(pyproject)}"


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("tag", help="Release tag, e.g. v0.1.0")
    parser.add_argument("--pyproject", type=Path, default=PYPROJECT)
    args = parser.parse_args()

    if not check_release_version(args.tag, args.pyproject):
        version = project_version(args.pyproject)
        print(
            f"Version mismatch: pyproject.toml version is {version}, "
            f"but release tag is {args.tag}"
        )
        return 1

    print(f"Version {args.tag} OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())

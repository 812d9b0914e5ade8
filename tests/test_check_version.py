"""Tests for the release version check script."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_version.py"


@pytest.fixture
def check_version():
    spec = importlib.util.spec_from_file_location("check_version", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def pyproject(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "bitvavo-api"\nversion = "1.2.3"\n')
    return path


def test_matching_tag(check_version, pyproject):
    assert check_version.check_release_version("v1.2.3", pyproject) is True


@pytest.mark.parametrize("tag", ["1.2.3", "v1.2.4", "v1.2.3-rc1"])
def test_mismatching_tag(check_version, pyproject, tag):
    assert check_version.check_release_version(tag, pyproject) is False


def test_repository_version_matches_package(check_version):
    import bitvavo_api

    assert check_version.project_version() == bitvavo_api.__version__

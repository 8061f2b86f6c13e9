"""Tests that `pyproject.toml` and `src/cecgen/meta.py` agree, and meta constants."""

import importlib.util
import tomllib

import pytest
from anyio import Path

from cecgen import VERSION
from cecgen.meta import OPEN_TEXT_OPTIONS, SIGNATURE_FORMAT, SIGNATURE_REGEX

__all__ = ()


@pytest.mark.asyncio
async def test_pyproject_and_meta_version_match():
    """Ensure [project].version in pyproject.toml equals `src/cecgen/meta.py::VERSION`."""
    pyproject_text = await Path("pyproject.toml").read_text(encoding="utf-8")
    pyproject = tomllib.loads(pyproject_text)
    assert "project" in pyproject and "version" in pyproject["project"], (
        "pyproject.toml is missing [project].version"
    )
    py_version = pyproject["project"]["version"]

    meta_path = Path("src/cecgen/meta.py")
    spec = importlib.util.spec_from_file_location("cecgen.meta", meta_path)
    assert spec is not None and spec.loader is not None, (
        f"Could not load module from {meta_path}"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    assert module.VERSION == py_version == VERSION


def test_open_text_options_shape():
    """OPEN_TEXT_OPTIONS exposes a mapping suitable for file open calls."""
    assert isinstance(OPEN_TEXT_OPTIONS, dict)
    assert OPEN_TEXT_OPTIONS["encoding"] == "UTF-8"


def test_signature_regex_matches_format():
    """The signature format round-trips through its regular expression."""
    line = SIGNATURE_FORMAT.format(version="cecgen v1", now="Mon Oct 19 12:00:00 2026")
    match = SIGNATURE_REGEX.match(line)
    assert match is not None
    assert match.groups() == ("cecgen v1", "Mon Oct 19 12:00:00 2026")

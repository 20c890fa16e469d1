"""Tests for package metadata and structure."""

import re
from pathlib import Path

import optconf

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def _project_version():
    match = re.search(r'^version\s*=\s*"([^"]+)"', PYPROJECT.read_text(), re.MULTILINE)
    assert match, "no version line in pyproject.toml"
    return match.group(1)


def test_version_is_dotted_release():
    assert re.fullmatch(r"\d+\.\d+\.\d+", optconf.__version__)


def test_version_agrees_with_project_metadata():
    assert optconf.__version__ == _project_version()


def test_all_names_exported():
    missing = [name for name in optconf.__all__ if not hasattr(optconf, name)]
    assert missing == []


def test_public_api():
    """Ensure expected public API is exported."""
    expected = {"OptionParser", "OptionRegistry", "dump", "dumps", "load", "loads"}
    actual = {name for name in dir(optconf) if not name.startswith("_")}

    assert expected <= actual


def test_errors_share_base():
    for name in (
        "DuplicateOptionError",
        "UnknownOptionError",
        "MalformedArgumentError",
        "InsufficientArgumentsError",
        "MissingArgumentError",
        "ConversionError",
        "ConfigFileError",
    ):
        assert issubclass(getattr(optconf, name), optconf.OptionError)

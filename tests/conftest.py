"""Shared test fixtures for optconf."""

import io

import pytest
from rich.console import Console

from optconf import OptionParser, Polarity


@pytest.fixture
def output():
    """Buffer receiving everything the parser prints."""
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(file=output, width=200, highlight=False)


@pytest.fixture
def parser(console):
    """Parser whose user options all have defaults."""
    parser = OptionParser(console=console)
    parser.insert_option("count", 1, "How many times", default="1")
    parser.insert_option("range", 2, "Lower and upper bound", default="1,10")
    parser.insert_option_boolean("verbose", Polarity.STORE_TRUE, "Talk more")
    parser.insert_option_boolean("cache", Polarity.STORE_FALSE, "Disable the cache")
    return parser


@pytest.fixture
def required_parser(console):
    """Parser with an option that must be supplied."""
    parser = OptionParser(console=console)
    parser.insert_option("name", 1, "Run name")
    parser.insert_option("count", 1, "How many times", default="1")
    return parser


@pytest.fixture
def write_config(tmp_path):
    """Write configuration text to a file and return its path."""

    def _write(text, name="settings.cfg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write

"""Shared test fixtures for xyc tests."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


YANG_SAMPLE = "// header\n\nleaf foo { type string; }\n/* trailing */\n"

XML_SAMPLE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<!-- interface config -->\n"
    "<config>\n"
    "\n"
    "  <interface>eth0</interface> <!-- uplink -->\n"
    "</config>\n"
)


def write(root: Path, name: str, content: str) -> Path:
    p = root / name
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8", newline="")
    return p


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``name`` under tmp_path byte-for-byte."""

    def _write_file(name: str, content: str) -> Path:
        return write(tmp_path, name, content)

    return _write_file


@pytest.fixture
def schema_tree(tmp_path):
    """Directory with XML and YANG files at the top level and one level down.

    Layout:
        a.yang          4 lines, 2 comments, 1 blank
        b.xml           6 lines, 2 comments, 1 blank
        notes.txt       ignored
        sub/c.XML       1 line, 1 comment
        sub/deep/d.yang 2 lines
    """
    write(tmp_path, "a.yang", YANG_SAMPLE)
    write(tmp_path, "b.xml", XML_SAMPLE)
    write(tmp_path, "notes.txt", "not counted\n")
    write(tmp_path, "sub/c.XML", "<!-- note -->")
    write(tmp_path, "sub/deep/d.yang", "module d {\n}\n")
    return tmp_path

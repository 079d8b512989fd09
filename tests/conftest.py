"""Shared test fixtures for the devgate test suite."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from devgate.core.config import get_settings
from devgate.core.dependencies import get_analyzer, get_github_client


@pytest.fixture(autouse=True)
def clear_cached_services():
    """Rebuild settings and services for every test."""
    get_settings.cache_clear()
    get_analyzer.cache_clear()
    get_github_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_analyzer.cache_clear()
    get_github_client.cache_clear()


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small tree for listing and name-search tests."""
    (tmp_path / "foo.py").write_text("import os\n")
    (tmp_path / "bar.txt").write_text("just text\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "foo2.py").write_text("x = 1\n")
    (sub / "README.md").write_text("# sub\n")
    deep = sub / "Foo_dir"
    deep.mkdir()
    (deep / "inner.txt").write_text("inner\n")
    return tmp_path


@pytest.fixture
def sample_file(tmp_path):
    """Create a small Python file for read and fix tests."""
    f = tmp_path / "sample.py"
    f.write_text("a=1\nb=2")
    return f


@pytest.fixture
def empty_dir(tmp_path):
    """Create an empty directory for edge-case tests."""
    d = tmp_path / "empty"
    d.mkdir()
    return d


@pytest.fixture
def pyright_output():
    """A representative `pyright --outputjson` document."""
    return {
        "version": "1.1.380",
        "time": "1718000000000",
        "generalDiagnostics": [
            {
                "file": "/proj/main.py",
                "severity": "error",
                "message": 'Import "missing" could not be resolved',
                "range": {
                    "start": {"line": 0, "character": 7},
                    "end": {"line": 0, "character": 14},
                },
                "rule": "reportMissingImports",
            },
            {
                "file": "/proj/main.py",
                "severity": "warning",
                "message": "Variable is not accessed",
                "range": {
                    "start": {"line": 4, "character": 0},
                    "end": {"line": 4, "character": 3},
                },
            },
            {
                "file": "/proj/util.py",
                "severity": "information",
                "message": "Consider a type annotation",
                "range": {
                    "start": {"line": 9, "character": 2},
                    "end": {"line": 9, "character": 5},
                },
            },
        ],
        "summary": {
            "filesAnalyzed": 2,
            "errorCount": 1,
            "warningCount": 1,
            "informationCount": 1,
            "timeInSec": 0.42,
        },
    }


@pytest.fixture
def clean_pyright_output():
    """Pyright output for a file with no findings."""
    return {
        "version": "1.1.380",
        "generalDiagnostics": [],
        "summary": {
            "filesAnalyzed": 1,
            "errorCount": 0,
            "warningCount": 0,
            "informationCount": 0,
            "timeInSec": 0.1,
        },
    }


def make_process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
    """Build a stand-in for an asyncio subprocess."""
    process = MagicMock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.wait = AsyncMock(return_value=returncode)
    process.returncode = returncode
    return process


@pytest.fixture
def process_factory():
    return make_process


@pytest.fixture
def encode_json():
    return lambda data: json.dumps(data).encode("utf-8")

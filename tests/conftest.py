"""Pytest configuration and fixtures for tika-pipeline tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest

from tika_pipeline.core.config import TikaConfig
from tika_pipeline.core.logging import set_log_level
from tika_pipeline.extraction.runner import ProcessResult, ProcessRunner


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    set_log_level("DEBUG")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def tika_config() -> TikaConfig:
    """Tika configuration with explicit binary paths."""
    return TikaConfig(
        java_binary_path="/usr/bin/java",
        tika_binary_path="/opt/tika/tika-app.jar",
    )


@pytest.fixture
def sample_xhtml() -> str:
    """XHTML output as printed by ``tika --xml``."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<head>
<meta name="Content-Type" content="application/pdf"/>
<meta name="keyword" content="foo"/>
<meta name="keyword" content="bar"/>
<title>Sample</title>
</head>
<body>Hello <b>World</b></body>
</html>"""


@pytest.fixture
def sample_json() -> str:
    """JSON output as printed by ``tika --json``."""
    return '{"title":"A","author":["X","Y"]}'


@pytest.fixture
def make_runner():
    """Build a mock process runner answering each call with the given results."""

    def _make_runner(*results: ProcessResult) -> Mock:
        runner = Mock(spec=ProcessRunner)
        runner.run.side_effect = list(results)
        return runner

    return _make_runner


"""Shared fixtures for pipeline tests."""

import os
import sys

import pytest

# Ensure tests/pipeline/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "tests/pipeline/" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def runner():
    return FakeCommandRunner()

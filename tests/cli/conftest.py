import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "pipeline"))


def pytest_collection_modifyitems(items):
    for item in items:
        if "tests/cli/" in str(item.fspath).replace("\\", "/"):
            item.add_marker(pytest.mark.unit)

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast deterministic tests")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    _ = config
    for item in items:
        parts = Path(str(item.path)).parts
        if "tests" in parts and "unit" in parts:
            item.add_marker(pytest.mark.unit)

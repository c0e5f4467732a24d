from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # limit_memory is only registered when pytest-memray is installed
    if not config.pluginmanager.hasplugin("memray"):
        config.addinivalue_line(
            "markers", "limit_memory(limit): memory ceiling checked by pytest-memray"
        )


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    bench_dir = Path(__file__).parent
    for item in items:
        if item.path.is_relative_to(bench_dir):
            item.add_marker(pytest.mark.benchmark)

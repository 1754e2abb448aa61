import os
import pytest


def pytest_runtest_setup(item):
    if item.get_closest_marker("pyqt_required"):
        if not os.getenv("PYQT_TESTS"):
            pytest.skip("PYQT_TESTS not set; skipping PyQt-dependent test")


@pytest.fixture(autouse=True)
def _clear_tooltip_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("TOOLTIP_KIT_"):
            monkeypatch.delenv(key, raising=False)

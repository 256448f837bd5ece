from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from PyQt5.QtWidgets import QApplication

from gaussiantrack import config
from gaussiantrack.plugin.window_slot import WindowSlot, analysis_window_slot
from tests.fakes import FakeWindow


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.setQuitOnLastWindowClosed(False)
    return app


@pytest.fixture
def slot() -> WindowSlot:
    return WindowSlot("test")


@pytest.fixture
def fake_factory(slot: WindowSlot):
    FakeWindow.instances = []
    return lambda: FakeWindow(slot)


@pytest.fixture(autouse=True)
def _isolate_globals():
    saved = dict(config.con_dict)
    yield
    config.con_dict.clear()
    config.con_dict.update(saved)
    held = analysis_window_slot.release()
    if held is not None and hasattr(held, "dispose"):
        held.dispose()

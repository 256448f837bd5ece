from __future__ import annotations

import pytest

from gaussiantrack.host import ShutdownCommencingEvent, Studio
from gaussiantrack.main import HostMainWindow, _parse_args
from gaussiantrack.plugin import GaussianTrackPlugin, analysis_window_slot

pytestmark = pytest.mark.usefixtures("qapp")


def test_builtin_plugin_is_loaded_and_listed() -> None:
    win = HostMainWindow(discover=False)

    assert [p.get_name() for p in win.studio.plugins()] == ["Localization Microscopy"]
    assert "Localization Microscopy" in win.plugin_actions
    assert win.studio.events().handler_count(ShutdownCommencingEvent) == 1


def test_preloaded_studio_plugin_is_not_loaded_twice() -> None:
    studio = Studio()
    plugin = studio.load_plugin(GaussianTrackPlugin())

    win = HostMainWindow(studio=studio, discover=False)

    assert win.studio.plugins() == [plugin]


def test_menu_action_opens_window_and_closing_host_disposes_it() -> None:
    win = HostMainWindow(discover=False)
    win.show()
    win.plugin_actions["Localization Microscopy"].trigger()
    analysis = analysis_window_slot.current
    assert analysis is not None and analysis.isVisible()

    win.close()

    assert win.studio.is_shut_down
    assert analysis.is_disposed
    assert analysis_window_slot.is_open is False


def test_parse_args_defaults() -> None:
    args = _parse_args([])
    assert args.standalone is False
    assert args.no_discover is False
    assert args.log_level == "INFO"
    assert _parse_args(["--standalone"]).standalone is True

from __future__ import annotations

import logging

import pytest
from PyQt5.QtWidgets import QMenuBar

from gaussiantrack import config
from gaussiantrack.host import install_plugin_menu, plugin_menu
from gaussiantrack.plugin import GaussianTrackPlugin, WindowSlot
from tests.fakes import FakeWindow

pytestmark = pytest.mark.usefixtures("qapp")


def _child_menu(parent, title):
    for action in parent.actions():
        if action.menu() is not None and action.menu().title() == title:
            return action.menu()
    return None


def test_action_nested_under_plugins_and_submenu(slot: WindowSlot, fake_factory) -> None:
    menubar = QMenuBar()
    plugin = GaussianTrackPlugin(window_factory=fake_factory, slot=slot)

    action = install_plugin_menu(menubar, plugin)

    plugins = _child_menu(menubar, "Plugins")
    tools = _child_menu(plugins, "Acquisition Tools")
    assert tools is not None
    assert action in tools.actions()
    assert action.text() == "Localization Microscopy"
    assert action.toolTip() == "Toolbox for analyzing spots using Gaussian fitting"


def test_triggering_action_opens_window(slot: WindowSlot, fake_factory) -> None:
    menubar = QMenuBar()
    plugin = GaussianTrackPlugin(window_factory=fake_factory, slot=slot)
    action = install_plugin_menu(menubar, plugin)

    action.trigger()
    action.trigger()

    assert len(FakeWindow.instances) == 1
    assert slot.current is plugin.window


def test_submenus_are_shared_and_split_on_slash() -> None:
    class _Plugin:
        def __init__(self, name: str, sub_menu: str) -> None:
            self._name, self._sub_menu = name, sub_menu

        def get_name(self) -> str:
            return self._name

        def get_sub_menu(self) -> str:
            return self._sub_menu

        def get_tooltip(self) -> str:
            return ""

        def on_plugin_selected(self) -> None:
            return None

    menubar = QMenuBar()
    install_plugin_menu(menubar, _Plugin("A", "Analysis/Spots"))
    install_plugin_menu(menubar, _Plugin("B", "Analysis / Spots"))

    analysis = _child_menu(plugin_menu(menubar), "Analysis")
    spots = _child_menu(analysis, "Spots")
    assert [a.text() for a in spots.actions()] == ["A", "B"]
    assert len([a for a in menubar.actions() if a.menu() is not None]) == 1


def test_plugins_menu_title_from_config() -> None:
    config.set_value("plugins_menu_title", "Tools")
    menubar = QMenuBar()
    assert plugin_menu(menubar).title() == "Tools"


def test_failing_plugin_is_logged(caplog: pytest.LogCaptureFixture, slot: WindowSlot) -> None:
    def factory() -> FakeWindow:
        raise RuntimeError("no display")

    menubar = QMenuBar()
    action = install_plugin_menu(menubar, GaussianTrackPlugin(window_factory=factory, slot=slot))

    with caplog.at_level(logging.ERROR, logger="gaussiantrack.host.menus"):
        action.trigger()

    assert "failed to open" in caplog.text
    assert slot.is_open is False

"""
Entry point and host window for GaussianTrack.

This module defines `HostMainWindow`, a small host application that loads menu
plugins into a `Studio`, lists them in its Plugins menu and broadcasts the
shutdown notification when it closes. The built-in plugin is the Gaussian
spot-fitting tool (`GaussianTrackPlugin`); further plugins are discovered
through the ``gaussiantrack.menu_plugins`` entry-point group.

Run this module directly via:

    python -m gaussiantrack

or, to open the spot-fitting window without the host shell:

    python -m gaussiantrack --standalone
"""
import argparse
import logging
import sys

from PyQt5.QtWidgets import (
    QAction,
    QApplication,
    QLabel,
    QMainWindow,
)

from . import config
from .host import PluginLoadError, Studio, install_plugin_menu
from .logging_config import setup_logging
from .plugin import GaussianTrackPlugin
from .ui import AutoSettingsDialog, busy_cursor

logger = logging.getLogger(__name__)


class HostMainWindow(QMainWindow):
    """
    Main window that:
      - Owns the Studio (event channel + loaded plugins)
      - Lists every loaded plugin in the Plugins menu
      - Broadcasts ShutdownCommencingEvent when it is closed
    """
    def __init__(self, studio=None, discover=True, parent=None):
        super().__init__(parent)

        self.setWindowTitle(config.get_value("host_title"))
        self.resize(640, 200)

        self.studio = studio if studio is not None else Studio()
        self.plugin_actions: dict[str, QAction] = {}

        label = QLabel("Choose a tool from the Plugins menu.", self)
        label.setMargin(16)
        self.setCentralWidget(label)

        # ===== File menu
        file_menu = self.menuBar().addMenu("File")
        self.settings_act = QAction("Settings", self)
        self.settings_act.triggered.connect(self.on_settings)
        file_menu.addAction(self.settings_act)
        file_menu.addSeparator()
        self.quit_act = QAction("Quit", self)
        self.quit_act.setShortcut("Ctrl+Q")
        self.quit_act.triggered.connect(self.close)
        file_menu.addAction(self.quit_act)

        with busy_cursor("Loading plugins....", self):
            self._load_plugins(discover)

        self.statusBar().showMessage(f"{len(self.plugin_actions)} plugin(s) loaded.")

    # =============== Plugin loading ====================
    def _load_plugins(self, discover):
        builtin = GaussianTrackPlugin()
        if self.studio.get_plugin(builtin.get_name()) is None:
            self.studio.load_plugin(builtin)
        if discover:
            try:
                self.studio.discover_plugins()
            except PluginLoadError:
                logger.error("Plugin discovery failed", exc_info=True)
        for plugin in self.studio.plugins():
            self.add_plugin(plugin)

    def add_plugin(self, plugin):
        name = plugin.get_name()
        if name in self.plugin_actions:
            return self.plugin_actions[name]
        act = install_plugin_menu(self.menuBar(), plugin)
        self.plugin_actions[name] = act
        return act

    # =============== Global actions ====================
    def on_settings(self):
        dlg = AutoSettingsDialog(self)
        if dlg.exec_():
            self.setWindowTitle(config.get_value("host_title"))
            self.statusBar().showMessage("Settings updated.", 3000)

    def closeEvent(self, event):
        """Give every plugin the chance to release its windows before the host goes away."""
        self.studio.shutdown(reason="host window closed")
        event.accept()


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="gaussiantrack",
        description="Host shell for the Gaussian spot-fitting plugin.",
    )
    parser.add_argument(
        "--standalone",
        action="store_true",
        help="Open the spot-fitting window directly, without the host shell",
    )
    parser.add_argument(
        "--no-discover",
        action="store_true",
        help="Only load the built-in plugin; skip entry-point discovery",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--log-file", default=None, help="Optional log file path")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO), args.log_file)

    app = QApplication(sys.argv)
    if args.standalone:
        plugin = GaussianTrackPlugin()
        app.aboutToQuit.connect(plugin.dispose)
        plugin.run("")
    else:
        win = HostMainWindow(discover=not args.no_discover)
        win.show()
    sys.exit(app.exec())

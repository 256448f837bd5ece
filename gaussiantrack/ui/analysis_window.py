"""
Standalone window hosting the spot-fitting tool.

The window reports its own open/close transitions to the process-wide
`analysis_window_slot`, so the plugin controller can tell whether an instance
is already on screen. Fitting itself is provided elsewhere; this window only
presents the tool's metadata and help text.
"""
import logging

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import (
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from .. import config
from ..plugin.window_slot import analysis_window_slot
from .util_windows import InfoTable

logger = logging.getLogger(__name__)


class AnalysisWindow(QMainWindow):
    """
    Single-instance tool window.

    Emits
    -----
    opened()
        `form_window_opened` marked the window open.
    closed()
        The user closed the window.
    disposed()
        `dispose` released the window; emitted once.
    """

    opened = pyqtSignal()
    closed = pyqtSignal()
    disposed = pyqtSignal()

    def __init__(self, parent=None, metadata=None, slot=None):
        super().__init__(parent)
        self._slot = slot if slot is not None else analysis_window_slot
        self._disposed = False

        self.setWindowTitle(config.get_value("window_title"))
        self.resize(config.get_value("window_width"), config.get_value("window_height"))

        # ----- central widget / layout
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        self.setCentralWidget(central)

        metadata = dict(metadata or {})
        self.help_label = QLabel(metadata.pop("Help", ""), central)
        self.help_label.setWordWrap(True)
        layout.addWidget(self.help_label)

        self.info = InfoTable(central)
        self.info.set_from_dict(metadata)
        layout.addWidget(self.info, 1)

        self.statusBar().showMessage("Ready.")

    # ------------------------------------------------------------------ API

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_open(self) -> bool:
        return self._slot.current is self

    def form_window_opened(self):
        """Mark this window as the open instance; safe to call repeatedly."""
        if self._disposed:
            return
        if not self._slot.claim(self):
            logger.warning("Another analysis window is already open; not claiming the slot")
            return
        self.opened.emit()

    def to_front(self):
        self.raise_()
        self.activateWindow()

    def dispose(self):
        """Release the slot, close and schedule deletion. Later calls do nothing."""
        if self._disposed:
            return
        self._disposed = True
        self._slot.release(self)
        self.close()
        self.deleteLater()
        logger.info("Analysis window disposed")
        self.disposed.emit()

    # ------------------------------------------------------------------ internals

    def closeEvent(self, event):
        """
        Release the slot so the next invocation builds a fresh window.

        Does NOT quit the host application.
        """
        if self._slot.release(self) is not None:
            logger.info("Analysis window closed by user")
            self.closed.emit()
        event.accept()

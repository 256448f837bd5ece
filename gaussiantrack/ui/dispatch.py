"""
Marshals callables onto the thread that owns the Qt widgets.

Window teardown may be requested from a host event thread; Qt widgets may only
be touched on the GUI thread. `GuiDispatcher.call` runs the callable directly
when already on the GUI thread and otherwise queues it through a signal whose
receiver lives on the GUI thread.
"""
import logging
import threading

from PyQt5.QtCore import QObject, Qt, pyqtSignal, pyqtSlot

logger = logging.getLogger(__name__)


class GuiDispatcher(QObject):
    """Create on the GUI thread; `call` is then safe from any thread."""

    _invoke = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._gui_ident = threading.get_ident()
        self._invoke.connect(self._run, Qt.QueuedConnection)

    def on_gui_thread(self) -> bool:
        return threading.get_ident() == self._gui_ident

    def call(self, func):
        """Run `func` now if on the GUI thread, else queue it. Returns True if it ran now."""
        if self.on_gui_thread():
            func()
            return True
        logger.debug(f"Queueing {getattr(func, '__qualname__', func)!r} onto the GUI thread")
        self._invoke.emit(func)
        return False

    @pyqtSlot(object)
    def _run(self, func):
        func()

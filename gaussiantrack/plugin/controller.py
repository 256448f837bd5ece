"""
Menu plugin that opens the Gaussian spot-fitting tool.

`GaussianTrackPlugin` is what the host loads: it supplies the menu metadata,
subscribes to the host's shutdown notification and guarantees that however
often the menu entry is chosen, only one Analysis Window exists. The window
itself is built lazily on the first invocation and reused until it is closed
or disposed.

The controller satisfies the `Runnable`, `MenuRegistrable` and
`EventSubscriber` capabilities structurally; see `capabilities`.
"""
import logging
import threading

from ..host.events import ShutdownCommencingEvent
from ..ui.dispatch import GuiDispatcher
from .window_slot import analysis_window_slot

logger = logging.getLogger(__name__)


class GaussianTrackPlugin:
    """
    Lifecycle controller for the Analysis Window.

    Parameters
    ----------
    window_factory : callable, optional
        Zero-argument callable returning a new window. Defaults to building an
        `AnalysisWindow` bound to `slot`.
    slot : WindowSlot, optional
        Window slot shared with other controllers. Defaults to the
        process-wide `analysis_window_slot`.
    """

    MENUNAME = "Localization Microscopy"
    SUBMENU = "Acquisition Tools"
    TOOLTIPDESCRIPTION = "Toolbox for analyzing spots using Gaussian fitting"
    HELPTEXT = "Gaussian Fitting Plugin"
    VERSION = "0.32"
    COPYRIGHT = "University of California, 2010-2014"

    def __init__(self, window_factory=None, slot=None):
        self._window_factory = window_factory
        self._slot = slot if slot is not None else analysis_window_slot
        self._lock = threading.RLock()
        self._form = None
        self._events = None
        self._subscribed = False
        self._dispatcher = None

    # =============== Metadata ====================

    def get_name(self) -> str:
        return self.MENUNAME

    def get_sub_menu(self) -> str:
        return self.SUBMENU

    def get_tooltip(self) -> str:
        return self.TOOLTIPDESCRIPTION

    def get_help_text(self) -> str:
        return self.HELPTEXT

    def get_version(self) -> str:
        return self.VERSION

    def get_copyright(self) -> str:
        return self.COPYRIGHT

    def metadata(self) -> dict:
        return {
            "Name": self.get_name(),
            "Menu": self.get_sub_menu(),
            "Description": self.get_tooltip(),
            "Version": self.get_version(),
            "Copyright": self.get_copyright(),
            "Help": self.get_help_text(),
        }

    @property
    def window(self):
        with self._lock:
            return self._form

    # =============== Lifecycle ====================

    def run(self, argument: str = ""):
        """Show the Analysis Window, building it first if none is open."""
        if argument:
            logger.debug(f"Ignoring run argument {argument!r}")
        with self._lock:
            if self._dispatcher is None:
                self._dispatcher = GuiDispatcher()
            form, created = self._slot.acquire_or_reuse(self._build_window)
            previous, self._form = self._form, form
            self._subscribe()
            if created:
                logger.info(f"Created {self.MENUNAME} window")
                # a window this controller held earlier was closed by the user
                if previous is not None and previous is not form:
                    previous.dispose()
            form.setVisible(True)
            form.form_window_opened()
            form.to_front()

    def on_plugin_selected(self):
        self.run("")

    def set_context(self, host):
        """Register for the host's shutdown notification; the host is not retained."""
        events = host.events()
        with self._lock:
            if self._events is not None and self._events is not events:
                self._unsubscribe()
            self._events = events
            self._subscribe()

    def dispose(self):
        """Release and dispose the owned window, if any, and drop the shutdown subscription."""
        with self._lock:
            self._unsubscribe()
            form, self._form = self._form, None
            if form is None:
                logger.debug("dispose: no window owned")
                return
            self._slot.release(form)
            dispatcher = self._dispatcher
        if dispatcher is not None:
            dispatcher.call(form.dispose)
        else:
            form.dispose()
        logger.info(f"Disposed {self.MENUNAME} window")

    def close_requested(self, event):
        self.dispose()

    # =============== internals ====================

    def _build_window(self):
        if self._window_factory is not None:
            return self._window_factory()
        from ..ui.analysis_window import AnalysisWindow

        return AnalysisWindow(metadata=self.metadata(), slot=self._slot)

    def _subscribe(self):
        if self._events is None or self._subscribed:
            return
        self._events.subscribe(ShutdownCommencingEvent, self.close_requested)
        self._subscribed = True

    def _unsubscribe(self):
        if self._events is None or not self._subscribed:
            return
        self._events.unsubscribe(ShutdownCommencingEvent, self.close_requested)
        self._subscribed = False

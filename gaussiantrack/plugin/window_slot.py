"""
Process-wide holder for the single Analysis Window.

`WindowSlot` replaces a bare "window open" flag with a guarded optional
reference: the slot is open exactly when it holds a window. Every controller
and every Analysis Window in the process shares `analysis_window_slot`, which
makes the one-window guarantee global rather than per controller.
"""
import logging
import threading

logger = logging.getLogger(__name__)


class WindowSlot:
    """
    Lock-guarded optional reference to one window.

    Both operations that change the slot are atomic with respect to each
    other, so readers never observe an open slot without a window or a held
    window in a closed slot.
    """

    def __init__(self, name="window"):
        self.name = name
        self._lock = threading.RLock()
        self._window = None

    @property
    def current(self):
        with self._lock:
            return self._window

    @property
    def is_open(self) -> bool:
        with self._lock:
            return self._window is not None

    def acquire_or_reuse(self, factory):
        """
        Return the held window, building one with `factory` if the slot is empty.

        Returns
        -------
        tuple
            ``(window, created)`` where `created` is True only when `factory`
            ran. The factory runs under the slot lock; if it raises, the slot
            stays empty and the exception propagates.
        """
        with self._lock:
            if self._window is not None:
                return self._window, False
            window = factory()
            self._window = window
            logger.debug(f"{self.name} slot filled by {type(window).__name__}")
            return window, True

    def claim(self, window) -> bool:
        """Store `window` if the slot is empty. Returns True if it now holds `window`."""
        with self._lock:
            if self._window is None:
                self._window = window
                logger.debug(f"{self.name} slot claimed by {type(window).__name__}")
            return self._window is window

    def release(self, window=None):
        """
        Empty the slot.

        With `window` given, the slot is only emptied if it still holds that
        exact object, so a stale owner cannot evict a newer window.
        Returns the released window, or None if nothing was released.
        """
        with self._lock:
            held = self._window
            if held is None:
                return None
            if window is not None and held is not window:
                return None
            self._window = None
        logger.debug(f"{self.name} slot released")
        return held


analysis_window_slot = WindowSlot("analysis window")

"""
GaussianTrack plugin package.

- GaussianTrackPlugin:
    Lifecycle controller the host loads as a menu plugin.
- WindowSlot / analysis_window_slot:
    Process-wide single-window guard.
- Runnable, MenuRegistrable, EventSubscriber:
    Capability interfaces the host checks with ``isinstance``.
"""

from .capabilities import EventSubscriber, MenuRegistrable, Runnable
from .window_slot import WindowSlot, analysis_window_slot
from .controller import GaussianTrackPlugin

__all__ = [
    "GaussianTrackPlugin",
    "WindowSlot",
    "analysis_window_slot",
    "Runnable",
    "MenuRegistrable",
    "EventSubscriber",
]

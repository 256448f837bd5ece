"""
UI module for GaussianTrack.

- AnalysisWindow:
    The single-instance spot-fitting tool window.
- GuiDispatcher:
    Runs callables on the GUI thread when requested from elsewhere.
- AutoSettingsDialog, InfoTable, busy_cursor:
    Small shared widgets and helpers.
"""

from .dispatch import GuiDispatcher
from .util_windows import AutoSettingsDialog, InfoTable, busy_cursor
from .analysis_window import AnalysisWindow

__all__ = [
    "AnalysisWindow",
    "GuiDispatcher",
    "AutoSettingsDialog",
    "InfoTable",
    "busy_cursor",
]

"""
GaussianTrack: host integration for the Gaussian spot-fitting tool.

Packages
--------
plugin
    The menu plugin (`GaussianTrackPlugin`), its capability interfaces and the
    process-wide window slot that keeps the Analysis Window single-instance.
host
    The host side of the contract: event channel, `Studio` context and the
    plugin menu builder.
ui
    Qt widgets: the Analysis Window, the GUI-thread dispatcher and small
    shared dialogues.
"""

__version__ = "0.32"

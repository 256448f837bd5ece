"""
Host side of the plugin contract.

- EventChannel, HostEvent, ShutdownCommencingEvent:
    Publish/subscribe channel handed to plugins through the host context.
- Studio, PluginLoadError:
    Host context that loads, discovers and unloads menu plugins.
- install_plugin_menu:
    Places a plugin's action in the host's Plugins menu.
"""

from .events import EventChannel, HostEvent, ShutdownCommencingEvent
from .studio import PluginLoadError, Studio
from .menus import install_plugin_menu, plugin_menu

__all__ = [
    "EventChannel",
    "HostEvent",
    "ShutdownCommencingEvent",
    "Studio",
    "PluginLoadError",
    "install_plugin_menu",
    "plugin_menu",
]

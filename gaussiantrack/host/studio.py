"""
Host context handed to menu plugins.

`Studio` owns the host's event channel and the set of loaded menu plugins. It
is the object plugins receive in `set_context`, and it drives their teardown:
either one at a time through `unload_plugin`, or all at once by broadcasting
`ShutdownCommencingEvent` from `shutdown`.
"""
from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from .. import config
from ..plugin.capabilities import MenuRegistrable
from .events import EventChannel, ShutdownCommencingEvent

logger = logging.getLogger(__name__)


class PluginLoadError(Exception):
    """Raised when a menu plugin cannot be discovered, loaded or unloaded."""


class Studio:
    """Host application context: event channel plus loaded menu plugins."""

    def __init__(self, events: EventChannel | None = None) -> None:
        self._events = events if events is not None else EventChannel()
        self._plugins: dict[str, MenuRegistrable] = {}
        self._shut_down = False

    def events(self) -> EventChannel:
        return self._events

    @property
    def is_shut_down(self) -> bool:
        return self._shut_down

    def plugins(self) -> list[MenuRegistrable]:
        return list(self._plugins.values())

    def get_plugin(self, name: str) -> MenuRegistrable | None:
        return self._plugins.get(name)

    # Loading ----------------------------------------------------------

    def load_plugin(self, plugin: MenuRegistrable) -> MenuRegistrable:
        if not isinstance(plugin, MenuRegistrable):
            raise PluginLoadError(f"{type(plugin).__name__} is not a menu plugin.")
        name = plugin.get_name()
        if name in self._plugins:
            raise PluginLoadError(f"A plugin named '{name}' is already loaded.")
        plugin.set_context(self)
        self._plugins[name] = plugin
        logger.info(f"Loaded plugin '{name}' v{plugin.get_version()}")
        return plugin

    def discover_plugins(self) -> list[MenuRegistrable]:
        """Instantiate and load every plugin class advertised under the entry-point group."""
        group_name = config.get_value("entry_point_group")
        loaded = []
        for ep in entry_points().select(group=group_name):
            plugin = self._instantiate(ep)
            if plugin.get_name() in self._plugins:
                logger.debug(f"Skipping entry point '{ep.name}': '{plugin.get_name()}' already loaded")
                continue
            loaded.append(self.load_plugin(plugin))
        return loaded

    def _instantiate(self, ep: EntryPoint) -> MenuRegistrable:
        try:
            target = ep.load()
        except ImportError as exc:
            raise PluginLoadError(f"Entry point '{ep.name}' could not be imported: {exc}") from exc
        plugin = target() if isinstance(target, type) else target
        if not isinstance(plugin, MenuRegistrable):
            raise PluginLoadError(
                f"Entry point '{ep.name}' provided {type(plugin).__name__}, which is not a menu plugin."
            )
        return plugin

    # Teardown ---------------------------------------------------------

    def unload_plugin(self, name: str) -> None:
        plugin = self._plugins.pop(name, None)
        if plugin is None:
            raise PluginLoadError(f"Unknown plugin '{name}'.")
        plugin.dispose()
        logger.info(f"Unloaded plugin '{name}'")

    def shutdown(self, reason: str = "") -> None:
        """Broadcast the shutdown notification once; later calls do nothing."""
        if self._shut_down:
            return
        self._shut_down = True
        logger.info("Host shutdown commencing")
        self._events.post(ShutdownCommencingEvent(reason=reason))

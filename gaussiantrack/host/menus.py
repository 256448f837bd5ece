"""
Builds the host's plugin menu from loaded menu plugins.

Each plugin lands under the top-level plugins menu, nested along its submenu
path ("Acquisition Tools" or "Analysis/Spots"), as a single action that calls
the plugin's `on_plugin_selected`.
"""
import logging

from PyQt5.QtWidgets import QAction, QMenu, QMenuBar

from .. import config

logger = logging.getLogger(__name__)


def _find_submenu(parent, title):
    for action in parent.actions():
        menu = action.menu()
        if menu is not None and menu.title() == title:
            return menu
    return None


def _ensure_submenu(parent, title):
    """Return the child menu of `parent` called `title`, creating it if needed."""
    menu = _find_submenu(parent, title)
    if menu is None:
        menu = QMenu(title, parent)
        parent.addMenu(menu)
    return menu


def plugin_menu(menubar: QMenuBar) -> QMenu:
    return _ensure_submenu(menubar, config.get_value("plugins_menu_title"))


def install_plugin_menu(menubar, plugin) -> QAction:
    """
    Add an action for `plugin` to the plugins menu of `menubar`.

    Returns the created QAction; its `triggered` signal runs the plugin.
    Failures raised by the plugin are logged, not re-raised into Qt.
    """
    menu = plugin_menu(menubar)
    for part in plugin.get_sub_menu().split("/"):
        part = part.strip()
        if part:
            menu = _ensure_submenu(menu, part)

    action = QAction(plugin.get_name(), menu)
    tooltip = plugin.get_tooltip()
    if tooltip:
        action.setToolTip(tooltip)
        action.setStatusTip(tooltip)
    action.triggered.connect(lambda _checked=False, p=plugin: _select(p))
    menu.addAction(action)
    logger.debug(f"Installed menu entry for '{plugin.get_name()}' under '{plugin.get_sub_menu()}'")
    return action


def _select(plugin):
    logger.info(f"Menu clicked: {plugin.get_name()}")
    try:
        plugin.on_plugin_selected()
    except Exception:
        logger.error(f"Plugin '{plugin.get_name()}' failed to open", exc_info=True)

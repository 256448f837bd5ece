"""
Global configuration dictionary and default parameters used across GaussianTrack.

Stores window titles and sizes, the host menu layout, and the entry-point group
that the host scans for menu plugins.
"""

con_dict = {
    # analysis window
    "window_title": "Localization Microscopy",
    "window_width": 900,
    "window_height": 700,

    # host shell
    "host_title": "GaussianTrack Host",
    "plugins_menu_title": "Plugins",
    "entry_point_group": "gaussiantrack.menu_plugins",
}


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    # naive cast
    ty = type(con_dict[key])
    con_dict[key] = ty(value)


def get_value(key):
    return con_dict[key]


def get_all():
    return con_dict

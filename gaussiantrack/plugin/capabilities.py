"""
Narrow capability interfaces a host plugin may satisfy.

A plugin class does not inherit from these; it simply provides the methods.
The host checks for a capability with ``isinstance(obj, MenuRegistrable)``
before wiring the object into the corresponding part of the application:

- Runnable:
    Can be executed directly with a string argument, without any host menu.
- MenuRegistrable:
    Provides the fixed metadata the host needs to build a menu entry, accepts
    the host context and reacts to being selected from the menu.
- EventSubscriber:
    Receives the host's shutdown-commencing notification.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Runnable(Protocol):
    def run(self, argument: str = "") -> None: ...


@runtime_checkable
class MenuRegistrable(Protocol):
    def get_name(self) -> str: ...

    def get_sub_menu(self) -> str: ...

    def get_tooltip(self) -> str: ...

    def get_help_text(self) -> str: ...

    def get_version(self) -> str: ...

    def get_copyright(self) -> str: ...

    def set_context(self, host) -> None: ...

    def on_plugin_selected(self) -> None: ...

    def dispose(self) -> None: ...


@runtime_checkable
class EventSubscriber(Protocol):
    def close_requested(self, event) -> None: ...

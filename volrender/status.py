"""Render status notifications: a small publish/subscribe hub."""

from __future__ import annotations

import enum
from collections.abc import Callable

Handler = Callable[..., object]


class Event(enum.Enum):
    """Notifications that a :class:`Status` can send."""

    RENDER_BEGIN = "render_begin"
    RENDER_END = "render_end"
    PRE_RENDER_FRAME = "pre_render_frame"
    POST_RENDER_FRAME = "post_render_frame"
    RENDER_PAUSE = "render_pause"
    RESIZE = "resize"
    LOAD_PRESET = "load_preset"
    STATISTIC_CHANGED = "statistic_changed"


class Status:
    """Dispatches render events to the handlers connected to them.

    Handlers run in the order they were connected. ``RENDER_PAUSE`` handlers
    receive the pause flag, ``LOAD_PRESET`` handlers the preset name and
    ``STATISTIC_CHANGED`` handlers ``(group, name, value, unit, icon)``;
    all other handlers are called without arguments.
    """

    def __init__(self) -> None:
        self._handlers: dict[Event, list[Handler]] = {event: [] for event in Event}

    def connect(self, event: Event | str, handler: Handler) -> None:
        """Call ``handler`` whenever ``event`` is sent."""
        self._handlers[Event(event)].append(handler)

    def disconnect(self, event: Event | str, handler: Handler) -> None:
        """Stop calling ``handler`` for ``event``.

        Raises ValueError when the handler is not connected to that event.
        """
        event = Event(event)
        try:
            self._handlers[event].remove(handler)
        except ValueError:
            raise ValueError(f"handler is not connected to {event.name}") from None

    def _emit(self, event: Event, *args: object) -> None:
        for handler in list(self._handlers[event]):
            handler(*args)

    def set_render_begin(self) -> None:
        """Announce that rendering has started."""
        self._emit(Event.RENDER_BEGIN)

    def set_render_end(self) -> None:
        """Announce that rendering has stopped."""
        self._emit(Event.RENDER_END)

    def set_pre_render_frame(self) -> None:
        """Announce that a frame is about to be rendered."""
        self._emit(Event.PRE_RENDER_FRAME)

    def set_post_render_frame(self) -> None:
        """Announce that a frame has been rendered."""
        self._emit(Event.POST_RENDER_FRAME)

    def set_render_pause(self, pause: bool) -> None:
        """Announce that rendering has been paused or resumed."""
        self._emit(Event.RENDER_PAUSE, pause)

    def set_resize(self) -> None:
        """Announce that the render target has been resized."""
        self._emit(Event.RESIZE)

    def set_load_preset(self, preset_name: str) -> None:
        """Ask for the preset named ``preset_name`` to be loaded."""
        self._emit(Event.LOAD_PRESET, preset_name)

    def set_statistic_changed(
        self, group: str, name: str, value: str, unit: str = "", icon: str = ""
    ) -> None:
        """Announce a new value for the statistic ``name`` in ``group``."""
        self._emit(Event.STATISTIC_CHANGED, group, name, value, unit, icon)


status = Status()
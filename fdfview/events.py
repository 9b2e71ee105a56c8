"""Windows, event hooks and the event loop that feeds them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

KEY_PRESS_MASK = 1 << 0
KEY_RELEASE_MASK = 1 << 1
BUTTON_PRESS_MASK = 1 << 2
BUTTON_RELEASE_MASK = 1 << 3
ENTER_WINDOW_MASK = 1 << 4
LEAVE_WINDOW_MASK = 1 << 5
POINTER_MOTION_MASK = 1 << 6
BUTTON_MOTION_MASK = 1 << 13
KEYMAP_STATE_MASK = 1 << 14
EXPOSURE_MASK = 1 << 15
VISIBILITY_CHANGE_MASK = 1 << 16
STRUCTURE_NOTIFY_MASK = 1 << 17
RESIZE_REDIRECT_MASK = 1 << 18
SUBSTRUCTURE_NOTIFY_MASK = 1 << 19
SUBSTRUCTURE_REDIRECT_MASK = 1 << 20
FOCUS_CHANGE_MASK = 1 << 21
PROPERTY_CHANGE_MASK = 1 << 22
COLORMAP_CHANGE_MASK = 1 << 23

# Mask a freshly created window selects before the loop narrows it.
ALL_EVENTS_MASK = 0xFFFFFF

# Every motion-related bit: PointerMotion, PointerMotionHint, Button1..5Motion, ButtonMotion.
_MOTION_MASKS = sum(1 << bit for bit in range(6, 14))


class EventType(IntEnum):
    """Window system event codes."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36

_SELECTING_MASK: dict[EventType, int] = {
    EventType.KEY_PRESS: KEY_PRESS_MASK,
    EventType.KEY_RELEASE: KEY_RELEASE_MASK,
    EventType.BUTTON_PRESS: BUTTON_PRESS_MASK,
    EventType.BUTTON_RELEASE: BUTTON_RELEASE_MASK,
    EventType.MOTION_NOTIFY: _MOTION_MASKS,
    EventType.ENTER_NOTIFY: ENTER_WINDOW_MASK,
    EventType.LEAVE_NOTIFY: LEAVE_WINDOW_MASK,
    EventType.FOCUS_IN: FOCUS_CHANGE_MASK,
    EventType.FOCUS_OUT: FOCUS_CHANGE_MASK,
    EventType.KEYMAP_NOTIFY: KEYMAP_STATE_MASK,
    EventType.EXPOSE: EXPOSURE_MASK,
    EventType.VISIBILITY_NOTIFY: VISIBILITY_CHANGE_MASK,
    EventType.CREATE_NOTIFY: SUBSTRUCTURE_NOTIFY_MASK,
    EventType.DESTROY_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.UNMAP_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.MAP_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.MAP_REQUEST: SUBSTRUCTURE_REDIRECT_MASK,
    EventType.REPARENT_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.CONFIGURE_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.CONFIGURE_REQUEST: SUBSTRUCTURE_REDIRECT_MASK,
    EventType.GRAVITY_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.RESIZE_REQUEST: RESIZE_REDIRECT_MASK,
    EventType.CIRCULATE_NOTIFY: STRUCTURE_NOTIFY_MASK,
    EventType.CIRCULATE_REQUEST: SUBSTRUCTURE_REDIRECT_MASK,
    EventType.PROPERTY_NOTIFY: PROPERTY_CHANGE_MASK,
    EventType.COLORMAP_NOTIFY: COLORMAP_CHANGE_MASK,
}


@dataclass
class Event:
    """One input or window event addressed to a window.

    ``key`` carries the key symbol of key events, ``button``, ``x`` and
    ``y`` the pointer data, ``count`` the number of expose events still
    to follow, and ``close_request`` marks a window-manager request to
    close the window.
    """

    type: EventType
    window: Window | None = None
    key: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    close_request: bool = False


@dataclass
class _Hook:
    mask: int
    func: Callable[..., Any]


@dataclass(eq=False)
class Window:
    """A window with one hook slot per event type."""

    width: int
    height: int
    title: str = ""
    selected_mask: int = field(default=ALL_EVENTS_MASK, init=False)
    _hooks: dict[EventType, _Hook] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window dimensions must be positive")

    def hook(self, event_type: int, mask: int, func: Callable[..., Any]) -> None:
        """Install ``func`` for ``event_type``, selecting events with ``mask``."""
        if not 0 <= int(event_type) < MAX_EVENT:
            raise ValueError(f"event type out of range: {event_type}")
        try:
            key = EventType(event_type)
        except ValueError:
            raise ValueError(f"event type {event_type} cannot be hooked") from None
        self._hooks[key] = _Hook(mask, func)

    def key_hook(self, func: Callable[[int], Any]) -> None:
        """Call ``func(key)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, KEY_RELEASE_MASK, func)

    def mouse_hook(self, func: Callable[[int, int, int], Any]) -> None:
        """Call ``func(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, BUTTON_PRESS_MASK, func)

    def expose_hook(self, func: Callable[[], Any]) -> None:
        """Call ``func()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EXPOSURE_MASK, func)

    def event_mask(self) -> int:
        """Return the union of the masks of all installed hooks."""
        mask = 0
        for installed in self._hooks.values():
            mask |= installed.mask
        return mask

    def has_hook(self, event_type: EventType) -> bool:
        """Return whether a hook is installed for ``event_type``."""
        return event_type in self._hooks

    def selects(self, event_type: EventType) -> bool:
        """Return whether events of this type reach the window."""
        needed = _SELECTING_MASK.get(event_type)
        return needed is None or bool(self.selected_mask & needed)

    def dispatch(self, event: Event) -> Any:
        """Call the hook for ``event`` with the arguments its type takes.

        Returns what the hook returned, or None when no hook ran.
        """
        installed = self._hooks.get(event.type)
        if installed is None:
            return None
        func = installed.func
        if event.type in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            return func(event.key)
        if event.type in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            return func(event.button, event.x, event.y)
        if event.type is EventType.MOTION_NOTIFY:
            return func(event.x, event.y)
        if event.type is EventType.EXPOSE:
            return func() if event.count == 0 else None
        return func()


_EXHAUSTED = object()


class Display:
    """The connection holding the open windows and running the loop."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self.end_loop = False
        self.do_flush = True
        self._loop_hook: Callable[[], Any] | None = None

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; the newest window comes first in ``windows``."""
        window = Window(width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window`` so that it receives no more events."""
        remaining = [open_window for open_window in self.windows if open_window is not window]
        if len(remaining) == len(self.windows):
            raise ValueError("window does not belong to this display")
        self.windows = remaining

    def loop_hook(self, func: Callable[[], Any] | None) -> None:
        """Call ``func()`` whenever the event queue runs empty."""
        self._loop_hook = func

    def loop_end(self) -> None:
        """Ask the running loop to stop."""
        self.end_loop = True

    def _deliver(self, event: Event) -> None:
        window = next((w for w in self.windows if w is event.window), None)
        if window is None or not window.selects(event.type):
            return
        if (
            event.type is EventType.CLIENT_MESSAGE
            and event.close_request
            and window.has_hook(EventType.DESTROY_NOTIFY)
        ):
            window.dispatch(Event(EventType.DESTROY_NOTIFY, window))
        window.dispatch(event)

    def loop(self, events: Iterable[Event | None]) -> None:
        """Deliver ``events`` to their windows until told to stop.

        A ``None`` item marks a moment when the queue is empty: the loop
        hook, if any, runs then.  The loop returns when ``loop_end`` is
        called, when no window is left at such a moment, or when
        ``events`` is used up.
        """
        for window in self.windows:
            window.selected_mask = window.event_mask()
        self.do_flush = False
        source = iter(events)
        while self.windows and not self.end_loop:
            while not self.end_loop:
                event = next(source, _EXHAUSTED)
                if event is _EXHAUSTED:
                    return
                if event is None:
                    if self._loop_hook is None:
                        continue
                    break
                self._deliver(event)
            if self._loop_hook is not None:
                self._loop_hook()
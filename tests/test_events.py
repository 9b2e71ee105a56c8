import pytest

from fdfview.events import (
    ALL_EVENTS_MASK,
    BUTTON_PRESS_MASK,
    EXPOSURE_MASK,
    KEY_RELEASE_MASK,
    POINTER_MOTION_MASK,
    Display,
    Event,
    EventType,
    Window,
)


def test_key_hook_receives_key_on_release():
    win = Window(242, 242, "Title1")
    seen = []
    win.key_hook(seen.append)
    win.dispatch(Event(EventType.KEY_RELEASE, win, key=0xFF1B))
    assert seen == [0xFF1B]
    assert win.event_mask() == KEY_RELEASE_MASK


def test_mouse_hook_receives_button_and_position():
    win = Window(242, 242, "Title1")
    seen = []
    win.mouse_hook(lambda button, x, y: seen.append((button, x, y)))
    win.dispatch(Event(EventType.BUTTON_PRESS, win, button=1, x=10, y=20))
    assert seen == [(1, 10, 20)]


def test_motion_hook_receives_position():
    win = Window(242, 242, "Title3")
    seen = []
    win.hook(EventType.MOTION_NOTIFY, POINTER_MOTION_MASK, lambda x, y: seen.append((x, y)))
    win.dispatch(Event(EventType.MOTION_NOTIFY, win, x=5, y=7))
    assert seen == [(5, 7)]


def test_expose_only_on_last_of_series():
    win = Window(100, 100)
    calls = []
    win.expose_hook(lambda: calls.append("expose"))
    win.dispatch(Event(EventType.EXPOSE, win, count=2))
    win.dispatch(Event(EventType.EXPOSE, win, count=0))
    assert calls == ["expose"]


def test_generic_hook_and_return_value():
    win = Window(100, 100)
    win.hook(EventType.DESTROY_NOTIFY, 0, lambda: "closed")
    assert win.dispatch(Event(EventType.DESTROY_NOTIFY, win)) == "closed"
    assert win.dispatch(Event(EventType.KEY_PRESS, win, key=1)) is None


def test_event_mask_is_union_of_hooks():
    win = Window(100, 100)
    win.key_hook(lambda key: None)
    win.mouse_hook(lambda b, x, y: None)
    win.expose_hook(lambda: None)
    assert win.event_mask() == KEY_RELEASE_MASK | BUTTON_PRESS_MASK | EXPOSURE_MASK


def test_hook_rejects_out_of_range_type():
    win = Window(100, 100)
    with pytest.raises(ValueError):
        win.hook(40, 0, lambda: None)


def test_window_rejects_empty_size():
    with pytest.raises(ValueError):
        Window(0, 10)


def test_new_window_is_listed_first_and_destroy_removes():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == [second, first]
    assert first.selected_mask == ALL_EVENTS_MASK
    display.destroy_window(first)
    assert display.windows == [second]
    with pytest.raises(ValueError):
        display.destroy_window(first)


def test_mouse_event_replaces_window_like_new_win():
    display = Display()
    state = {"win1": display.new_window(300, 300, "win1")}
    win2 = display.new_window(600, 600, "win2")
    created = []

    def handle_mouse(button, x, y):
        display.destroy_window(state["win1"])
        state["win1"] = display.new_window(200, 150, "new win")
        state["win1"].mouse_hook(handle_mouse)
        created.append(state["win1"])

    state["win1"].mouse_hook(handle_mouse)
    win2.mouse_hook(handle_mouse)
    old_win1 = state["win1"]
    display.loop([
        Event(EventType.BUTTON_PRESS, old_win1, button=1),
        Event(EventType.BUTTON_PRESS, old_win1, button=1),
        Event(EventType.BUTTON_PRESS, win2, button=3),
    ])
    assert len(created) == 2
    assert old_win1 not in display.windows
    assert display.windows[0] is state["win1"]
    assert state["win1"].title == "new win"
    assert len(display.windows) == 2


def test_close_request_calls_destroy_hook_even_with_empty_mask():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    closed = []
    win.hook(EventType.DESTROY_NOTIFY, 0, lambda: closed.append(True))
    display.loop([
        Event(EventType.DESTROY_NOTIFY, win),
        Event(EventType.CLIENT_MESSAGE, win, close_request=True),
    ])
    assert closed == [True]


def test_events_not_selected_are_not_delivered():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    keys = []
    win.key_hook(keys.append)
    win.hook(EventType.KEY_PRESS, 0, lambda key: keys.append(("press", key)))
    display.loop([
        Event(EventType.KEY_PRESS, win, key=1),
        Event(EventType.KEY_RELEASE, win, key=2),
    ])
    assert keys == [2]
    assert win.selected_mask == KEY_RELEASE_MASK


def test_loop_hook_runs_on_idle_and_loop_end_stops():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    ticks = []
    keys = []
    win.key_hook(keys.append)

    def tick():
        ticks.append(len(keys))
        if len(ticks) == 2:
            display.loop_end()

    display.loop_hook(tick)
    display.loop([
        Event(EventType.KEY_RELEASE, win, key=1),
        None,
        Event(EventType.KEY_RELEASE, win, key=2),
        None,
        Event(EventType.KEY_RELEASE, win, key=3),
    ])
    assert ticks == [1, 2]
    assert keys == [1, 2]
    assert display.end_loop is True
    assert display.do_flush is False


def test_loop_end_inside_batch_still_runs_loop_hook():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    ticks = []
    win.key_hook(lambda key: display.loop_end())
    display.loop_hook(lambda: ticks.append("tick"))
    display.loop([Event(EventType.KEY_RELEASE, win, key=9), Event(EventType.KEY_RELEASE, win)])
    assert ticks == ["tick"]


def test_loop_stops_when_no_window_left_at_idle():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    keys = []
    win.key_hook(lambda key: (keys.append(key), display.destroy_window(win)))
    display.loop_hook(lambda: None)
    remaining = [Event(EventType.KEY_RELEASE, win, key=1), None, Event(EventType.KEY_RELEASE, win, key=2)]
    source = iter(remaining)
    display.loop(source)
    assert keys == [1]
    assert display.windows == []
    assert next(source).key == 2


def test_events_for_unknown_window_are_ignored():
    display = Display()
    win = display.new_window(100, 100, "fdf")
    stranger = Window(10, 10)
    keys = []
    win.key_hook(keys.append)
    stranger.key_hook(keys.append)
    display.loop([Event(EventType.KEY_RELEASE, stranger, key=5), Event(EventType.KEY_RELEASE, win, key=6)])
    assert keys == [6]
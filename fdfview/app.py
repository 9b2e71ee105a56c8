"""The wireframe viewer command: load a map and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from .camera import DEFAULT_HEIGHT, DEFAULT_WIDTH, Camera
from .controls import Key, apply_key, apply_mouse
from .events import Display, Event, EventType, Window
from .fdfmap import HeightMap, MapError, read_map
from .image import Image, new_image
from .render import render_map

_TITLE = "fdf"


class _Viewer:
    """The map, camera and image of one viewing session."""

    def __init__(self, height_map: HeightMap, width: int, height: int) -> None:
        self.height_map = height_map
        self.camera = Camera(width, height)
        self.image: Image = new_image(width, height)
        self.running = True
        self.redraw()

    def redraw(self) -> None:
        render_map(self.image, self.height_map, self.camera)

    def on_key(self, keycode: int) -> None:
        print(keycode)
        if not apply_key(self.camera, keycode):
            self.running = False
            return
        self.redraw()

    def on_mouse(self, button: int) -> None:
        apply_mouse(self.camera, button)
        self.redraw()


def _key_symbols(pygame: Any) -> dict[int, int]:
    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
        pygame.K_UP: Key.ARROW_UP,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_PAGEUP: Key.PG_UP,
        pygame.K_PAGEDOWN: Key.PG_DOWN,
        pygame.K_KP2: Key.NUM_2,
        pygame.K_KP4: Key.NUM_4,
        pygame.K_KP6: Key.NUM_6,
        pygame.K_KP7: Key.NUM_7,
        pygame.K_KP8: Key.NUM_8,
        pygame.K_KP9: Key.NUM_9,
        pygame.K_KP_PLUS: Key.ZOOM_IN,
        pygame.K_KP_MINUS: Key.ZOOM_OUT,
    }


def _pygame_events(pygame: Any, window: Window, symbols: Mapping[int, int]) -> Iterator[Event]:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            yield Event(EventType.CLIENT_MESSAGE, window, close_request=True)
        elif event.type == pygame.KEYUP:
            yield Event(EventType.KEY_RELEASE, window, key=symbols.get(event.key, event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            yield Event(EventType.BUTTON_PRESS, window, button=event.button, x=x, y=y)
        elif event.type == pygame.VIDEOEXPOSE:
            yield Event(EventType.EXPOSE, window)


def run(path: str | Path, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> int:
    """Show the map at ``path`` until the window is closed or Escape is hit.

    Raises ``OSError`` or ``MapError`` when the map cannot be loaded.
    """
    viewer = _Viewer(read_map(path), width, height)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(_TITLE)
        display = Display()
        window = display.new_window(width, height, _TITLE)

        def present() -> None:
            pixels = viewer.image.to_rgb_bytes()
            surface = pygame.image.frombuffer(pixels, (width, height), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        def on_key(keycode: int) -> None:
            viewer.on_key(keycode)
            if viewer.running:
                present()
            else:
                display.loop_end()

        def on_mouse(button: int, x: int, y: int) -> None:
            viewer.on_mouse(button)
            present()

        window.key_hook(on_key)
        window.mouse_hook(on_mouse)
        window.expose_hook(present)
        window.hook(EventType.DESTROY_NOTIFY, 0, display.loop_end)
        present()
        display.loop(_pygame_events(pygame, window, _key_symbols(pygame)))
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the one map file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: fdf <map file>", file=sys.stderr)
        return 1
    try:
        return run(args[0])
    except (OSError, MapError) as error:
        print(f"fdf: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
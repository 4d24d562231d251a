"""The game loop: frame timing, input, scenes and double-buffered drawing."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterable, Sequence

import pygame

from .context import Context
from .drawing import WHITE, draw_text
from .geometry import WIN_SIZE_X, WIN_SIZE_Y, Vector
from .input import KeyType
from .scenes import SceneManager, SceneType

WINDOW_TITLE = "Fortress"
START_SCENE = SceneType.FORTRESS_MENU
FPS_TEXT_POS = Vector(10, 10)
MOUSE_TEXT_POS = Vector(10, 30)

_KEY_BINDINGS = {
    KeyType.UP: pygame.K_UP,
    KeyType.DOWN: pygame.K_DOWN,
    KeyType.LEFT: pygame.K_LEFT,
    KeyType.RIGHT: pygame.K_RIGHT,
    KeyType.SPACE_BAR: pygame.K_SPACE,
    KeyType.KEY_1: pygame.K_1,
    KeyType.KEY_2: pygame.K_2,
    KeyType.W: pygame.K_w,
    KeyType.A: pygame.K_a,
    KeyType.S: pygame.K_s,
    KeyType.D: pygame.K_d,
    KeyType.Q: pygame.K_q,
    KeyType.E: pygame.K_e,
}


def _pressed_keys() -> set[KeyType]:
    """The game keys and mouse buttons held right now."""
    keys = pygame.key.get_pressed()
    held = {key for key, code in _KEY_BINDINGS.items() if keys[code]}
    buttons = pygame.mouse.get_pressed()
    if buttons[0]:
        held.add(KeyType.LEFT_MOUSE)
    if buttons[2]:
        held.add(KeyType.RIGHT_MOUSE)
    return held


class Game:
    """Drives one running game: updates the services and draws each frame."""

    def __init__(
        self, resource_dir: str | os.PathLike = ".", context: Context | None = None
    ) -> None:
        self.resource_dir = resource_dir
        self.context = context if context is not None else Context()
        self.scenes = SceneManager(self.context)
        self.surface: pygame.Surface | None = None
        self.back_buffer: pygame.Surface | None = None

    def _require_init(self) -> None:
        if self.surface is None or self.back_buffer is None:
            raise RuntimeError("game has not been initialised with a surface")

    def init(self, surface: pygame.Surface) -> None:
        """Attach the target surface, load resources and open the start scene."""
        self.surface = surface
        self.back_buffer = pygame.Surface(surface.get_size())
        self.back_buffer.fill(WHITE)

        self.context.time.init()
        self.context.resources.init(self.resource_dir)
        self.scenes.change_scene(START_SCENE)

    def update(
        self, pressed: Iterable[int] = (), mouse_pos: tuple[int, int] | None = None
    ) -> None:
        """Advance one frame given the keys held and the mouse position."""
        self._require_init()
        self.context.time.update()
        self.context.input.update(pressed, mouse_pos)
        self.scenes.update()

    def render(self) -> None:
        """Draw the scene and overlays off-screen, then copy them to the surface."""
        self._require_init()
        back = self.back_buffer
        time = self.context.time

        self.scenes.render(back)

        mouse_x, mouse_y = self.context.input.mouse_pos
        draw_text(back, MOUSE_TEXT_POS, f"Mouse:{mouse_x}, {mouse_y}")
        draw_text(back, FPS_TEXT_POS, f"FPS : {time.fps} DT : {time.delta_time:.6f}")

        self.surface.blit(back, (0, 0))
        back.fill(WHITE)

    def run(self) -> None:
        """Run frames on the display until the window is closed."""
        self._require_init()
        try:
            while True:
                if any(event.type == pygame.QUIT for event in pygame.event.get()):
                    break
                self.update(_pressed_keys(), pygame.mouse.get_pos())
                self.render()
                pygame.display.flip()
        finally:
            self.context.resources.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(description="Turn-based tank artillery game.")
    parser.add_argument(
        "--resources",
        default=".",
        help="directory holding the line mesh files (default: current directory)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_SIZE_X, WIN_SIZE_Y))
        pygame.display.set_caption(WINDOW_TITLE)
        game = Game(resource_dir=args.resources)
        game.init(screen)
        game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
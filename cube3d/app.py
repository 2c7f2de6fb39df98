"""The game window: event handling, the frame loop and the command line."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from os import PathLike

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from cube3d.game import (  # noqa: E402
    HEIGHT,
    MOUSE_SPEED,
    WIDTH,
    GameState,
    Key,
    spawn_player,
)
from cube3d.image import Image  # noqa: E402
from cube3d.minimap import blit_minimap, create_minimap, draw_minimap  # noqa: E402
from cube3d.parsing import ParseError, parse_scene  # noqa: E402
from cube3d.raycast import render_frame  # noqa: E402

TITLE = "cub3D"
FRAMES_PER_SECOND = 60

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_LSHIFT: Key.SHIFT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LCTRL: Key.CTRL,
    pygame.K_TAB: Key.TAB,
}


def key_from_pygame(key: int) -> Key | None:
    """Return the game key for a pygame key code, or None if it is not used."""
    return _PYGAME_KEYS.get(key)


def mouse_turn(state: GameState, mouse_x: int) -> float:
    """Turn the player by how far the mouse sits from the middle of the window.

    Does nothing while paused. Returns the angle turned, in radians.
    """
    if state.paused:
        return 0.0
    offset = mouse_x - WIDTH // 2
    if offset == 0:
        return 0.0
    steps = abs(offset * 100) // WIDTH
    if offset < 0:
        steps = -steps
    angle = -MOUSE_SPEED * steps
    state.player.rotate(angle)
    return angle


def _frame_rgb(frame: Image) -> bytes:
    raw = frame.to_bytes()
    rgb = bytearray(frame.width * frame.height * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return bytes(rgb)


def _handle_events(state: GameState) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            state.running = False
        elif event.type == pygame.KEYDOWN:
            key = key_from_pygame(event.key)
            if key is not None:
                state.keys.press(key)
        elif event.type == pygame.KEYUP:
            key = key_from_pygame(event.key)
            if key is not None:
                state.keys.release(key)


def run(scene_path: str | PathLike[str]) -> None:
    """Load a scene and play it until the window is closed or escape is hit.

    Raises ParseError if the scene file cannot be used.
    """
    scene = parse_scene(scene_path)
    state = GameState(
        grid=scene.grid,
        player=spawn_player(scene.spawn_x, scene.spawn_y, scene.spawn_dir),
    )
    frame = Image(WIDTH, HEIGHT)
    minimap = create_minimap(scene.grid)
    centre = (WIDTH // 2, HEIGHT // 2)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        pygame.mouse.set_pos(centre)
        while state.running:
            _handle_events(state)
            if not state.running:
                break
            state.advance_jump()
            state.apply_keys()
            if not state.running:
                break
            render_frame(frame, scene, state)
            mouse_turn(state, pygame.mouse.get_pos()[0])
            if not state.paused:
                pygame.mouse.set_pos(centre)
            draw_minimap(minimap, scene.grid, state.player)
            blit_minimap(frame, minimap)
            surface = pygame.image.frombuffer(_frame_rgb(frame), (WIDTH, HEIGHT), "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else ""
    try:
        run(path)
    except ParseError as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
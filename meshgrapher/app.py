"""Command line entry point: pick a scene and run the window loop."""

from __future__ import annotations

import argparse
import enum
import logging
import sys
import time

import pygame

from meshgrapher import scenes
from meshgrapher.camera import Key
from meshgrapher.render import RenderState, render

log = logging.getLogger(__name__)

# delay between frames, about one sixtieth of a second
RENDER_TIMEOUT = 0.016666667

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "mesh grapher"


class Command(enum.Enum):
    """The scenes that can be shown."""

    GRAPH = "graph"
    MELTING_GRAPH = "melting-graph"
    WAVE_EQUATION = "wave-equation"


_HELP = {
    Command.GRAPH: "graph of a function over a floor grid",
    Command.MELTING_GRAPH: "graph that slowly sinks toward the floor",
    Command.WAVE_EQUATION: "surface rippling under the wave equation",
}

_SCENE_FACTORIES = {
    Command.GRAPH: scenes.graph_scene,
    Command.MELTING_GRAPH: scenes.melting_graph_scene,
    Command.WAVE_EQUATION: scenes.wave_eqn_scene,
}

_PYGAME_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_z: Key.Z,
    pygame.K_x: Key.X,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def parse_args(argv=None) -> Command:
    """Read the scene command from the command line."""
    parser = argparse.ArgumentParser(
        prog="meshgrapher", description="Draw animated wireframe surfaces."
    )
    subcommands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for command in Command:
        subcommands.add_parser(command.value, help=_HELP[command])
    namespace = parser.parse_args(argv)
    return Command(namespace.command)


def make_scene(command):
    """Build the scene a command names."""
    return _SCENE_FACTORIES[Command(command)]()


def _handle_event(state: RenderState, event) -> bool:
    """Apply one window event to state; False once the window should close."""
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        pressed = event.type == pygame.KEYDOWN
        key = _PYGAME_KEYS.get(event.key)
        if key is not None and state.handle_user_input(key, pressed):
            return True
        if pressed and event.key == pygame.K_ESCAPE:
            return False
    elif event.type == pygame.QUIT:
        return False
    elif event.type == pygame.VIDEORESIZE:
        state.resize(event.w, event.h)
    return True


def run_event_loop(command) -> None:
    """Open a window and draw the chosen scene until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        state = RenderState(*screen.get_size())
        scene = make_scene(command)

        log.info("Starting event loop!")
        start = time.monotonic()
        framecount = 0

        while True:
            for event in pygame.event.get():
                if not _handle_event(state, event):
                    return

            elapsed_ms = int((time.monotonic() - start) * 1000)
            framecount += 1
            if elapsed_ms > 0:
                state.framerate = 1000.0 * framecount / elapsed_ms
            if elapsed_ms >= 1000:
                log.info("FPS: %s", state.framerate)
                framecount = 0
                start = time.monotonic()

            scene.update()
            state.update()

            try:
                render(state, scene.scene, pygame.display.get_surface())
            except pygame.error:
                log.error("Drawing the frame failed.")
                return
            pygame.display.flip()

            time.sleep(RENDER_TIMEOUT)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    """Run the program with the given command line."""
    logging.basicConfig(level=logging.WARNING)
    command = parse_args(argv)
    run_event_loop(command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
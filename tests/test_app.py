import pygame
import pytest

from meshgrapher.app import Command, _handle_event, make_scene, parse_args
from meshgrapher.render import RenderState
from meshgrapher.scenes import MeltingScene, Scene, WaveEquationScene


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["graph"], Command.GRAPH),
        (["melting-graph"], Command.MELTING_GRAPH),
        (["wave-equation"], Command.WAVE_EQUATION),
    ],
)
def test_parse_args_picks_command(argv, expected):
    assert parse_args(argv) is expected


def test_parse_args_requires_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_args_rejects_unknown_command():
    with pytest.raises(SystemExit):
        parse_args(["bogus"])


def test_make_scene_graph():
    scene = make_scene(Command.GRAPH)
    assert isinstance(scene, Scene)
    assert len(scene.scene.meshes) == 2
    assert all(m.num_indices == len(m.indices) for m in scene.meshes)


def test_make_scene_melting_graph_from_name():
    scene = make_scene("melting-graph")
    assert isinstance(scene, MeltingScene)
    assert len(scene.scene.meshes) == 2
    assert len(scene.func_mesh.vertices) == len(scene.scene.meshes[1].positions)


def test_make_scene_wave_equation():
    scene = make_scene(Command.WAVE_EQUATION)
    assert isinstance(scene, WaveEquationScene)
    assert len(scene.scene.meshes) == 1
    assert len(scene.func_mesh.vertices) == scene.wave_eqn.u_0.size


def test_make_scene_rejects_unknown():
    with pytest.raises(ValueError):
        make_scene("nope")


def test_escape_closes_window():
    state = RenderState(100, 100)
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
    assert _handle_event(state, event) is False


def test_quit_closes_window():
    state = RenderState(100, 100)
    assert _handle_event(state, pygame.event.Event(pygame.QUIT)) is False


def test_camera_key_press_and_release():
    state = RenderState(100, 100)
    down = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    up = pygame.event.Event(pygame.KEYUP, key=pygame.K_w)
    assert _handle_event(state, down) is True
    assert state.camera_state.controller.is_up_pressed is True
    assert _handle_event(state, up) is True
    assert state.camera_state.controller.is_up_pressed is False


def test_unrelated_key_keeps_running():
    state = RenderState(100, 100)
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)
    assert _handle_event(state, event) is True
    assert state.camera_state.controller.is_up_pressed is False


def test_resize_event_updates_state():
    state = RenderState(100, 100)
    event = pygame.event.Event(pygame.VIDEORESIZE, w=400, h=200, size=(400, 200))
    assert _handle_event(state, event) is True
    assert state.size == (400, 200)
    assert state.camera_state.camera.aspect == pytest.approx(400 / 200)
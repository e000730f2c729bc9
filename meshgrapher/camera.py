"""A perspective camera orbiting the scene, and keyboard control for it."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np

from meshgrapher.matrix import (
    OPENGL_TO_WGPU_MATRIX,
    MatrixUniform,
    axis_angle,
    look_at_rh,
    perspective,
)

Y_AXIS = (0.0, 1.0, 0.0)
X_AXIS = (1.0, 0.0, 0.0)

DEFAULT_CONTROLLER_SPEED = 0.00125


def _vector(values) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError("expected a three-component vector")
    return array


@dataclass
class Camera:
    """Look-at camera with a perspective projection and two rotation angles."""

    eye: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 2.0]))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    up: np.ndarray = field(default_factory=lambda: np.array(Y_AXIS))
    aspect: float = 1.0
    fovy: float = 45.0
    znear: float = 0.1
    zfar: float = 100.0
    # rotation about the y axis, then about the x axis, in radians
    alpha: float = 0.0
    gamma: float = 0.0

    def __post_init__(self) -> None:
        self.eye = _vector(self.eye)
        self.target = _vector(self.target)
        self.up = _vector(self.up)

    def get_matrix(self) -> np.ndarray:
        """The combined projection, view and rotation matrix."""
        view = look_at_rh(self.eye, self.target, self.up)
        alpha_rot = axis_angle(Y_AXIS, self.alpha)
        gamma_rot = axis_angle(X_AXIS, self.gamma)
        proj = perspective(self.fovy, self.aspect, self.znear, self.zfar)
        return OPENGL_TO_WGPU_MATRIX @ proj @ view @ gamma_rot @ alpha_rot


class Key(enum.Enum):
    """Keys the application reacts to."""

    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    UP = enum.auto()
    LEFT = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    Z = enum.auto()
    X = enum.auto()
    ESCAPE = enum.auto()


_KEY_FLAGS = {
    Key.W: "is_up_pressed",
    Key.UP: "is_up_pressed",
    Key.A: "is_left_pressed",
    Key.LEFT: "is_left_pressed",
    Key.S: "is_down_pressed",
    Key.DOWN: "is_down_pressed",
    Key.D: "is_right_pressed",
    Key.RIGHT: "is_right_pressed",
    Key.Z: "is_z_pressed",
    Key.X: "is_x_pressed",
}


@dataclass
class CameraController:
    """Tracks held keys and moves a camera accordingly."""

    speed: float = DEFAULT_CONTROLLER_SPEED
    is_up_pressed: bool = False
    is_down_pressed: bool = False
    is_left_pressed: bool = False
    is_right_pressed: bool = False
    is_z_pressed: bool = False
    is_x_pressed: bool = False

    def update_camera(self, camera: Camera) -> None:
        """Zoom and rotate the camera according to the held keys."""
        forward = camera.target - camera.eye
        magnitude = float(np.linalg.norm(forward))
        direction = forward / magnitude if magnitude > 0.0 else np.zeros(3)

        if self.is_z_pressed and magnitude > self.speed:
            camera.eye = camera.eye + direction * self.speed
        if self.is_x_pressed:
            camera.eye = camera.eye - direction * self.speed

        angle_incr = self.speed * math.pi / 4.0

        if self.is_right_pressed:
            camera.alpha += angle_incr
        if self.is_left_pressed:
            camera.alpha -= angle_incr
        if self.is_up_pressed:
            camera.gamma += angle_incr
        if self.is_down_pressed:
            camera.gamma -= angle_incr

    def process_key(self, key, pressed: bool) -> bool:
        """Record a key press or release; True if the key controls the camera."""
        flag = _KEY_FLAGS.get(key)
        if flag is None:
            return False
        setattr(self, flag, bool(pressed))
        return True


@dataclass
class CameraState:
    """A camera, its matrix as handed to the shader, and its controller."""

    camera: Camera
    matrix: MatrixUniform
    controller: CameraController

    @classmethod
    def init(cls, width: int, height: int) -> CameraState:
        """Set up the default camera for a surface of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("the surface must have a positive width and height")
        camera = Camera(
            eye=(0.0, 0.0, 2.0),
            target=(0.0, 0.0, 0.0),
            up=Y_AXIS,
            aspect=width / height,
            fovy=45.0,
            znear=0.1,
            zfar=100.0,
            alpha=0.0,
            gamma=0.0,
        )
        uniform = MatrixUniform.identity()
        uniform.update(camera.get_matrix())
        return cls(
            camera=camera,
            matrix=uniform,
            controller=CameraController(DEFAULT_CONTROLLER_SPEED),
        )
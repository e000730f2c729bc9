"""Wireframe drawing of scenes onto a pygame surface, and the state behind it."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pygame

from meshgrapher.camera import CameraState

# controller speed is this divided by the running framerate
CONTROLLER_SPEED_SCALE = 2.125

BACKGROUND = (0, 0, 0)


@dataclass(eq=False)
class RenderState:
    """Surface size, camera and running framerate shared by every frame."""

    width: int
    height: int
    camera_state: CameraState | None = None
    framerate: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("the surface must have a positive width and height")
        if self.camera_state is None:
            self.camera_state = CameraState.init(self.width, self.height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        """Adopt a new surface size; sizes with a zero side are ignored."""
        if width > 0 and height > 0:
            self.width = int(width)
            self.height = int(height)
            self.camera_state.camera.aspect = self.width / self.height
            self.update()

    def handle_user_input(self, key, pressed: bool) -> bool:
        """Pass a key event to the camera; True if the camera used it."""
        return self.camera_state.controller.process_key(key, pressed)

    def update(self) -> None:
        """Move the camera for this frame and refresh its matrix."""
        camera_state = self.camera_state
        camera_state.controller.speed = CONTROLLER_SPEED_SCALE / self.framerate
        camera_state.controller.update_camera(camera_state.camera)
        camera_state.matrix.update(camera_state.camera.get_matrix())


def project_vertices(matrix, positions, width, height) -> np.ndarray:
    """Map positions through matrix to (screen x, screen y, depth) rows.

    Rows for points behind the eye or outside the depth range [0, 1]
    are NaN.
    """
    transform = np.asarray(matrix, dtype=np.float64)
    if transform.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    points = np.asarray(positions, dtype=np.float64).reshape(-1, 3)

    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    clip = homogeneous @ transform.T
    w = clip[:, 3]

    projected = np.full((len(points), 3), np.nan)
    in_front = w > 0.0
    ndc = clip[in_front, :3] / w[in_front, None]
    in_depth = (ndc[:, 2] >= 0.0) & (ndc[:, 2] <= 1.0)
    rows = np.flatnonzero(in_front)[in_depth]
    ndc = ndc[in_depth]

    projected[rows, 0] = (ndc[:, 0] + 1.0) / 2.0 * width
    projected[rows, 1] = (1.0 - ndc[:, 1]) / 2.0 * height
    projected[rows, 2] = ndc[:, 2]
    return projected


def visible_triangles(indices, projected) -> np.ndarray:
    """Triangles, as index triples, that face the viewer and lie in view.

    Front faces wind counter-clockwise on screen with y pointing up;
    back faces, degenerate triangles and triangles with a clipped
    vertex are dropped.
    """
    flat = np.asarray(indices, dtype=np.int64)
    if flat.ndim != 1 or len(flat) % 3:
        raise ValueError("triangle indices must come in groups of three")
    triangles = flat.reshape(-1, 3)
    if len(triangles) == 0:
        return triangles

    points = np.asarray(projected, dtype=np.float64)
    if triangles.min() < 0 or triangles.max() >= len(points):
        raise ValueError("a triangle refers to a vertex that does not exist")

    a = points[triangles[:, 0], :2]
    b = points[triangles[:, 1], :2]
    c = points[triangles[:, 2], :2]
    ab = b - a
    ac = c - a
    with np.errstate(invalid="ignore"):
        cross = ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0]
        # screen y points down, so counter-clockwise shows as negative area
        facing = cross < 0.0
    finite = np.isfinite(points[triangles]).all(axis=(1, 2))
    return triangles[facing & finite]


def _edges(triangles: np.ndarray) -> np.ndarray:
    if len(triangles) == 0:
        return np.empty((0, 2), dtype=np.int64)
    edges = np.concatenate(
        [triangles[:, [0, 1]], triangles[:, [1, 2]], triangles[:, [2, 0]]]
    )
    return np.unique(np.sort(edges, axis=1), axis=0)


def _to_srgb8(linear: np.ndarray) -> np.ndarray:
    c = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    encoded = np.where(c <= 0.0031308, 12.92 * c, 1.055 * np.power(c, 1.0 / 2.4) - 0.055)
    return np.rint(encoded * 255.0).astype(np.int64)


def render(state: RenderState, scene, surface) -> int:
    """Draw every mesh of scene as a wireframe; returns the triangles drawn."""
    width, height = surface.get_size()
    # a freshly presented frame starts out black
    surface.fill(BACKGROUND)

    camera_matrix = np.asarray(state.camera_state.matrix.view_proj, dtype=np.float64)
    drawn = 0
    for mesh in scene.meshes:
        matrix = camera_matrix @ np.asarray(mesh.matrix.view_proj, dtype=np.float64)
        projected = project_vertices(matrix, mesh.positions, width, height)
        triangles = visible_triangles(mesh.indices[: mesh.num_indices], projected)
        drawn += len(triangles)

        edges = _edges(triangles)
        if len(edges) == 0:
            continue
        colors = _to_srgb8((mesh.colors[edges[:, 0]] + mesh.colors[edges[:, 1]]) / 2.0)
        for (start, end), color in zip(edges, colors):
            pygame.draw.line(
                surface,
                tuple(int(v) for v in color),
                (float(projected[start, 0]), float(projected[start, 1])),
                (float(projected[end, 0]), float(projected[end, 1])),
            )
    return drawn
import math
import struct

import numpy as np
import pytest

from meshgrapher.matrix import (
    OPENGL_TO_WGPU_MATRIX,
    MatrixUniform,
    axis_angle,
    look_at_rh,
    perspective,
)


def _apply(matrix, point):
    return np.asarray(matrix) @ np.array([*point, 1.0])


def test_identity():
    assert np.array_equal(MatrixUniform.identity().view_proj, np.eye(4))


def test_translation_moves_points():
    m = MatrixUniform.translation([-1.0, -0.5, -1.0])
    result = _apply(m.view_proj, (1.0, 2.0, 3.0))
    assert np.allclose(result, [0.0, 1.5, 2.0, 1.0])


def test_translation_needs_three_coordinates():
    with pytest.raises(ValueError):
        MatrixUniform.translation([1.0, 2.0])


def test_translation_bytes_are_column_major():
    m = MatrixUniform.translation([4.0, 5.0, 6.0])
    data = m.to_bytes()
    assert len(data) == 64
    assert struct.unpack("<4f", data[48:]) == (4.0, 5.0, 6.0, 1.0)


def test_update_replaces_matrix():
    m = MatrixUniform.identity()
    target = np.arange(16, dtype=np.float64).reshape(4, 4)
    m.update(target)
    assert np.array_equal(m.view_proj, target)


def test_update_rejects_wrong_shape():
    with pytest.raises(ValueError):
        MatrixUniform.identity().update(np.eye(3))


def test_opengl_to_wgpu_maps_depth_to_unit_range():
    near, far = 0.1, 100.0
    combined = OPENGL_TO_WGPU_MATRIX @ perspective(45.0, 1.0, near, far)
    clip_near = _apply(combined, (0.0, 0.0, -near))
    clip_far = _apply(combined, (0.0, 0.0, -far))
    assert clip_near[2] / clip_near[3] == pytest.approx(0.0, abs=1e-9)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_look_at_maps_eye_to_origin_and_target_forward():
    view = look_at_rh((0.0, 0.0, 2.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(_apply(view, (0.0, 0.0, 2.0)), [0.0, 0.0, 0.0, 1.0])
    assert np.allclose(_apply(view, (0.0, 0.0, 0.0)), [0.0, 0.0, -2.0, 1.0])


def test_look_at_is_rigid():
    view = look_at_rh((1.0, 2.0, 3.0), (-1.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    rot = view[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))


def test_look_at_rejects_coincident_points():
    with pytest.raises(ValueError):
        look_at_rh((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))


def test_perspective_maps_clip_planes():
    near, far = 0.1, 100.0
    proj = perspective(45.0, 1.5, near, far)
    clip_near = _apply(proj, (0.0, 0.0, -near))
    clip_far = _apply(proj, (0.0, 0.0, -far))
    assert clip_near[2] / clip_near[3] == pytest.approx(-1.0)
    assert clip_far[2] / clip_far[3] == pytest.approx(1.0)


def test_perspective_aspect():
    proj = perspective(45.0, 1.5, 0.1, 100.0)
    assert proj[0, 0] * 1.5 == pytest.approx(proj[1, 1])
    assert proj[1, 1] == pytest.approx(1.0 / math.tan(math.radians(22.5)))


@pytest.mark.parametrize(
    "args",
    [
        (0.0, 1.0, 0.1, 100.0),
        (180.0, 1.0, 0.1, 100.0),
        (45.0, 0.0, 0.1, 100.0),
        (45.0, 1.0, 0.0, 100.0),
        (45.0, 1.0, 1.0, 1.0),
    ],
)
def test_perspective_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        perspective(*args)


def test_axis_angle_rotates_x_about_y():
    rot = axis_angle((0.0, 1.0, 0.0), math.pi / 2)
    assert np.allclose(_apply(rot, (1.0, 0.0, 0.0)), [0.0, 0.0, -1.0, 1.0])


def test_axis_angle_is_rotation():
    rot = axis_angle((0.0, 0.6, 0.8), 0.7)[:3, :3]
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)
    assert np.allclose(rot @ np.array([0.0, 0.6, 0.8]), [0.0, 0.6, 0.8])


def test_axis_angle_zero_is_identity():
    assert np.allclose(axis_angle((1.0, 0.0, 0.0), 0.0), np.eye(4))
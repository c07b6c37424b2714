import math

import numpy as np

from glistscene import quaternion
from glistscene.camera import Camera


def test_defaults():
    cam = Camera()
    assert cam.fov == 60.0
    assert cam.near_clip == 0.01
    assert cam.far_clip == 1000.0


def test_constructor_position_sets_look():
    cam = Camera(1.0, 2.0, 3.0)
    assert np.allclose(cam.position, [1.0, 2.0, 3.0])
    assert np.allclose(cam.look_matrix[:3, 3], [1.0, 2.0, 3.0])


def test_view_is_inverse_of_look():
    cam = Camera(1.0, -2.0, 5.0)
    cam.pan(0.4)
    cam.scale(2.0)
    assert np.allclose(cam.view_matrix() @ cam.look_matrix, np.identity(4))


def test_move_updates_look():
    cam = Camera()
    cam.move(0.5, 1.0, -1.5)
    assert np.allclose(cam.look_position, cam.position)


def test_dolly_moves_look_with_node():
    cam = Camera()
    cam.pan(0.7)
    cam.dolly(3.0)
    cam.truck(1.0)
    cam.boom(-2.0)
    assert np.allclose(cam.look_position, cam.position)


def test_rotate_look_only_changes_look():
    cam = Camera()
    cam.rotate_look(0.5, 0.0, 1.0, 0.0)
    assert np.allclose(cam.orientation, quaternion.identity())
    assert np.allclose(cam.look_orientation, quaternion.angle_axis(0.5, (0.0, 1.0, 0.0)))


def test_reset_look_restores_orientation():
    cam = Camera()
    cam.tilt(0.3)
    cam.rotate_look(1.0, 0.0, 0.0, 1.0)
    cam.reset_look()
    assert np.allclose(cam.look_orientation, cam.orientation)


def test_rotate_degrees_for_node_radians_for_look():
    cam = Camera()
    cam.rotate(0.5, 0.0, 1.0, 0.0)
    assert np.allclose(cam.look_orientation, quaternion.angle_axis(0.5, (0.0, 1.0, 0.0)))
    assert np.allclose(cam.orientation, quaternion.angle_axis(0.5 * 3.141592 / 180.0, (0.0, 1.0, 0.0)))


def test_set_scale_matches_look_scale():
    cam = Camera()
    cam.set_scale(2.0, 3.0, 4.0)
    assert np.allclose(cam.look_matrix, cam.transformation_matrix)


def test_set_orientation_and_euler_keep_look_in_sync():
    cam = Camera()
    q = quaternion.angle_axis(0.6, (1.0, 0.0, 0.0))
    cam.set_orientation(q)
    assert np.allclose(cam.look_orientation, q)
    cam.set_orientation_euler((0.1, 0.2, 0.3))
    assert np.allclose(cam.look_orientation, cam.orientation)


def test_projection_matrix_shape():
    cam = Camera()
    aspect = 16 / 9
    m = cam.projection_matrix(aspect)
    assert m[3, 2] == -1.0
    assert m[3, 3] == 0.0
    assert np.isclose(m[0, 0] * aspect, m[1, 1])
    assert np.isclose(m[1, 1], 1.0 / math.tan(math.radians(cam.fov) / 2))


def test_projection_maps_near_plane_to_minus_one():
    cam = Camera()
    m = cam.projection_matrix(1.0)
    clip = m @ np.array([0.0, 0.0, -cam.near_clip, 1.0])
    assert np.isclose(clip[2] / clip[3], -1.0)
    clip = m @ np.array([0.0, 0.0, -cam.far_clip, 1.0])
    assert np.isclose(clip[2] / clip[3], 1.0)
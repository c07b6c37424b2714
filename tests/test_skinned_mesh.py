import numpy as np
import pytest

from glistscene.skinned_mesh import SkinnedMesh
from glistscene.vbo import Vertex


def _triangle():
    return [
        Vertex(position=(0, 0, 0)),
        Vertex(position=(1, 0, 0)),
        Vertex(position=(0, 1, 0)),
    ]


def test_resize_keeps_existing_and_zero_fills():
    mesh = SkinnedMesh()
    mesh.resize_animation(2)
    mesh.set_vertex_pos(1, (1, 2, 3))
    mesh.resize_animation(4)
    assert mesh.animation_vertices_num == 4
    assert np.allclose(mesh.vertex_pos(1), (1, 2, 3))
    assert np.allclose(mesh.vertex_pos(3), (0, 0, 0))


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        SkinnedMesh().resize_animation(-1)


def test_pos_norm_round_trip_and_reset():
    mesh = SkinnedMesh()
    mesh.resize_animation(3)
    mesh.set_vertex_pos(0, (4, 5, 6))
    mesh.set_vertex_norm(2, (0, 1, 0))
    assert np.allclose(mesh.vertex_pos(0), (4, 5, 6))
    assert np.allclose(mesh.vertex_norm(2), (0, 1, 0))
    mesh.reset_animation()
    assert np.allclose(mesh.vertex_pos(0), 0)
    assert np.allclose(mesh.vertex_norm(2), 0)
    assert mesh.animation_vertices_num == 3


def test_clear_animation_empties():
    mesh = SkinnedMesh()
    mesh.resize_animation(3)
    mesh.clear_animation()
    assert mesh.animation_vertices_num == 0
    with pytest.raises(IndexError):
        mesh.vertex_pos(0)


def test_returned_vector_is_a_copy():
    mesh = SkinnedMesh()
    mesh.resize_animation(1)
    got = mesh.vertex_pos(0)
    got[0] = 9.0
    assert np.allclose(mesh.vertex_pos(0), 0)


def test_vertex_animation_data_round_trip():
    mesh = SkinnedMesh()
    mesh.resize_vertex_animation_data(2, 3, 4, False)
    assert mesh.vertex_animation_data_shape == (2, 3, 4)
    assert mesh.vbo_frames == []
    mesh.set_vertex_pos_data(1, 2, 3, (1, 1, 1))
    mesh.set_vertex_norm_data(1, 2, 3, (0, 0, 1))
    assert np.allclose(mesh.vertex_pos_data(1, 2, 3), (1, 1, 1))
    assert np.allclose(mesh.vertex_norm_data(1, 2, 3), (0, 0, 1))
    mesh.set_vertex_pos_data(0, 0, 0, (2, 2, 2))
    mesh.reset_vertex_animation_data(1, 2)
    assert np.allclose(mesh.vertex_pos_data(1, 2, 3), 0)
    assert np.allclose(mesh.vertex_norm_data(1, 2, 3), 0)
    assert np.allclose(mesh.vertex_pos_data(0, 0, 0), (2, 2, 2))


def test_on_vram_allocates_frame_buffers():
    mesh = SkinnedMesh()
    mesh.resize_vertex_animation_data(2, 3, 3, True)
    assert len(mesh.vbo_frames) == 2
    assert all(len(row) == 3 for row in mesh.vbo_frames)
    mesh.set_vertices_data(1, 2, _triangle(), [0, 1, 2])
    frame = mesh.vbo_frames[1][2]
    assert frame.vertices_num() == 3
    assert frame.indices_num() == 3
    assert not mesh.vbo_frames[0][0].is_vertex_data_allocated()


def test_set_vertices_data_without_indices():
    mesh = SkinnedMesh()
    mesh.resize_vertex_animation_data(1, 1, 3, True)
    mesh.set_vertices_data(0, 0, _triangle(), [])
    assert mesh.vbo_frames[0][0].is_vertex_data_allocated()
    assert not mesh.vbo_frames[0][0].is_index_data_allocated()


def test_set_frame_no_remembers_previous():
    mesh = SkinnedMesh()
    mesh.set_frame_no(3)
    mesh.set_frame_no(5)
    assert mesh.frame_no == 5
    assert mesh.frame_no_old == 3


def test_apply_frame_copies_frame_vertices():
    mesh = SkinnedMesh(_triangle(), [0, 1, 2])
    mesh.resize_vertex_animation_data(1, 2, 3, False)
    mesh.set_vertex_pos_data(0, 1, 2, (7, 8, 9))
    mesh.set_vertex_norm_data(0, 1, 2, (0, 0, 1))
    mesh.vertex_animated = True
    mesh.set_frame_no(1)
    drawn = mesh.apply_frame()
    assert drawn is mesh.vbo
    assert mesh.vertices[2].position == (7.0, 8.0, 9.0)
    assert mesh.vertices[2].normal == (0.0, 0.0, 1.0)
    assert mesh.frame_no_old == 1
    assert np.allclose(mesh.vbo.data[2, :3], (7, 8, 9))


def test_apply_frame_untouched_when_not_animated():
    mesh = SkinnedMesh(_triangle(), [0, 1, 2])
    mesh.resize_vertex_animation_data(1, 2, 3, False)
    mesh.set_vertex_pos_data(0, 1, 1, (5, 5, 5))
    mesh.set_frame_no(1)
    mesh.apply_frame()
    assert mesh.vertices[1].position == (1.0, 0.0, 0.0)


def test_apply_frame_on_vram_returns_frame_buffer():
    mesh = SkinnedMesh(_triangle(), [0, 1, 2])
    mesh.resize_vertex_animation_data(1, 3, 3, True)
    mesh.vertex_animation_stored_on_vram = True
    mesh.set_frame_no(2)
    assert mesh.apply_frame() is mesh.vbo_frames[0][2]
    assert mesh.frame_no_old == 2


def test_apply_frame_disabled_returns_none():
    mesh = SkinnedMesh(_triangle())
    mesh.enabled = False
    assert mesh.apply_frame() is None
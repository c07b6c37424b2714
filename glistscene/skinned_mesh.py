"""Meshes whose vertices follow bone animation, per frame or precomputed."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Sequence

import numpy as np

from glistscene.mesh import Mesh
from glistscene.texture import Texture
from glistscene.vbo import Vbo, Vertex


def _vec3(value: Sequence[float]) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


class SkinnedMesh(Mesh):
    """A mesh that keeps animated vertex positions and normals.

    Two stores are kept: a working set for the frame being computed, and
    per-animation, per-frame data filled when the mesh is made vertex animated.
    """

    def __init__(self, vertices: Sequence[Vertex] | None = None,
                 indices: Iterable[int] | None = None,
                 textures: Sequence[Texture] | None = None) -> None:
        super().__init__(vertices, indices, textures)
        self.vertex_animated = False
        self.vertex_animation_stored_on_vram = False
        self.frame_no = 0
        self.frame_no_old = 0
        self._pos = np.zeros((0, 3))
        self._norm = np.zeros((0, 3))
        self._pos_data = np.zeros((0, 0, 0, 3))
        self._norm_data = np.zeros((0, 0, 0, 3))
        self.vbo_frames: list[list[Vbo]] = []

    def resize_animation(self, vertices_num: int) -> None:
        """Resize the working set, keeping existing values and zero-filling new ones."""
        if vertices_num < 0:
            raise ValueError("vertices_num must not be negative")
        kept = min(vertices_num, len(self._pos))
        pos = np.zeros((vertices_num, 3))
        norm = np.zeros((vertices_num, 3))
        pos[:kept] = self._pos[:kept]
        norm[:kept] = self._norm[:kept]
        self._pos = pos
        self._norm = norm

    def reset_animation(self) -> None:
        """Zero every working position and normal."""
        self._pos[:] = 0.0
        self._norm[:] = 0.0

    def set_vertex_pos(self, vertex_no: int, value: Sequence[float]) -> None:
        """Set the working position of a vertex."""
        self._pos[vertex_no] = _vec3(value)

    def set_vertex_norm(self, vertex_no: int, value: Sequence[float]) -> None:
        """Set the working normal of a vertex."""
        self._norm[vertex_no] = _vec3(value)

    def vertex_pos(self, vertex_no: int) -> np.ndarray:
        """Working position of a vertex."""
        return self._pos[vertex_no].copy()

    def vertex_norm(self, vertex_no: int) -> np.ndarray:
        """Working normal of a vertex."""
        return self._norm[vertex_no].copy()

    def clear_animation(self) -> None:
        """Drop the working set."""
        self._pos = np.zeros((0, 3))
        self._norm = np.zeros((0, 3))

    @property
    def animation_vertices_num(self) -> int:
        return len(self._pos)

    def resize_vertex_animation_data(self, animation_num: int, frame_num: int,
                                     vertices_num: int, on_vram: bool) -> None:
        """Allocate zeroed per-frame data; with ``on_vram`` one buffer per frame too."""
        shape = (animation_num, frame_num, vertices_num, 3)
        if min(shape) < 0:
            raise ValueError("sizes must not be negative")
        self._pos_data = np.zeros(shape)
        self._norm_data = np.zeros(shape)
        if on_vram:
            self.vbo_frames = [[Vbo() for _ in range(frame_num)]
                               for _ in range(animation_num)]

    @property
    def vertex_animation_data_shape(self) -> tuple[int, int, int]:
        return self._pos_data.shape[:3]

    def reset_vertex_animation_data(self, animation_no: int, frame_no: int) -> None:
        """Zero the positions and normals of one frame."""
        self._pos_data[animation_no, frame_no] = 0.0
        self._norm_data[animation_no, frame_no] = 0.0

    def set_vertex_pos_data(self, animation_no: int, frame_no: int, vertex_no: int,
                            value: Sequence[float]) -> None:
        """Set a vertex position of one frame."""
        self._pos_data[animation_no, frame_no, vertex_no] = _vec3(value)

    def set_vertex_norm_data(self, animation_no: int, frame_no: int, vertex_no: int,
                             value: Sequence[float]) -> None:
        """Set a vertex normal of one frame."""
        self._norm_data[animation_no, frame_no, vertex_no] = _vec3(value)

    def vertex_pos_data(self, animation_no: int, frame_no: int, vertex_no: int) -> np.ndarray:
        """Vertex position of one frame."""
        return self._pos_data[animation_no, frame_no, vertex_no].copy()

    def vertex_norm_data(self, animation_no: int, frame_no: int, vertex_no: int) -> np.ndarray:
        """Vertex normal of one frame."""
        return self._norm_data[animation_no, frame_no, vertex_no].copy()

    def set_vertices_data(self, animation_no: int, frame_no: int,
                          vertices: Sequence[Vertex], indices: Iterable[int]) -> None:
        """Fill the buffer of one frame; indices are stored only when there are some."""
        frame_vbo = self.vbo_frames[animation_no][frame_no]
        frame_vbo.set_vertex_data(vertices)
        index_list = [int(i) for i in indices]
        if index_list:
            frame_vbo.set_index_data(index_list)

    def set_frame_no(self, frame_no: int) -> None:
        """Select the frame to show, remembering the previous one."""
        self.frame_no_old = self.frame_no
        self.frame_no = frame_no

    def apply_frame(self) -> Vbo | None:
        """Bring the geometry to the selected frame and return the buffer to draw.

        Without buffers per frame, the vertices of the first animation's
        current frame are copied into the mesh when the frame has changed.
        Returns None when the mesh is disabled.
        """
        if not self.vertex_animation_stored_on_vram:
            if self.vertex_animated and self.frame_no != self.frame_no_old:
                frame = self.frame_no
                for i in range(self.vbo.vertices_num()):
                    self._vertices[i] = dataclasses.replace(
                        self._vertices[i],
                        position=tuple(self._pos_data[0, frame, i]),
                        normal=tuple(self._norm_data[0, frame, i]),
                    )
                self.vbo.set_vertex_data(self._vertices)
                self.frame_no_old = self.frame_no
            return self.vbo if self.enabled else None
        if not self.enabled:
            return None
        self.frame_no_old = self.frame_no
        return self.vbo_frames[0][self.frame_no]
"""Vertex layout and vertex/index buffer state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

FLOATS_PER_VERTEX = 14


def _floats(values: Iterable[float], size: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} components, got {len(result)}")
    return result


@dataclass
class Vertex:
    """One vertex: position, normal, texture coordinates, tangent and bitangent."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texcoords: tuple[float, float] = (0.0, 0.0)
    tangent: tuple[float, float, float] = (0.0, 0.0, 0.0)
    bitangent: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = _floats(self.position, 3, "position")
        self.normal = _floats(self.normal, 3, "normal")
        self.texcoords = _floats(self.texcoords, 2, "texcoords")
        self.tangent = _floats(self.tangent, 3, "tangent")
        self.bitangent = _floats(self.bitangent, 3, "bitangent")


def _interleave(vertices: Sequence[Vertex]) -> np.ndarray:
    rows = [
        (*v.position, *v.normal, *v.texcoords, *v.tangent, *v.bitangent)
        for v in vertices
    ]
    if not rows:
        return np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
    return np.array(rows, dtype=np.float32)


class Vbo:
    """Holds vertex and index data ready to be drawn."""

    def __init__(self) -> None:
        self.enabled = True
        self.vertices: list[Vertex] = []
        self.indices = np.zeros(0, dtype=np.uint32)
        self.data = np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
        self.coord_num = 0
        self._total_vertices = 0
        self._total_indices = 0
        self._vertex_allocated = False
        self._index_allocated = False

    def set_vertex_data(self, vertices: Sequence[Vertex]) -> None:
        """Store full vertices, interleaved 14 floats per vertex."""
        self.vertices = list(vertices)
        self.data = _interleave(self.vertices)
        self.coord_num = FLOATS_PER_VERTEX
        self._total_vertices = len(self.vertices)
        self._vertex_allocated = True

    def set_raw_vertex_data(self, values: Iterable[float], coord_num: int) -> None:
        """Store a flat list of floats, ``coord_num`` per vertex."""
        if coord_num <= 0:
            raise ValueError("coord_num must be positive")
        flat = np.asarray(list(values), dtype=np.float32).reshape(-1)
        if flat.size % coord_num:
            raise ValueError(
                f"{flat.size} values do not split into vertices of {coord_num}")
        self.data = flat.reshape(-1, coord_num)
        self.vertices = []
        self.coord_num = coord_num
        self._total_vertices = flat.size // coord_num
        self._vertex_allocated = True

    def set_index_data(self, indices: Iterable[int]) -> None:
        """Store the triangle indices."""
        values = [int(i) for i in indices]
        if any(i < 0 for i in values):
            raise ValueError("indices must not be negative")
        self.indices = np.array(values, dtype=np.uint32)
        self._total_indices = len(values)
        self._index_allocated = True

    def enable(self) -> None:
        """Allow the buffer to be drawn."""
        self.enabled = True

    def disable(self) -> None:
        """Keep the buffer from being drawn."""
        self.enabled = False

    def vertices_num(self) -> int:
        """Number of vertices stored."""
        return self._total_vertices

    def indices_num(self) -> int:
        """Number of indices stored."""
        return self._total_indices

    def is_vertex_data_allocated(self) -> bool:
        """Whether vertex data has been set."""
        return self._vertex_allocated

    def is_index_data_allocated(self) -> bool:
        """Whether index data has been set."""
        return self._index_allocated
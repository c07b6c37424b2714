"""An axis-aligned cube from -1 to 1 on every axis."""

from __future__ import annotations

from glistscene.mesh import Mesh
from glistscene.vbo import Vertex

# (position, texcoords) per vertex, four per face.
_VERTEX_DATA = (
    # back
    ((-1.0, 1.0, -1.0), (1.0, 1.0)),
    ((1.0, 1.0, -1.0), (0.0, 1.0)),
    ((-1.0, -1.0, -1.0), (1.0, 0.0)),
    ((1.0, -1.0, -1.0), (0.0, 0.0)),
    # front
    ((-1.0, 1.0, 1.0), (0.0, 1.0)),
    ((1.0, 1.0, 1.0), (1.0, 1.0)),
    ((-1.0, -1.0, 1.0), (0.0, 0.0)),
    ((1.0, -1.0, 1.0), (1.0, 0.0)),
    # left
    ((-1.0, 1.0, -1.0), (0.0, 1.0)),
    ((-1.0, -1.0, -1.0), (0.0, 0.0)),
    ((-1.0, -1.0, 1.0), (1.0, 0.0)),
    ((-1.0, 1.0, 1.0), (1.0, 1.0)),
    # right
    ((1.0, 1.0, -1.0), (1.0, 1.0)),
    ((1.0, -1.0, -1.0), (1.0, 0.0)),
    ((1.0, -1.0, 1.0), (0.0, 0.0)),
    ((1.0, 1.0, 1.0), (0.0, 1.0)),
    # top
    ((-1.0, -1.0, -1.0), (0.0, 1.0)),
    ((-1.0, -1.0, 1.0), (0.0, 0.0)),
    ((1.0, -1.0, 1.0), (1.0, 0.0)),
    ((1.0, -1.0, -1.0), (1.0, 1.0)),
    # bottom
    ((-1.0, 1.0, -1.0), (0.0, 0.0)),
    ((-1.0, 1.0, 1.0), (0.0, 1.0)),
    ((1.0, 1.0, 1.0), (1.0, 1.0)),
    ((1.0, 1.0, -1.0), (1.0, 0.0)),
)

_NORMAL_DATA = (
    # back
    (-1.0, 1.0, -1.0), (1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0),
    # front
    (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0),
    # left
    (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, 1.0, 1.0),
    # right
    (1.0, 1.0, -1.0), (1.0, -1.0, -1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 1.0),
    # top
    (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
    # bottom
    (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (1.0, 1.0, -1.0),
)

_INDEX_DATA = (
    0, 2, 3, 0, 1, 3,        # back
    4, 6, 7, 4, 5, 7,        # front
    8, 9, 10, 11, 8, 10,     # left
    12, 13, 14, 15, 12, 14,  # right
    16, 17, 18, 16, 19, 18,  # top
    20, 21, 22, 20, 23, 22,  # bottom
)


class Box(Mesh):
    """A cube of 24 vertices and 12 triangles with per-face texture coordinates."""

    def __init__(self) -> None:
        super().__init__()
        vertices = [
            Vertex(position=pos, normal=normal, texcoords=uv)
            for (pos, uv), normal in zip(_VERTEX_DATA, _NORMAL_DATA)
        ]
        self.set_vertices(vertices, _INDEX_DATA)
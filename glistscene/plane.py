"""A flat unit quad in the xy plane."""

from __future__ import annotations

from glistscene.mesh import Mesh
from glistscene.vbo import Vertex

_CORNERS = (
    ((1.0, 1.0, 0.0), (1.0, 1.0)),    # top right
    ((1.0, -1.0, 0.0), (1.0, 0.0)),   # bottom right
    ((-1.0, -1.0, 0.0), (0.0, 0.0)),  # bottom left
    ((-1.0, 1.0, 0.0), (0.0, 1.0)),   # top left
)
_INDICES = (0, 1, 3, 1, 2, 3)


class Plane(Mesh):
    """A square from -1 to 1 on x and y, made of two triangles."""

    def __init__(self) -> None:
        super().__init__()
        vertices = [Vertex(position=pos, texcoords=uv) for pos, uv in _CORNERS]
        self.set_vertices(vertices, _INDICES)
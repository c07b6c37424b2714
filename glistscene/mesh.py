"""Meshes: vertices, indices, textures and a material on a scene node."""

from __future__ import annotations

from typing import Iterable, Sequence

from glistscene.material import Material
from glistscene.node import Node
from glistscene.texture import Texture, TextureType
from glistscene.vbo import Vbo, Vertex


class Mesh(Node):
    """A node drawn from a vertex buffer with a material."""

    def __init__(self, vertices: Sequence[Vertex] | None = None,
                 indices: Iterable[int] | None = None,
                 textures: Sequence[Texture] | None = None) -> None:
        super().__init__()
        self.vbo = Vbo()
        self.material = Material()
        self._vertices: list[Vertex] = []
        self._indices: list[int] = []
        self.textures: list[Texture] = []
        if vertices is not None:
            self.set_vertices(vertices, indices)
        if textures is not None:
            self.set_textures(textures)

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    def set_vertices(self, vertices: Sequence[Vertex],
                     indices: Iterable[int] | None = None) -> None:
        """Replace the geometry; indices are only uploaded when there are some."""
        self._vertices = list(vertices)
        self._indices = [int(i) for i in indices] if indices is not None else []
        self.vbo.set_vertex_data(self._vertices)
        if self._indices:
            self.vbo.set_index_data(self._indices)

    def set_textures(self, textures: Iterable[Texture]) -> None:
        """Assign each texture to the material map its type names."""
        for texture in textures:
            if texture.type == TextureType.DIFFUSE:
                self.material.set_diffuse_map(texture)
            elif texture.type == TextureType.SPECULAR:
                self.material.set_specular_map(texture)
            elif texture.type == TextureType.NORMAL:
                self.material.set_normal_map(texture)

    def add_texture(self, texture: Texture) -> None:
        """Append a texture to be bound when drawing."""
        self.textures.append(texture)

    def get_texture(self, texture_no: int) -> Texture:
        """Texture at the given position; raises IndexError if out of range."""
        return self.textures[texture_no]

    def vertices_num(self) -> int:
        """Number of vertices in the buffer."""
        return self.vbo.vertices_num()

    def indices_num(self) -> int:
        """Number of indices in the buffer."""
        return self.vbo.indices_num()

    def sampler_bindings(self) -> list[tuple[str, int]]:
        """Sampler uniform names with the texture unit each added texture uses.

        The name is the texture type number followed by a running count for
        that type, starting at 1.
        """
        counters = {role: 1 for role in TextureType}
        bindings = []
        for unit, texture in enumerate(self.textures):
            number = ""
            if texture.type in counters:
                role = TextureType(texture.type)
                number = str(counters[role])
                counters[role] += 1
            bindings.append((str(int(texture.type)) + number, unit))
        return bindings
"""Surface material: colours, shininess and texture maps."""

from __future__ import annotations

import copy

from glistscene.color import Color
from glistscene.texture import Texture


class Material:
    """Ambient, diffuse and specular colours with optional texture maps."""

    def __init__(self) -> None:
        self.ambient = Color()
        self.diffuse = Color()
        self.specular = Color()
        self.shininess = 0.5
        self.diffuse_map = Texture()
        self.specular_map = Texture()
        self.normal_map = Texture()
        self.diffuse_map_enabled = False
        self.specular_map_enabled = False
        self.normal_map_enabled = False

    def set_diffuse_map(self, texture: Texture) -> None:
        """Use a copy of the texture as diffuse map and enable it."""
        self.diffuse_map = copy.copy(texture)
        self.diffuse_map_enabled = True

    def set_specular_map(self, texture: Texture) -> None:
        """Use a copy of the texture as specular map and enable it."""
        self.specular_map = copy.copy(texture)
        self.specular_map_enabled = True

    def set_normal_map(self, texture: Texture) -> None:
        """Use a copy of the texture as normal map and enable it."""
        self.normal_map = copy.copy(texture)
        self.normal_map_enabled = True
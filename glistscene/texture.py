"""Textures and images: pixel data, file paths, texture roles and quad geometry."""

from __future__ import annotations

import itertools
from enum import IntEnum

import numpy as np
from PIL import Image as PILImage

from glistscene.rect import Rect

_FORMATS_BY_COMPONENTS = {1: "RED", 3: "RGB", 4: "RGBA"}
_KEPT_MODES = ("L", "LA", "RGB", "RGBA")

_texture_ids = itertools.count(1)


class TextureType(IntEnum):
    """Role a texture plays in a material."""

    DIFFUSE = 0
    SPECULAR = 1
    NORMAL = 2
    HEIGHT = 3


_TYPE_NAMES = {
    TextureType.DIFFUSE: "texture_diffuse",
    TextureType.SPECULAR: "texture_specular",
    TextureType.NORMAL: "texture_normal",
    TextureType.HEIGHT: "texture_height",
}


def _last_separator(fname: str) -> int:
    return max(fname.rfind("\\"), fname.rfind("/"))


def dir_name(fname: str) -> str:
    """Part of the path before the last separator, or "" if there is none."""
    pos = _last_separator(fname)
    return "" if pos < 0 else fname[:pos]


def file_name(fname: str) -> str:
    """Part of the path after the last separator, or "" if there is none."""
    pos = _last_separator(fname)
    return "" if pos < 0 else fname[pos + 1:]


def _read_pixels(path: str) -> np.ndarray:
    try:
        with PILImage.open(path) as img:
            img.load()
            mode = img.mode
            if mode in ("1", "I", "F") or mode.startswith("I;"):
                img = img.convert("L")
            elif mode not in _KEPT_MODES:
                has_alpha = "A" in img.getbands() or "transparency" in img.info
                img = img.convert("RGBA" if has_alpha else "RGB")
            return np.asarray(img, dtype=np.uint8).copy()
    except OSError as exc:
        raise OSError(f"Texture failed to load at path: {path}") from exc


class Texture:
    """A texture with its size, pixel format, role and source path."""

    def __init__(self, width: int = 0, height: int = 0, fmt: str = "RGBA",
                 is_fbo: bool | None = None) -> None:
        sized = width > 0 or height > 0
        self.id = next(_texture_ids) if sized else 0
        self.format = fmt
        self.type = TextureType.DIFFUSE
        self.full_path = ""
        self.directory = ""
        self.filename = ""
        self.width = width
        self.height = height
        self.component_num = 0
        self.data: np.ndarray | None = None
        self.mutable = False
        self.is_fbo = sized if is_fbo is None else bool(is_fbo)

    def _load_file(self, file_path: str, mutable: bool) -> int:
        self.full_path = file_path
        self.directory = dir_name(file_path)
        self.filename = file_name(file_path)
        self.id = next(_texture_ids)
        pixels = _read_pixels(file_path)
        self.height, self.width = pixels.shape[:2]
        self.component_num = 1 if pixels.ndim == 2 else pixels.shape[2]
        self._set_data(pixels, mutable)
        return self.id

    def _set_data(self, pixels: np.ndarray, mutable: bool) -> None:
        self.mutable = mutable
        self.format = _FORMATS_BY_COMPONENTS.get(self.component_num, self.format)
        self.data = pixels if mutable else None

    def load(self, file_path: str) -> int:
        """Read an image file into the texture and return its id.

        Raises OSError if the file cannot be read as an image.
        """
        return self._load_file(file_path, mutable=False)

    def type_name(self, texture_type: TextureType | int | None = None) -> str:
        """Sampler name for a texture role, by default this texture's own."""
        role = self.type if texture_type is None else TextureType(texture_type)
        return _TYPE_NAMES[role]

    def quad_vertices(self, sx: float = 0, sy: float = 0,
                      sw: float | None = None, sh: float | None = None) -> np.ndarray:
        """Six (x, y, u, v) rows of a unit quad showing the given sub-region.

        Texture coordinates are flipped vertically for framebuffer textures.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture has no size")
        if sw is None:
            sw = self.width
        if sh is None:
            sh = self.height
        u0 = sx / self.width
        u1 = (sx + sw) / self.width
        v0 = sy / self.height
        v1 = (sy + sh) / self.height
        if self.is_fbo:
            top, bottom = v0, v1
        else:
            top, bottom = v1, v0
        return np.array([
            [0.0, 1.0, u0, top],
            [1.0, 0.0, u1, bottom],
            [0.0, 0.0, u0, bottom],
            [0.0, 1.0, u0, top],
            [1.0, 1.0, u1, top],
            [1.0, 0.0, u1, bottom],
        ])

    def sub_quad(self, src: Rect) -> np.ndarray:
        """Quad vertices for the region a rectangle marks out."""
        return self.quad_vertices(src.left, src.top, src.width(), src.height())


class Image(Texture):
    """A texture that keeps its pixel data after loading."""

    def load(self, full_path: str) -> int:
        """Read an image file, keep its pixels and return the texture id."""
        return self._load_file(full_path, mutable=True)

    def clear_data(self) -> None:
        """Drop the kept pixel data."""
        self.data = None
        self.mutable = False
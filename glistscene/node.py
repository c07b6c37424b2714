"""Scene-graph node holding a position, orientation and scale."""

from __future__ import annotations

import itertools
from typing import Sequence

import numpy as np

from glistscene import quaternion

_DEG_TO_RAD = 3.141592 / 180.0
_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _scale_triple(sx, sy, sz) -> np.ndarray:
    if sy is None and sz is None:
        return np.broadcast_to(np.asarray(sx, dtype=float), (3,)).copy()
    return np.array([sx, sy, sz], dtype=float)


class Node:
    """A transformable object with a local transformation matrix."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self.id = next(Node._ids)
        self.parent: Node | None = None
        self.enabled = True
        self._position = np.zeros(3)
        self._orientation = quaternion.angle_axis(0.0, (0.0, 0.0, 0.0))
        self._scale = np.ones(3)
        self._matrix = np.identity(4)
        self._update_matrix()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def orientation(self) -> np.ndarray:
        return self._orientation.copy()

    @property
    def scale_vector(self) -> np.ndarray:
        return self._scale.copy()

    @property
    def transformation_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    def _update_matrix(self) -> None:
        self._matrix = quaternion.compose_matrix(self._position, self._orientation, self._scale)

    def _local_axis(self, column: int) -> np.ndarray:
        axis = self._matrix[:3, column]
        return axis / np.linalg.norm(axis)

    def move(self, dx: float, dy: float, dz: float) -> None:
        """Translate by the given offsets."""
        self._position = self._position + np.array([dx, dy, dz], dtype=float)
        self._update_matrix()

    def set_position(self, px: float, py: float, pz: float) -> None:
        """Place the node at the given coordinates."""
        self._position = np.array([px, py, pz], dtype=float)
        self._update_matrix()

    def rotate(self, angle: float, ax: float, ay: float, az: float) -> None:
        """Rotate by ``angle`` degrees about the given axis."""
        self.rotate_quat(quaternion.angle_axis(angle * _DEG_TO_RAD, (ax, ay, az)))

    def rotate_quat(self, q: Sequence[float]) -> None:
        """Append a quaternion rotation to the orientation."""
        self._orientation = quaternion.multiply(self._orientation, q)
        self._update_matrix()

    def rotate_around(self, radians: float, axis: Sequence[float], point: Sequence[float]) -> None:
        """Swing the position about ``point`` by ``radians`` around ``axis``."""
        pivot = np.asarray(point, dtype=float)
        q = quaternion.angle_axis(radians, axis)
        self._position = quaternion.rotate_vector(q, self._position - pivot) + pivot
        self._update_matrix()

    def scale(self, sx, sy=None, sz=None) -> None:
        """Multiply the scale; a single value scales all axes."""
        self._scale = self._scale * _scale_triple(sx, sy, sz)
        self._update_matrix()

    def set_scale(self, sx, sy=None, sz=None) -> None:
        """Replace the scale; a single value or vector is accepted too."""
        self._scale = _scale_triple(sx, sy, sz)
        self._update_matrix()

    def set_orientation(self, q: Sequence[float]) -> None:
        """Replace the orientation quaternion."""
        self._orientation = np.asarray(q, dtype=float).reshape(4).copy()
        self._update_matrix()

    def set_orientation_euler(self, angles: Sequence[float]) -> None:
        """Append rotations about x, then z, then y by the given radians."""
        x, y, z = np.asarray(angles, dtype=float).reshape(3)
        q = self._orientation
        q = quaternion.multiply(q, quaternion.angle_axis(x, _X_AXIS))
        q = quaternion.multiply(q, quaternion.angle_axis(z, _Z_AXIS))
        q = quaternion.multiply(q, quaternion.angle_axis(y, _Y_AXIS))
        self._orientation = q
        self._update_matrix()

    def dolly(self, distance: float) -> None:
        """Move forward or backward along the local z axis."""
        self._position = self._position + self._local_axis(2) * distance
        self._update_matrix()

    def truck(self, distance: float) -> None:
        """Move right or left along the local x axis."""
        self._position = self._position + self._local_axis(0) * distance
        self._update_matrix()

    def boom(self, distance: float) -> None:
        """Move up or down along the local y axis."""
        self._position = self._position + self._local_axis(1) * distance
        self._update_matrix()

    def tilt(self, radians: float) -> None:
        """Rotate about the local x axis."""
        self.rotate_quat(quaternion.angle_axis(radians, _X_AXIS))

    def pan(self, radians: float) -> None:
        """Rotate about the local y axis."""
        self.rotate_quat(quaternion.angle_axis(radians, _Y_AXIS))

    def roll(self, radians: float) -> None:
        """Rotate about the local z axis."""
        self.rotate_quat(quaternion.angle_axis(radians, _Z_AXIS))

    def set_transformation_matrix(self, matrix) -> None:
        """Override the local matrix until the next transform change."""
        self._matrix = np.asarray(matrix, dtype=float).reshape(4, 4).copy()

    def remove_parent(self) -> None:
        """Detach the node from its parent."""
        self.parent = None
"""Perspective camera with a separately steerable look transform."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from glistscene import quaternion
from glistscene.node import Node, _scale_triple

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


class Camera(Node):
    """A node whose look matrix defines the view."""

    def __init__(self, px: float = 0.0, py: float = 0.0, pz: float = 0.0) -> None:
        self.fov = 60.0
        self.near_clip = 0.01
        self.far_clip = 1000.0
        self._look_position = np.zeros(3)
        self._look_orientation = quaternion.angle_axis(0.0, (0.0, 0.0, 0.0))
        self._look_scale = np.ones(3)
        self._look_matrix = np.identity(4)
        super().__init__()
        self.set_position(px, py, pz)

    @property
    def look_matrix(self) -> np.ndarray:
        return self._look_matrix.copy()

    @property
    def look_orientation(self) -> np.ndarray:
        return self._look_orientation.copy()

    @property
    def look_position(self) -> np.ndarray:
        return self._look_position.copy()

    def _update_look(self) -> None:
        self._look_matrix = quaternion.compose_matrix(
            self._look_position, self._look_orientation, self._look_scale)

    def _turn_look(self, q: Sequence[float]) -> None:
        self._look_orientation = quaternion.multiply(self._look_orientation, q)
        self._update_look()

    def move(self, dx: float, dy: float, dz: float) -> None:
        super().move(dx, dy, dz)
        self._look_position = self._look_position + np.array([dx, dy, dz], dtype=float)
        self._update_look()

    def set_position(self, px: float, py: float, pz: float) -> None:
        super().set_position(px, py, pz)
        self._look_position = np.array([px, py, pz], dtype=float)
        self._update_look()

    def rotate(self, angle: float, ax: float, ay: float, az: float) -> None:
        """Rotate the node by degrees; the look turns by ``angle`` taken as radians."""
        super().rotate(angle, ax, ay, az)
        self._turn_look(quaternion.angle_axis(angle, (ax, ay, az)))

    def rotate_quat(self, q: Sequence[float]) -> None:
        super().rotate_quat(q)
        self._turn_look(q)

    def scale(self, sx, sy=None, sz=None) -> None:
        super().scale(sx, sy, sz)
        self._look_scale = self._look_scale * _scale_triple(sx, sy, sz)
        self._update_look()

    def set_scale(self, sx, sy=None, sz=None) -> None:
        super().set_scale(sx, sy, sz)
        self._look_scale = _scale_triple(sx, sy, sz)
        self._update_look()

    def set_orientation(self, q: Sequence[float]) -> None:
        super().set_orientation(q)
        self._look_orientation = np.asarray(q, dtype=float).reshape(4).copy()
        self._update_look()

    def set_orientation_euler(self, angles: Sequence[float]) -> None:
        super().set_orientation_euler(angles)
        x, y, z = np.asarray(angles, dtype=float).reshape(3)
        q = self._look_orientation
        q = quaternion.multiply(q, quaternion.angle_axis(x, _X_AXIS))
        q = quaternion.multiply(q, quaternion.angle_axis(z, _Z_AXIS))
        q = quaternion.multiply(q, quaternion.angle_axis(y, _Y_AXIS))
        self._look_orientation = q
        self._update_look()

    def dolly(self, distance: float) -> None:
        super().dolly(distance)
        self._look_position = self._look_position + self._local_axis(2) * distance
        self._update_look()

    def truck(self, distance: float) -> None:
        super().truck(distance)
        self._look_position = self._look_position + self._local_axis(0) * distance
        self._update_look()

    def boom(self, distance: float) -> None:
        super().boom(distance)
        self._look_position = self._look_position + self._local_axis(1) * distance
        self._update_look()

    def tilt(self, radians: float) -> None:
        super().tilt(radians)
        self._turn_look(quaternion.angle_axis(radians, _X_AXIS))

    def pan(self, radians: float) -> None:
        super().pan(radians)
        self._turn_look(quaternion.angle_axis(radians, _Y_AXIS))

    def roll(self, radians: float) -> None:
        super().roll(radians)
        self._turn_look(quaternion.angle_axis(radians, _Z_AXIS))

    def rotate_look(self, angle: float, ax: float, ay: float, az: float) -> None:
        """Turn only the look by ``angle`` radians about the given axis."""
        self._turn_look(quaternion.angle_axis(angle, (ax, ay, az)))

    def reset_look(self) -> None:
        """Point the look back along the node's own orientation."""
        self._look_orientation = self._orientation.copy()
        self._update_look()

    def projection_matrix(self, aspect: float) -> np.ndarray:
        """Right-handed perspective projection for the given aspect ratio."""
        tan_half = math.tan(math.radians(self.fov) / 2.0)
        near, far = self.near_clip, self.far_clip
        m = np.zeros((4, 4))
        m[0, 0] = 1.0 / (aspect * tan_half)
        m[1, 1] = 1.0 / tan_half
        m[2, 2] = -(far + near) / (far - near)
        m[3, 2] = -1.0
        m[2, 3] = -(2.0 * far * near) / (far - near)
        return m

    def view_matrix(self) -> np.ndarray:
        """Inverse of the look matrix."""
        return np.linalg.inv(self._look_matrix)
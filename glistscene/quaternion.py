"""Quaternion helpers: quaternions are numpy arrays ordered (w, x, y, z).

Matrices are 4x4 numpy arrays acting on column vectors, so the translation
sits in the last column and column ``i`` of the upper 3x3 block is local axis ``i``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_SLERP_LINEAR_THRESHOLD = 0.0001


def _vec3(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(3)


def _quat(q: Sequence[float]) -> np.ndarray:
    return np.asarray(q, dtype=float).reshape(4)


def identity() -> np.ndarray:
    """The quaternion that rotates nothing."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def angle_axis(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Rotation of ``angle`` radians about ``axis``; the axis is used as given."""
    half = angle * 0.5
    s = math.sin(half)
    a = _vec3(axis)
    return np.array([math.cos(half), a[0] * s, a[1] * s, a[2] * s])


def multiply(q1: Sequence[float], q2: Sequence[float]) -> np.ndarray:
    """Hamilton product ``q1 * q2``: applying ``q2`` first, then ``q1``."""
    w1, x1, y1, z1 = _quat(q1)
    w2, x2, y2, z2 = _quat(q2)
    return np.array([
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
        w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
    ])


def slerp(q1: Sequence[float], q2: Sequence[float], t: float) -> np.ndarray:
    """Spherical interpolation along the shorter arc, linear when nearly equal."""
    start = _quat(q1)
    end = _quat(q2)
    cosom = float(np.dot(start, end))
    if cosom < 0.0:
        cosom = -cosom
        end = -end
    if 1.0 - cosom > _SLERP_LINEAR_THRESHOLD:
        omega = math.acos(cosom)
        sinom = math.sin(omega)
        sclp = math.sin((1.0 - t) * omega) / sinom
        sclq = math.sin(t * omega) / sinom
    else:
        sclp = 1.0 - t
        sclq = t
    return sclp * start + sclq * end


def to_matrix(q: Sequence[float]) -> np.ndarray:
    """4x4 rotation matrix of a quaternion."""
    w, x, y, z = _quat(q)
    m = np.identity(4)
    m[0, 0] = 1.0 - 2.0 * (y * y + z * z)
    m[1, 0] = 2.0 * (x * y + w * z)
    m[2, 0] = 2.0 * (x * z - w * y)
    m[0, 1] = 2.0 * (x * y - w * z)
    m[1, 1] = 1.0 - 2.0 * (x * x + z * z)
    m[2, 1] = 2.0 * (y * z + w * x)
    m[0, 2] = 2.0 * (x * z + w * y)
    m[1, 2] = 2.0 * (y * z - w * x)
    m[2, 2] = 1.0 - 2.0 * (x * x + y * y)
    return m


def rotate_vector(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion."""
    quat = _quat(q)
    w = quat[0]
    u = quat[1:]
    vec = _vec3(v)
    uv = np.cross(u, vec)
    uuv = np.cross(u, uv)
    return vec + 2.0 * (w * uv + uuv)


def compose_matrix(position: Sequence[float], orientation: Sequence[float],
                   scale: Sequence[float]) -> np.ndarray:
    """Translation times rotation times scale."""
    translation = np.identity(4)
    translation[:3, 3] = _vec3(position)
    scaling = np.diag([*_vec3(scale), 1.0])
    return translation @ to_matrix(orientation) @ scaling
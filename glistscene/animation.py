"""Keyframed node animation: key lookup, interpolation and frame keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from glistscene import quaternion


@dataclass
class VectorKey:
    """A 3-vector value at a point in time."""

    time: float
    value: tuple[float, float, float]


@dataclass
class QuatKey:
    """A quaternion (w, x, y, z) at a point in time."""

    time: float
    value: tuple[float, float, float, float]


@dataclass
class NodeAnimation:
    """Position, rotation and scaling keys for one named node."""

    node_name: str
    position_keys: list[VectorKey] = field(default_factory=list)
    rotation_keys: list[QuatKey] = field(default_factory=list)
    scaling_keys: list[VectorKey] = field(default_factory=list)


@dataclass
class Animation:
    """A set of node channels sharing one duration."""

    duration: float
    channels: list[NodeAnimation] = field(default_factory=list)
    name: str = ""


def _frame_index(keys: Sequence, progress: float) -> int:
    frame = 0
    while frame < len(keys) - 1:
        if progress < keys[frame + 1].time:
            break
        frame += 1
    return frame


def _span(keys: Sequence, progress: float, duration: float):
    frame = _frame_index(keys, progress)
    key = keys[frame]
    next_key = keys[(frame + 1) % len(keys)]
    diff = next_key.time - key.time
    if diff < 0.0:
        diff += duration
    factor = (progress - key.time) / diff if diff > 0 else None
    return key, next_key, factor


def interpolate_position(keys: Sequence[VectorKey], progress: float,
                         duration: float) -> np.ndarray:
    """Linearly interpolated position at ``progress``; origin without keys."""
    if not keys:
        return np.zeros(3)
    key, next_key, factor = _span(keys, progress, duration)
    start = np.asarray(key.value, dtype=float)
    if factor is None:
        return start
    end = np.asarray(next_key.value, dtype=float)
    return start + (end - start) * factor


def interpolate_rotation(keys: Sequence[QuatKey], progress: float,
                         duration: float) -> np.ndarray:
    """Spherically interpolated rotation at ``progress``; identity without keys."""
    if not keys:
        return quaternion.identity()
    key, next_key, factor = _span(keys, progress, duration)
    if factor is None:
        return np.asarray(key.value, dtype=float)
    return quaternion.slerp(key.value, next_key.value, factor)


def find_scaling(keys: Sequence[VectorKey], progress: float) -> np.ndarray:
    """Scaling of the last key reached, without interpolation; unit without keys."""
    if not keys:
        return np.ones(3)
    return np.asarray(keys[_frame_index(keys, progress)].value, dtype=float)


def channel_transform(channel: NodeAnimation, progress: float,
                      duration: float) -> np.ndarray:
    """Local 4x4 transform of a channel at ``progress`` seconds."""
    position = interpolate_position(channel.position_keys, progress, duration)
    rotation = interpolate_rotation(channel.rotation_keys, progress, duration)
    scaling = find_scaling(channel.scaling_keys, progress)
    return quaternion.compose_matrix(position, rotation, scaling)


def animation_keys(frame_num: int) -> list[float]:
    """Evenly spaced normalised positions for ``frame_num`` frames, ending at 1."""
    keys: list[float] = []
    if frame_num > 1:
        step = 1.0 / (frame_num - 1)
        keys = [i * step for i in range(frame_num - 1)]
    keys.append(1.0)
    return keys
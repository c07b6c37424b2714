"""Scene lights: type, colours, attenuation and spot cut-off."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from glistscene import quaternion
from glistscene.color import Color
from glistscene.node import Node

_FORWARD = (0.0, 0.0, -1.0)


class LightType(IntEnum):
    """Kinds of light source."""

    AMBIENT = 0
    DIRECTIONAL = 1
    POINT = 2
    SPOT = 3


class Light(Node):
    """A light placed in the scene like any other node."""

    def __init__(self, light_type: LightType = LightType.POINT) -> None:
        super().__init__()
        self.type = LightType(light_type)
        self.lit = False
        self.ambient_color = Color(1.0, 1.0, 1.0, 1.0)
        self.diffuse_color = Color(1.0, 1.0, 1.0, 1.0)
        self.specular_color = Color(1.0, 1.0, 1.0, 1.0)
        self.attenuation = np.array([1.0, 0.0014, 0.000007])
        self.spot_cutoff = np.array([15.0, 5.0])
        self._direction = np.array(_FORWARD)

    def enable(self) -> None:
        """Switch the light on."""
        self.lit = True

    def disable(self) -> None:
        """Switch the light off."""
        self.lit = False

    def rotate(self, angle: float, ax: float, ay: float, az: float) -> None:
        """Rotate by degrees and recompute the facing direction."""
        super().rotate(angle, ax, ay, az)
        q = self._orientation
        inverse = np.array([q[0], -q[1], -q[2], -q[3]]) / float(np.dot(q, q))
        self._direction = quaternion.rotate_vector(inverse, _FORWARD)

    def direction(self) -> np.ndarray:
        """Direction the light faces."""
        return self._direction.copy()

    def set_attenuation(self, constant: float, linear: float, quadratic: float) -> None:
        """Set the constant, linear and quadratic attenuation terms."""
        self.attenuation = np.array([constant, linear, quadratic], dtype=float)

    @property
    def attenuation_constant(self) -> float:
        return float(self.attenuation[0])

    @property
    def attenuation_linear(self) -> float:
        return float(self.attenuation[1])

    @property
    def attenuation_quadratic(self) -> float:
        return float(self.attenuation[2])

    def set_spot_cutoff(self, angle: float, spread: float) -> None:
        """Set the inner cut-off angle and the spread beyond it."""
        self.spot_cutoff = np.array([angle, spread], dtype=float)

    @property
    def spot_cutoff_angle(self) -> float:
        return float(self.spot_cutoff[0])

    @property
    def spot_cutoff_spread(self) -> float:
        return float(self.spot_cutoff[1])

    def spot_outer_cutoff_angle(self) -> float:
        """Inner cut-off plus spread."""
        return float(self.spot_cutoff[0] + self.spot_cutoff[1])
import numpy as np
import pytest

from glistscene.light import Light, LightType


def test_defaults():
    light = Light()
    assert light.type == LightType.POINT
    assert light.lit is False
    assert np.allclose(light.attenuation, [1.0, 0.0014, 0.000007])
    assert light.spot_cutoff_angle == 15.0
    assert light.spot_cutoff_spread == 5.0
    assert np.allclose(light.direction(), [0.0, 0.0, -1.0])


def test_colors_default_to_white():
    light = Light(LightType.SPOT)
    assert light.type == LightType.SPOT
    assert (light.ambient_color.r, light.diffuse_color.g, light.specular_color.a) == (1.0, 1.0, 1.0)


def test_outer_cutoff_is_sum():
    light = Light()
    assert light.spot_outer_cutoff_angle() == 20.0
    light.set_spot_cutoff(30.0, 7.5)
    assert light.spot_outer_cutoff_angle() == pytest.approx(30.0 + 7.5)


def test_set_attenuation():
    light = Light()
    light.set_attenuation(0.5, 0.25, 0.125)
    assert light.attenuation_constant == 0.5
    assert light.attenuation_linear == 0.25
    assert light.attenuation_quadratic == 0.125


def test_enable_disable():
    light = Light()
    light.enable()
    assert light.lit is True
    light.disable()
    assert light.lit is False


def test_half_turn_reverses_direction():
    light = Light()
    light.rotate(180.0, 0.0, 1.0, 0.0)
    assert np.allclose(light.direction(), [0.0, 0.0, 1.0], atol=1e-5)


@pytest.mark.parametrize("angle,axis", [(30.0, (1, 0, 0)), (75.0, (0, 0.6, 0.8)), (-45.0, (0, 1, 0))])
def test_direction_stays_unit(angle, axis):
    light = Light()
    light.rotate(angle, *axis)
    assert np.linalg.norm(light.direction()) == pytest.approx(1.0)


def test_light_type_rejects_unknown():
    with pytest.raises(ValueError):
        Light(7)
import pytest

from utils.humidity import dew_point_for_humidity, relative_humidity


def test_saturated_air_is_100_percent():
    assert relative_humidity(20.0, 20.0) == pytest.approx(100.0)


def test_relative_humidity_typical_value():
    assert relative_humidity(20.0, 10.0) == pytest.approx(52.6, abs=0.5)


def test_dew_point_above_temperature_is_capped():
    assert relative_humidity(20.0, 25.0) == 100.0


def test_dew_point_for_humidity_inverts_relative_humidity():
    rh = relative_humidity(30.0, 12.0)
    assert dew_point_for_humidity(30.0, rh) == pytest.approx(12.0, abs=1e-9)
    assert dew_point_for_humidity(15.0, 100) == pytest.approx(15.0)


@pytest.mark.parametrize("rh", [0, -10, 100.5])
def test_dew_point_for_humidity_rejects_out_of_range(rh):
    with pytest.raises(ValueError):
        dew_point_for_humidity(20.0, rh)

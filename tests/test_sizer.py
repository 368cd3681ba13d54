# -*- coding: utf-8 -*-
import pytest

from powercalc.errors import EmptyInputError
from powercalc.sizing.models import Appliance, SystemParameters
from powercalc.sizing.sizer import INVERTER_OVERHEAD, calculate, daily_energy_wh


def test_fridge_and_tv_with_default_parameters(fridge_and_tv):
    result = calculate(fridge_and_tv, SystemParameters())

    assert result.daily_usage_wh == 4100
    assert result.solar_size_kw == pytest.approx(0.9647, abs=1e-4)
    assert result.battery_size_kwh == pytest.approx(4.8235, abs=1e-4)
    assert result.inverter_size_kw == pytest.approx(0.18)


def test_single_water_heater_two_backup_days():
    params = SystemParameters(sun_hours=5, backup_days=2, efficiency=0.85)
    result = calculate([Appliance(name="Water Heater", watts=3000, hours=1)], params)

    assert result.daily_usage_wh == 3000
    assert result.solar_size_kw == pytest.approx(0.7059, abs=1e-4)
    assert result.battery_size_kwh == pytest.approx(7.0588, abs=1e-4)
    assert result.inverter_size_kw == pytest.approx(3.6)


@pytest.mark.parametrize("sun_hours,efficiency", [(5, 0.85), (3.5, 0.7), (7.25, 1.0)])
def test_solar_size_formula(fridge_and_tv, sun_hours, efficiency):
    params = SystemParameters(sun_hours=sun_hours, efficiency=efficiency)
    result = calculate(fridge_and_tv, params)

    assert result.solar_size_kw == (4100 / (sun_hours * efficiency)) / 1000
    assert result.solar_size_kw == pytest.approx(4100 / (sun_hours * efficiency * 1000), rel=1e-12)


@pytest.mark.parametrize("backup_days,efficiency", [(1, 0.85), (2.5, 0.9), (3, 0.6)])
def test_battery_size_formula(fridge_and_tv, backup_days, efficiency):
    params = SystemParameters(backup_days=backup_days, efficiency=efficiency)
    result = calculate(fridge_and_tv, params)

    assert result.battery_size_kwh == (4100 * backup_days) / (efficiency * 1000)


def test_inverter_uses_largest_single_appliance_only():
    params = SystemParameters()
    base = calculate([Appliance(name="Microwave", watts=1000, hours=0.5)], params)
    more = calculate(
        [
            Appliance(name="Microwave", watts=1000, hours=9),
            Appliance(name="Fan", watts=75, hours=12),
            Appliance(name="TV", watts=999, hours=4),
        ],
        params,
    )

    assert base.inverter_size_kw == more.inverter_size_kw
    assert base.inverter_size_kw == (1000 * INVERTER_OVERHEAD) / 1000


def test_daily_usage_ignores_order(fridge_and_tv):
    params = SystemParameters()
    assert (
        calculate(fridge_and_tv, params).daily_usage_wh
        == calculate(list(reversed(fridge_and_tv)), params).daily_usage_wh
    )


def test_empty_list_raises():
    with pytest.raises(EmptyInputError):
        calculate([], SystemParameters())


def test_calculate_is_repeatable(fridge_and_tv):
    params = SystemParameters(sun_hours=4)
    assert calculate(fridge_and_tv, params) == calculate(fridge_and_tv, params)


def test_daily_energy_wh():
    assert daily_energy_wh(Appliance(name="Fan", watts=75, hours=8)) == 600


def test_result_record_has_storage_columns(fridge_and_tv):
    record = calculate(fridge_and_tv, SystemParameters()).to_record()

    assert set(record) == {
        "daily_usage",
        "sun_hours",
        "backup_days",
        "efficiency",
        "solar_size",
        "battery_size",
        "inverter_size",
    }
    assert record["daily_usage"] == 4100
    assert record["efficiency"] == 0.85

# -*- coding: utf-8 -*-
from powercalc.sizing.models import Appliance, SystemParameters
from powercalc.sizing.sizer import calculate
from powercalc.sizing.summary import appliance_rows, describe_appliance, format_breakdown


def test_breakdown_uses_two_decimals(fridge_and_tv):
    lines = format_breakdown(calculate(fridge_and_tv, SystemParameters()))
    assert lines == [
        "Solar Panels: 0.96 kW",
        "Battery Bank: 4.82 kWh",
        "Inverter: 0.18 kW",
    ]


def test_describe_appliance():
    assert describe_appliance(Appliance(name="LED TV", watts=100, hours=5)) == "LED TV (100W × 5h = 500Wh/day)"


def test_appliance_rows(fridge_and_tv):
    rows = appliance_rows(fridge_and_tv)
    assert [r["Wh/day"] for r in rows] == [3600, 500]
    assert rows[0]["Appliance"] == "Refrigerator"

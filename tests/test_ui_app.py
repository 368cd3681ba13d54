# -*- coding: utf-8 -*-
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = Path(__file__).resolve().parents[1] / "powercalc" / "ui" / "app.py"


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("POWERCALC_DATABASE_URL", f"sqlite:///{tmp_path / 'ui.db'}")
    at = AppTest.from_file(str(APP), default_timeout=30)
    at.run()
    return at


def test_page_renders_without_errors(app):
    assert not app.exception
    assert app.title[0].value.endswith("Power Needs Calculator")
    assert app.button(key="calculate").disabled


def test_quick_add_then_calculate(app):
    app.button(key="quick_0").click().run()
    session = app.session_state["powercalc_session"]
    assert len(session.ledger) == 1

    app.button(key="calculate").click().run()

    assert not app.exception
    assert session.last_saved is not None
    assert any("Power needs calculated successfully!" in s.value for s in app.success)


def test_remove_appliance(app):
    app.button(key="quick_0").click().run()
    app.button(key="quick_7").click().run()
    app.button(key="remove_0").click().run()

    (only,) = app.session_state["powercalc_session"].ledger.list()
    assert only.name == "Water Heater"


def _add_button(at):
    return next(b for b in at.button if b.label == "Add Appliance")


def test_failed_add_keeps_form_values(app):
    app.text_input(key="new_name").input("Kettle")
    app.number_input(key="new_watts").set_value(0.0)
    _add_button(app).click().run()

    assert len(app.session_state["powercalc_session"].ledger) == 0
    assert app.session_state["new_name"] == "Kettle"
    assert len(app.warning) == 1

    # shown once, not repeated on the next rerun
    app.run()
    assert len(app.warning) == 0


def test_successful_add_clears_form(app):
    app.text_input(key="new_name").input("Kettle")
    app.number_input(key="new_watts").set_value(2000.0)
    app.number_input(key="new_hours").set_value(0.5)
    _add_button(app).click().run()

    (only,) = app.session_state["powercalc_session"].ledger.list()
    assert (only.name, only.watts, only.hours) == ("Kettle", 2000.0, 0.5)
    assert app.session_state["new_name"] == ""
    assert app.session_state["new_watts"] == 0.0
    assert app.session_state["new_hours"] == 1.0
    assert len(app.warning) == 0

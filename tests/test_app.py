import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture()
def app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _badge_text(at: AppTest) -> str:
    return " ".join(m.value for m in at.markdown if "Icing Risk" in m.value)


def _enter(at: AppTest, key: str, text: str) -> None:
    at.text_input(key=key).input(text).run()
    assert not at.exception


def test_badge_starts_unknown(app: AppTest):
    assert "Enter temperature and dew point" in _badge_text(app)


def test_unit_switch_clamp_warning_and_clearing(app: AppTest, caplog: pytest.LogCaptureFixture):
    _enter(app, "temperature_text", "10")
    _enter(app, "dew_point_text", "5")
    assert "Serious icing - any power" in _badge_text(app)
    assert not app.warning

    # inputs are redrawn from the stored °C values
    app.selectbox(key="unit").select_index(1).run()
    assert app.text_input(key="temperature_text").value == "50"
    assert app.text_input(key="dew_point_text").value == "41"

    with caplog.at_level(logging.INFO, logger="forms"):
        _enter(app, "dew_point_text", "60")
    assert any("Dew point cannot exceed temperature" in w.value for w in app.warning)
    assert any("clamped" in r.getMessage() for r in caplog.records)

    app.selectbox(key="unit").select_index(0).run()
    assert app.text_input(key="temperature_text").value == "10"
    assert app.text_input(key="dew_point_text").value == "15.6"

    _enter(app, "temperature_text", "")
    assert "Enter temperature and dew point" in _badge_text(app)
    assert not app.warning


def test_threshold_table_rendered(app: AppTest):
    assert len(app.dataframe) == 1
    assert app.dataframe[0].value["order"].tolist() == [1, 2, 3, 4, 5]

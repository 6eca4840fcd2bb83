from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).parent.parent / "scripts" / "birdlens.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_default_setup(app):
    values = {m.label: m.value for m in app.metric}
    assert values["Equivalent Focal Length (FF)"] == "400mm"
    assert values["Binocular Magnification"] == "8.0x"
    assert values["Frame Fill"] == "13.3%"
    assert any("Environmental" in w.value for w in app.warning)


def test_close_large_bird_is_overfilled(app):
    app.selectbox(key="subject").set_value("large")
    app.radio(key="digital_crop").set_value(2.0)
    app.slider(key="focal").set_value(800)
    app.slider(key="distance").set_value(5).run()
    assert not app.exception
    values = {m.label: m.value for m in app.metric}
    assert values["Frame Fill"] == ">100%"
    assert any("Too Close" in w.value for w in app.warning)


def test_frame_by_distance_reaches_optimal_band(app):
    app.button(key="frame_distance").click().run()
    assert not app.exception
    # 400mm, 16cm bird, full frame: 55% fill at about 4.8m, clamped to the 5m minimum
    assert app.session_state["distance"] == 5
    assert any("Optimal" in s.value for s in app.success)

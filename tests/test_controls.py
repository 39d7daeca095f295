import math

import pytest

from evolve.components.controls import (
    BlightComponent,
    Component,
    FloraComponent,
    FrameRateComponent,
    GardenComponent,
    PauseComponent,
    ResetComponent,
    SpeedComponent,
    TimeComponent,
)
from evolve.messages import Inputs


def _ready(cls, name="ctl"):
    inputs = Inputs()
    component = cls(name, inputs)
    component.initialize()
    return component, inputs


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component("x", Inputs())


def test_button_html():
    assert BlightComponent("blight", Inputs()).make_html() == (
        '<button id="blight">Blight</button>'
    )
    assert ResetComponent("reset", Inputs()).make_html() == (
        '<button id="reset">Reset</button>'
    )


def test_input_html():
    assert FloraComponent("flora", Inputs()).make_html() == (
        'Food growth rate <input id="flora" max="20" type="range" value="10">'
    )
    assert SpeedComponent("speed", Inputs()).make_html() == (
        'Speed <input id="speed" min="1" max="60" type="range" value="1">'
    )
    assert GardenComponent("garden", Inputs()).make_html() == (
        'Garden of Eden <input id="garden" type="checkbox" checked>'
    )
    assert PauseComponent("pause", Inputs()).make_html() == (
        'Pause <input id="pause" type="checkbox">'
    )
    assert TimeComponent("time", Inputs()).make_html() == (
        'Display time <input id="time" type="checkbox">'
    )
    assert FrameRateComponent("frame-rate", Inputs()).make_html() == (
        'Display update rate <input id="frame-rate" type="checkbox">'
    )


def test_click_before_initialize_is_ignored():
    inputs = Inputs()
    component = BlightComponent("blight", inputs)
    component.click()
    component.initialize()
    component.update()
    assert inputs.blight_requested is False


def test_blight_click_sets_request():
    component, inputs = _ready(BlightComponent)
    component.update()
    assert inputs.blight_requested is False
    component.click()
    component.update()
    assert inputs.blight_requested is True


def test_reset_click_sets_request():
    component, inputs = _ready(ResetComponent)
    component.click()
    component.update()
    assert inputs.reset_requested is True


def test_one_event_per_update():
    component, inputs = _ready(PauseComponent)
    component.change(True)
    component.change(False)
    component.update()
    assert inputs.pause_change_requested is True
    component.update()
    assert inputs.pause_change_requested is False


def test_initialize_drops_pending_events():
    component, inputs = _ready(ResetComponent)
    component.click()
    component.initialize()
    component.update()
    assert inputs.reset_requested is False


@pytest.mark.parametrize(
    "cls, field",
    [
        (FrameRateComponent, "frame_rate_display_change_requested"),
        (GardenComponent, "garden_change_requested"),
        (PauseComponent, "pause_change_requested"),
        (TimeComponent, "time_display_change_requested"),
    ],
)
@pytest.mark.parametrize("checked", [True, False])
def test_checkbox_change(cls, field, checked):
    component, inputs = _ready(cls)
    component.change(checked)
    component.update()
    assert getattr(inputs, field) is checked


@pytest.mark.parametrize("value", ["7", 7, "+7"])
def test_flora_change(value):
    component, inputs = _ready(FloraComponent)
    component.change(value)
    component.update()
    assert inputs.flora_growth_rate_change_requested == 7


@pytest.mark.parametrize("value", ["abc", "-1", "", "2.5", -3])
def test_flora_invalid_value_raises(value):
    component, _ = _ready(FloraComponent)
    component.change(value)
    with pytest.raises(ValueError):
        component.update()


def test_speed_change_to_period():
    component, inputs = _ready(SpeedComponent)
    component.change("1")
    component.update()
    assert inputs.period_millis_change_requested == 1000.0
    component.change("4")
    component.update()
    assert inputs.period_millis_change_requested == 250.0


def test_speed_period_is_truncated():
    component, inputs = _ready(SpeedComponent)
    component.change("3")
    component.update()
    period = inputs.period_millis_change_requested
    assert period == math.trunc(period)
    assert period <= 1000.0 / 3


def test_speed_zero_is_infinite_period():
    component, inputs = _ready(SpeedComponent)
    component.change(0)
    component.update()
    assert inputs.period_millis_change_requested == math.inf


def test_speed_invalid_value_raises():
    component, _ = _ready(SpeedComponent)
    component.change("fast")
    with pytest.raises(ValueError):
        component.update()
import random

import pytest

from evolve.looper import Looper, main
from evolve.messages import Events, Inputs
from evolve.space import (
    BUGS_MAX,
    CONFIGURATION,
    INFO,
    SPACE_HEIGHT,
    SPACE_WIDTH,
    to_index_from_xy,
)

PERIOD = CONFIGURATION.update_period_millis_initial


class RecordingContext:
    def __init__(self):
        self.fill_style = ""
        self.font = ""
        self.calls = []

    def fill_rect(self, x, y, width, height):
        self.calls.append(("fill_rect", self.fill_style, x, y, width, height))

    def fill_text(self, text, x, y):
        self.calls.append(("fill_text", self.fill_style, text, x, y))


@pytest.fixture
def looper():
    result = Looper(rng=random.Random(7))
    result.initialize()
    return result


def test_initialize_requests_reset():
    fresh = Looper(rng=random.Random(1))
    assert fresh.inputs.reset_requested is False
    fresh.initialize()
    assert fresh.inputs.reset_requested is True


def test_first_frame_resets_world(looper):
    looper.update_loop(0.0)
    assert len(looper.root_model.fauna.bugs) == BUGS_MAX
    assert all(looper.root_model.flora.flora_present)
    assert looper.root_model.clock.time == 0
    status = looper.root_model.overlay.status_string
    assert status.endswith(f"Alive:{BUGS_MAX}")
    assert "Time:0" in status


def test_frame_clears_messages(looper):
    looper.update_loop(0.0)
    assert looper.inputs == Inputs()
    assert looper.events == Events()


def test_no_step_before_period(looper):
    looper.update_loop(0.0)
    looper.update_loop(PERIOD / 2)
    assert looper.root_model.clock.time == 0


def test_step_after_period(looper):
    looper.update_loop(0.0)
    looper.update_loop(PERIOD)
    assert looper.root_model.clock.time == 1
    assert all(bug.energy > 0 for bug in looper.root_model.fauna.bugs)


def test_pause_stops_clock(looper):
    looper.update_loop(0.0)
    looper.root_component.pause_component.change(True)
    looper.update_loop(PERIOD)
    assert looper.options.pause is True
    assert looper.root_model.clock.time == 0


def test_speed_change_shortens_period(looper):
    looper.update_loop(0.0)
    looper.root_component.speed_component.change("10")
    looper.update_loop(0.0)
    looper.update_loop(PERIOD / 10)
    assert looper.root_model.clock.time == 1


def test_paints_on_update_only():
    context = RecordingContext()
    lp = Looper(context=context, rng=random.Random(3))
    lp.initialize()
    lp.update_loop(0.0)
    assert context.calls[0] == ("fill_rect", "black", 0.0, 0.0, 600, 600)
    texts = [call[2] for call in context.calls if call[0] == "fill_text"]
    assert lp.root_model.overlay.status_string in texts
    context.calls.clear()
    lp.update_loop(PERIOD / 2)
    assert context.calls == []


def test_seeded_runs_are_repeatable():
    def run():
        lp = Looper(rng=random.Random(5))
        lp.initialize()
        lp.update_loop(0.0)
        lp.update_loop(PERIOD)
        return [bug.position for bug in lp.root_model.fauna.bugs]

    first = run()
    second = run()
    assert len(first) == BUGS_MAX
    assert first == second
    cx, cy = SPACE_WIDTH // 2, SPACE_HEIGHT // 2
    neighbourhood = {
        to_index_from_xy(cx + dx, cy + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
    }
    assert set(first) <= neighbourhood


def test_main_reports_status(capsys):
    assert main(["--steps", "1", "--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert INFO in out
    assert "Alive:" in out
    assert "Time:1" in out


def test_main_rejects_negative_steps():
    with pytest.raises(SystemExit):
        main(["--steps", "-1"])
"""Builds the status text drawn over the world."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Protocol

from ..models import Bug, Clock, Fauna, Overlay
from ..space import GENES_MAX, OVERLAY_REFRESH_PERIOD_MILLIS
from .timing import DeltaMetronome, FrameRater


class _OverlayEvents(Protocol):
    updated: bool


class _OverlayInputs(Protocol):
    bug_requested: int | None
    current_time_millis: float
    pause_change_requested: bool | None
    reset_requested: bool
    time_display_change_requested: bool | None
    time_to_update: bool
    update_rate_display_change_requested: bool | None


class _OverlayOptions(Protocol):
    pause: bool
    time_display: bool
    update_rate_display: bool


def _majority_string(alive: list[Bug], attribute: str) -> str:
    digits = []
    for index in range(GENES_MAX):
        count = sum(1 for bug in alive if getattr(bug, attribute)[index])
        majority = bool(alive) and count / len(alive) >= 0.5
        digits.append("1" if majority else "0")
    return "".join(digits)


def make_genes_average_string(bugs: Iterable[Bug]) -> str:
    """Summarise the majority movement gene of living bugs at each step."""
    alive = [bug for bug in bugs if bug.energy > 0]
    return (
        f"X:{_majority_string(alive, 'genes_x')} "
        f"Y:{_majority_string(alive, 'genes_y')}"
    )


def make_status_string(bugs: Iterable[Bug], time: int) -> str:
    """Return the status line with gene averages, clock time and population."""
    bugs = list(bugs)
    alive = sum(1 for bug in bugs if bug.energy > 0)
    return (
        f"Average Movement Genes {make_genes_average_string(bugs)} "
        f"Time:{time} Alive:{alive}"
    )


def _make_time_string() -> str:
    now = datetime.now()
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now.minute:02d}:{now.second:02d} {meridiem}"


class OverlayUpdater:
    """Refreshes the overlay text on user changes and about once a second."""

    def __init__(
        self,
        clock: Clock,
        events: _OverlayEvents,
        fauna: Fauna,
        frame_rater: FrameRater,
        inputs: _OverlayInputs,
        options: _OverlayOptions,
        overlay: Overlay,
    ) -> None:
        self.clock = clock
        self.events = events
        self.fauna = fauna
        self.frame_rater = frame_rater
        self.inputs = inputs
        self.options = options
        self.overlay = overlay
        self.metronome = DeltaMetronome(period_millis=OVERLAY_REFRESH_PERIOD_MILLIS)

    def _update_overlay(self) -> None:
        self.overlay.status_string = make_status_string(
            self.fauna.bugs, self.clock.time
        )
        if not self.options.pause and self.options.update_rate_display:
            rate = self.frame_rater.frames_per_second_sampled()
            self.overlay.update_rate_string = (
                f"Simulation updates per second: {rate:.3f}"
            )
        if self.options.time_display:
            self.overlay.time_string = _make_time_string()
        self.events.updated = True

    def update(self) -> None:
        """Refresh immediately on user changes, otherwise on the refresh period."""
        inputs = self.inputs
        if (
            inputs.bug_requested is not None
            or inputs.pause_change_requested is not None
            or inputs.reset_requested
            or inputs.time_display_change_requested is not None
            or inputs.update_rate_display_change_requested is not None
        ):
            self._update_overlay()
            return
        if inputs.time_to_update and self.metronome.tick(inputs.current_time_millis):
            self._update_overlay()
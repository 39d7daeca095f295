"""Metronome and frame-rate bookkeeping that drives the simulation clock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..space import MILLIS_PER_SECOND


def _check_period(period_millis: float) -> None:
    if period_millis <= 0:
        raise ValueError(f"period must be positive: {period_millis}")


@dataclass
class DeltaMetronome:
    """Ticks once a period has passed since the previous tick."""

    period_millis: float
    time_millis_next_tick: float = 0.0

    def __post_init__(self) -> None:
        _check_period(self.period_millis)

    def tick(self, current_time_millis: float) -> bool:
        """Return True and schedule the next tick if the next tick is due."""
        if current_time_millis < self.time_millis_next_tick:
            return False
        self.time_millis_next_tick = current_time_millis + self.period_millis
        return True


class FrameRater:
    """Estimates the update rate from the interval between samples."""

    def __init__(self, period_millis: float) -> None:
        _check_period(period_millis)
        self.period_millis = period_millis
        self._last_sample_millis: float | None = None
        self._frames_per_second = MILLIS_PER_SECOND / period_millis

    def reset(self) -> None:
        """Forget past samples and fall back to the nominal rate."""
        self._last_sample_millis = None
        self._frames_per_second = MILLIS_PER_SECOND / self.period_millis

    def sample(self, update_time_millis: float) -> None:
        """Record that an update happened at the given time."""
        last = self._last_sample_millis
        if last is not None and update_time_millis > last:
            self._frames_per_second = MILLIS_PER_SECOND / (update_time_millis - last)
        self._last_sample_millis = update_time_millis

    def frames_per_second_sampled(self) -> float:
        """Return the most recent rate estimate in updates per second."""
        return self._frames_per_second


class _MetronomeEvents(Protocol):
    time_to_update: bool
    update_period_millis_changed: float | None


class _MetronomeInputs(Protocol):
    current_time_millis: float
    period_millis_change_requested: float | None
    reset_requested: bool


class MetronomeUpdater:
    """Raises the time-to-update event whenever the metronome ticks."""

    def __init__(
        self,
        events: _MetronomeEvents,
        inputs: _MetronomeInputs,
        metronome: DeltaMetronome,
    ) -> None:
        self.events = events
        self.inputs = inputs
        self.metronome = metronome

    def update(self) -> None:
        """Apply period changes and resets, then tick the metronome."""
        current = self.inputs.current_time_millis
        period = self.inputs.period_millis_change_requested
        if period is not None:
            _check_period(period)
            self.metronome.period_millis = period
            self.metronome.time_millis_next_tick = current + period
            self.events.update_period_millis_changed = period
        if self.inputs.reset_requested:
            self.metronome.time_millis_next_tick = (
                current + self.metronome.period_millis
            )
        if self.metronome.tick(current):
            self.events.time_to_update = True


class _FrameRaterEvents(Protocol):
    time_to_update: bool
    update_period_millis_changed: float | None


class _FrameRaterInputs(Protocol):
    current_time_millis: float
    frame_rate_display_change_requested: bool | None
    reset_requested: bool


class FrameRaterUpdater:
    """Samples the frame rater on each update while the rate is displayed."""

    def __init__(
        self,
        events: _FrameRaterEvents,
        frame_rater: FrameRater,
        inputs: _FrameRaterInputs,
    ) -> None:
        self.events = events
        self.frame_rater = frame_rater
        self.inputs = inputs
        self.display = False

    def update(self) -> None:
        """Track display and period changes and sample on each update."""
        display = self.inputs.frame_rate_display_change_requested
        if display is not None:
            self.display = display
            self.frame_rater.reset()
        if self.inputs.reset_requested:
            self.frame_rater.reset()
        period = self.events.update_period_millis_changed
        if period is not None:
            _check_period(period)
            self.frame_rater.period_millis = period
            self.frame_rater.reset()
        if self.display and self.events.time_to_update:
            self.frame_rater.sample(self.inputs.current_time_millis)
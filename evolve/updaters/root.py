"""Wires every simulation updater together and runs them in order."""

from __future__ import annotations

import random

from ..messages import Events, Inputs
from ..models import Options, Root
from ..space import Configuration
from .clock import ClockUpdater
from .fauna import FaunaUpdater
from .flora import FloraUpdater
from .options import OptionsUpdater
from .overlay import OverlayUpdater
from .timing import DeltaMetronome, FrameRater, FrameRaterUpdater, MetronomeUpdater


class _FrameView:
    """Read-only view of one frame's inputs together with its events."""

    def __init__(self, events: Events, inputs: Inputs) -> None:
        self._events = events
        self._inputs = inputs

    @property
    def blight_requested(self) -> bool:
        return self._inputs.blight_requested

    @property
    def bug_requested(self) -> int | None:
        return self._inputs.bug_requested

    @property
    def current_time_millis(self) -> float:
        return self._inputs.current_time_millis

    @property
    def flora_growth_rate_change_requested(self) -> int | None:
        return self._inputs.flora_growth_rate_change_requested

    @property
    def garden_change_requested(self) -> bool | None:
        return self._inputs.garden_change_requested

    @property
    def pause_change_requested(self) -> bool | None:
        return self._inputs.pause_change_requested

    @property
    def reset_requested(self) -> bool:
        return self._inputs.reset_requested

    @property
    def time_display_change_requested(self) -> bool | None:
        return self._inputs.time_display_change_requested

    @property
    def update_rate_display_change_requested(self) -> bool | None:
        return self._inputs.frame_rate_display_change_requested

    @property
    def time_to_update(self) -> bool:
        return self._events.time_to_update


class RootUpdater:
    """Runs the timing, options and world updaters once per frame."""

    def __init__(
        self,
        configuration: Configuration,
        events: Events,
        frame_rater: FrameRater,
        inputs: Inputs,
        options: Options,
        root_model: Root,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        view = _FrameView(events, inputs)
        metronome = DeltaMetronome(
            period_millis=configuration.update_period_millis_initial
        )
        self.child_updaters = [
            MetronomeUpdater(events, inputs, metronome),
            OptionsUpdater(view, options),
            FrameRaterUpdater(events, frame_rater, inputs),
            ClockUpdater(root_model.clock, events, view, options),
            FloraUpdater(events, root_model.flora, view, options, rng),
            FaunaUpdater(
                root_model.clock,
                events,
                root_model.fauna,
                root_model.flora,
                view,
                options,
                rng,
            ),
            OverlayUpdater(
                root_model.clock,
                events,
                root_model.fauna,
                frame_rater,
                view,
                options,
                root_model.overlay,
            ),
        ]

    def update(self) -> None:
        """Run every child updater in order."""
        for updater in self.child_updaters:
            updater.update()
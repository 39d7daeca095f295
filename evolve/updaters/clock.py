"""Advances the gene-cycle clock once per simulation step."""

from __future__ import annotations

from typing import Protocol

from ..models import Clock
from ..space import GENES_MAX


class _ClockEvents(Protocol):
    updated: bool


class _ClockInputs(Protocol):
    reset_requested: bool
    time_to_update: bool


class _ClockOptions(Protocol):
    pause: bool


class ClockUpdater:
    """Steps the clock through the gene cycle, wrapping after the last gene."""

    def __init__(
        self,
        clock: Clock,
        events: _ClockEvents,
        inputs: _ClockInputs,
        options: _ClockOptions,
    ) -> None:
        self.clock = clock
        self.events = events
        self.inputs = inputs
        self.options = options

    def update(self) -> None:
        """Reset or advance the clock according to this frame's inputs."""
        if self.inputs.reset_requested:
            self.clock.time = 0
            self.events.updated = True
            return
        if not self.inputs.time_to_update or self.options.pause:
            return
        if self.clock.time >= GENES_MAX - 1:
            self.clock.time = 0
        else:
            self.clock.time += 1
        self.events.updated = True
"""Grows, blights and gardens the food on the grid."""

from __future__ import annotations

import random
from typing import Protocol

from ..models import Flora
from ..space import (
    EDEN_X0,
    EDEN_X1,
    EDEN_Y0,
    EDEN_Y1,
    FLORA_GROWTH_RATE_MAX,
    to_index_from_xy,
)


class _FloraEvents(Protocol):
    updated: bool


class _FloraInputs(Protocol):
    blight_requested: bool
    flora_growth_rate_change_requested: int | None
    garden_change_requested: bool | None
    reset_requested: bool
    time_to_update: bool


class _FloraOptions(Protocol):
    pause: bool


def _garden_indices() -> list[int]:
    return [
        to_index_from_xy(x, y)
        for x in range(EDEN_X0, EDEN_X1 + 1)
        for y in range(EDEN_Y0, EDEN_Y1 + 1)
    ]


class FloraUpdater:
    """Applies food-related requests and grows new food on each tick."""

    def __init__(
        self,
        events: _FloraEvents,
        flora: Flora,
        inputs: _FloraInputs,
        options: _FloraOptions,
        rng: random.Random | None = None,
    ) -> None:
        self.events = events
        self.flora = flora
        self.inputs = inputs
        self.options = options
        self.rng = rng if rng is not None else random.Random()

    def _set_all(self, present: bool) -> None:
        self.flora.flora_present[:] = [present] * len(self.flora.flora_present)

    def _set_garden(self, present: bool) -> None:
        for index in _garden_indices():
            self.flora.flora_present[index] = present

    def _ticking(self) -> bool:
        return self.inputs.time_to_update and not self.options.pause

    def _update_garden(self) -> None:
        enabled = self.inputs.garden_change_requested
        if enabled is not None:
            self.flora.enabled_garden = enabled
            if not enabled:
                self._set_garden(False)
                self.events.updated = True
        if self._ticking() and self.flora.enabled_garden:
            self._set_garden(True)
            self.events.updated = True

    def update(self) -> None:
        """Apply this frame's requests and, on a tick, grow food."""
        if self.inputs.reset_requested:
            self._set_all(True)
            self.events.updated = True
            return
        rate = self.inputs.flora_growth_rate_change_requested
        if rate is not None:
            self.flora.flora_growth_rate = min(rate, FLORA_GROWTH_RATE_MAX)
        if self.inputs.blight_requested:
            self._set_all(False)
            self.events.updated = True
        elif self._ticking():
            present = self.flora.flora_present
            for _ in range(self.flora.flora_growth_rate):
                present[self.rng.randrange(len(present))] = True
            self.events.updated = True
        self._update_garden()
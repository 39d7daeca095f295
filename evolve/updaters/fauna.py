"""Moves, feeds, breeds and culls the bugs."""

from __future__ import annotations

import math
import random
from typing import Protocol

from ..models import Bug, Clock, Fauna, Flora, Species
from ..space import (
    BABY_ENERGY,
    BIRTH_ENERGY,
    BIRTH_ENERGY_COST,
    BUGS_MAX,
    FLORA_ENERGY,
    GENES_MAX,
    LOCATION_COUNT,
    MAX_ENERGY,
    MOVE_COST,
    SPACE_HEIGHT,
    SPACE_WIDTH,
    to_index_from_xy,
    to_x_from_index,
    to_y_from_index,
)

_MUTATION_ODDS = 10
_SPEED_TWIRLIE_MAX = 0.30
_SPEED_CRUISER_MIN = 0.70


class _FaunaEvents(Protocol):
    updated: bool


class _FaunaInputs(Protocol):
    bug_requested: int | None
    reset_requested: bool
    time_to_update: bool


class _FaunaOptions(Protocol):
    pause: bool


def _coin(rng: random.Random) -> bool:
    return rng.random() < 0.5


def classify(genes_x: list[bool], genes_y: list[bool]) -> Species:
    """Classify movement genes by the net drift speed they produce."""
    x_sum = sum(1 if gene else -1 for gene in genes_x)
    y_sum = sum(1 if gene else -1 for gene in genes_y)
    speed = math.hypot(x_sum, y_sum) / math.sqrt(2.0 * GENES_MAX**2)
    if speed <= _SPEED_TWIRLIE_MAX:
        return Species.TWIRLIE
    if speed >= _SPEED_CRUISER_MIN:
        return Species.CRUISER
    return Species.NORMAL


def make_bug(position: int, rng: random.Random) -> Bug:
    """Create a newborn bug with random genes at the given location."""
    if not 0 <= position < LOCATION_COUNT:
        raise ValueError(f"position out of range: {position}")
    genes_x = [_coin(rng) for _ in range(GENES_MAX)]
    genes_y = [_coin(rng) for _ in range(GENES_MAX)]
    return Bug(
        energy=BABY_ENERGY,
        genes_x=genes_x,
        genes_y=genes_y,
        position=position,
        species=classify(genes_x, genes_y),
    )


def _step(coord: int, forward: bool, size: int) -> int:
    return (coord + (1 if forward else -1)) % size


class FaunaUpdater:
    """Runs the life cycle of every bug once per simulation step."""

    def __init__(
        self,
        clock: Clock,
        events: _FaunaEvents,
        fauna: Fauna,
        flora: Flora,
        inputs: _FaunaInputs,
        options: _FaunaOptions,
        rng: random.Random | None = None,
    ) -> None:
        self.clock = clock
        self.events = events
        self.fauna = fauna
        self.flora = flora
        self.inputs = inputs
        self.options = options
        self.rng = rng if rng is not None else random.Random()

    def reset(self) -> None:
        """Replace the population with a full crowd of newborns at the centre."""
        position = to_index_from_xy(SPACE_WIDTH // 2, SPACE_HEIGHT // 2)
        self.fauna.bugs = [make_bug(position, self.rng) for _ in range(BUGS_MAX)]

    def update(self) -> None:
        """Apply this frame's inputs and, on a tick, advance every bug."""
        if self.inputs.reset_requested:
            self.reset()
            self.events.updated = True
            return
        bugs = self.fauna.bugs
        bugs_length = len(bugs)
        new_bugs: list[Bug] = []
        requested = self.inputs.bug_requested
        if bugs_length < BUGS_MAX and requested is not None:
            new_bugs.append(make_bug(requested, self.rng))
        if self.inputs.time_to_update and not self.options.pause:
            time = self.clock.time
            flora_present = self.flora.flora_present
            for bug in bugs:
                self._graze(bug, flora_present)
                self._spawn(bug, bugs_length, new_bugs)
                self._move(bug, time)
            bugs[:] = [bug for bug in bugs if bug.energy > 0]
            self.events.updated = True
        if new_bugs:
            bugs.extend(new_bugs)
            self.events.updated = True

    @staticmethod
    def _graze(bug: Bug, flora_present: list[bool]) -> None:
        if flora_present[bug.position]:
            flora_present[bug.position] = False
            bug.energy = min(bug.energy + FLORA_ENERGY, MAX_ENERGY)

    def _spawn(self, bug: Bug, bugs_length: int, new_bugs: list[Bug]) -> None:
        if bug.energy < BIRTH_ENERGY or bugs_length + len(new_bugs) >= BUGS_MAX:
            return
        bug.energy = max(bug.energy - BIRTH_ENERGY_COST, 0)
        genes_x = list(bug.genes_x)
        genes_y = list(bug.genes_y)
        rng = self.rng
        if rng.randrange(_MUTATION_ODDS) == 0:
            gene_index = rng.randrange(GENES_MAX)
            if _coin(rng):
                genes_x[gene_index] = not genes_x[gene_index]
            else:
                genes_y[gene_index] = not genes_y[gene_index]
        new_bugs.append(
            Bug(
                energy=BABY_ENERGY,
                genes_x=genes_x,
                genes_y=genes_y,
                position=bug.position,
                species=classify(genes_x, genes_y),
            )
        )

    def _move(self, bug: Bug, time: int) -> None:
        x = to_x_from_index(bug.position)
        y = to_y_from_index(bug.position)
        if _coin(self.rng):
            x = _step(x, bug.genes_x[time], SPACE_WIDTH)
        if _coin(self.rng):
            y = _step(y, bug.genes_y[time], SPACE_HEIGHT)
        bug.position = to_index_from_xy(x, y)
        bug.energy = max(bug.energy - MOVE_COST, 0)
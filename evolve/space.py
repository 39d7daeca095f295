"""World dimensions, simulation constants and grid location arithmetic."""

from __future__ import annotations

from dataclasses import dataclass

INFO = "Evolve v0.11.2-SNAPSHOT"

SPACE_HEIGHT = 100
SPACE_WIDTH = 100
LOCATION_COUNT = SPACE_HEIGHT * SPACE_WIDTH

BABY_ENERGY = 10
BIRTH_ENERGY = 30
BIRTH_ENERGY_COST = 20
BUGS_MAX = LOCATION_COUNT
FLORA_ENERGY = 20
GENES_MAX = 8
FLORA_GROWTH_RATE_INIT = 10
FLORA_GROWTH_RATE_MAX = 20
MAX_ENERGY = 60
MOVE_COST = 1

EDEN_HEIGHT = 2
EDEN_WIDTH = 2
EDEN_X0 = (SPACE_WIDTH - EDEN_WIDTH) // 2
EDEN_X1 = EDEN_X0 + EDEN_WIDTH - 1
EDEN_Y0 = (SPACE_WIDTH - EDEN_WIDTH) // 2
EDEN_Y1 = EDEN_Y0 + EDEN_HEIGHT - 1

FILL_STYLE_BACKGROUND = "black"
PAINT_SCALE = 0.5
PAINT_OFFSET = (1.0 - PAINT_SCALE) / 2.0

MILLIS_PER_SECOND = 1_000.0
OVERLAY_REFRESH_PERIOD_MILLIS = 1_000.0
UPDATES_PER_SECOND = 1.0
UPDATE_PERIOD_MILLIS = MILLIS_PER_SECOND / UPDATES_PER_SECOND


@dataclass(frozen=True)
class Configuration:
    """Start-up settings for the simulation loop."""

    update_period_millis_initial: float


CONFIGURATION = Configuration(update_period_millis_initial=UPDATE_PERIOD_MILLIS)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def to_index_from_xy(x: int, y: int) -> int:
    """Return the flat location index of grid cell (x, y)."""
    _check_non_negative("x", x)
    _check_non_negative("y", y)
    return SPACE_WIDTH * y + x


def to_x_from_index(index: int) -> int:
    """Return the column of a flat location index."""
    _check_non_negative("index", index)
    return index % SPACE_WIDTH


def to_y_from_index(index: int) -> int:
    """Return the row of a flat location index."""
    _check_non_negative("index", index)
    return index // SPACE_WIDTH
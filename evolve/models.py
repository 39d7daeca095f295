"""Data models for the simulated world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .space import FLORA_GROWTH_RATE_INIT, GENES_MAX, LOCATION_COUNT


class Species(Enum):
    """Movement class of a bug, derived from its genes."""

    CRUISER = "cruiser"
    NORMAL = "normal"
    TWIRLIE = "twirlie"


@dataclass
class Bug:
    """A single critter: energy, movement genes and grid position."""

    energy: int
    genes_x: list[bool]
    genes_y: list[bool]
    position: int
    species: Species = Species.NORMAL

    def __post_init__(self) -> None:
        self.genes_x = [bool(gene) for gene in self.genes_x]
        self.genes_y = [bool(gene) for gene in self.genes_y]
        for name, genes in (("genes_x", self.genes_x), ("genes_y", self.genes_y)):
            if len(genes) != GENES_MAX:
                raise ValueError(
                    f"{name} must hold {GENES_MAX} genes, got {len(genes)}"
                )


@dataclass
class Clock:
    """Position within the repeating gene cycle."""

    time: int = 0


@dataclass
class Fauna:
    """All living bugs."""

    bugs: list[Bug] = field(default_factory=list)


def _empty_field() -> list[bool]:
    return [False] * LOCATION_COUNT


@dataclass
class Flora:
    """Food on the grid and how fast it grows."""

    enabled_garden: bool = True
    flora_growth_rate: int = FLORA_GROWTH_RATE_INIT
    flora_present: list[bool] = field(default_factory=_empty_field)


@dataclass
class Options:
    """User-selected display and run options."""

    pause: bool = False
    time_display: bool = False
    update_rate_display: bool = False


@dataclass
class Overlay:
    """Text drawn over the world."""

    status_string: str = ""
    time_string: str = ""
    update_rate_string: str = ""


@dataclass
class Root:
    """The whole world model."""

    clock: Clock = field(default_factory=Clock)
    fauna: Fauna = field(default_factory=Fauna)
    flora: Flora = field(default_factory=Flora)
    overlay: Overlay = field(default_factory=Overlay)
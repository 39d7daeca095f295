"""Draws the world and its overlay onto a 2D drawing context."""

from __future__ import annotations

import math
from typing import Protocol

from .models import Fauna, Flora, Options, Overlay, Root, Species
from .space import (
    FILL_STYLE_BACKGROUND,
    PAINT_OFFSET,
    PAINT_SCALE,
    SPACE_HEIGHT,
    SPACE_WIDTH,
    to_x_from_index,
    to_y_from_index,
)

_FLORA_COLOR = "green"
_OVERLAY_COLOR = "white"
_OVERLAY_FONT = "bold 17px monospace"
_OVERLAY_X = 4.0
_STATUS_Y = 17.0
_UPDATE_RATE_Y = 34.0
_TIME_Y = 51.0

_SPECIES_COLORS = {
    Species.CRUISER: "red",
    Species.NORMAL: "magenta",
    Species.TWIRLIE: "blue",
}


class Context(Protocol):
    """The subset of a canvas 2D context that the painters draw with."""

    fill_style: str
    font: str

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        ...

    def fill_text(self, text: str, x: float, y: float) -> None:
        ...


class Painter(Protocol):
    def paint(self) -> None:
        ...


def _cell_size(scale: float) -> float:
    return float(math.trunc(PAINT_SCALE * scale))


def _cell_corner(coord: int, scale: float) -> float:
    return float(math.trunc(scale * (coord + PAINT_OFFSET)))


class BackgroundPainter:
    """Fills the whole canvas with one colour."""

    def __init__(
        self, context: Context, width: float, height: float, fill_style: str
    ) -> None:
        self.context = context
        self.width = width
        self.height = height
        self.fill_style = fill_style

    def paint(self) -> None:
        """Clear the canvas to the background colour."""
        self.context.fill_style = self.fill_style
        self.context.fill_rect(0.0, 0.0, self.width, self.height)


class FloraPainter:
    """Draws a small square on every location that holds food."""

    def __init__(
        self, context: Context, flora: Flora, scale_x: float, scale_y: float
    ) -> None:
        self.context = context
        self.flora = flora
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.flora_width = _cell_size(scale_x)
        self.flora_height = _cell_size(scale_y)

    def paint(self) -> None:
        """Draw all food present on the grid."""
        context = self.context
        context.fill_style = _FLORA_COLOR
        for index, present in enumerate(self.flora.flora_present):
            if present:
                context.fill_rect(
                    _cell_corner(to_x_from_index(index), self.scale_x),
                    _cell_corner(to_y_from_index(index), self.scale_y),
                    self.flora_width,
                    self.flora_height,
                )


class FaunaPainter:
    """Draws every bug as a square coloured by its species."""

    def __init__(
        self, context: Context, fauna: Fauna, scale_x: float, scale_y: float
    ) -> None:
        self.context = context
        self.fauna = fauna
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.bug_width = _cell_size(scale_x)
        self.bug_height = _cell_size(scale_y)

    def paint(self) -> None:
        """Draw all bugs in population order."""
        context = self.context
        for bug in self.fauna.bugs:
            context.fill_style = _SPECIES_COLORS[bug.species]
            context.fill_rect(
                _cell_corner(to_x_from_index(bug.position), self.scale_x),
                _cell_corner(to_y_from_index(bug.position), self.scale_y),
                self.bug_width,
                self.bug_height,
            )


class OverlayPainter:
    """Draws the status, update-rate and time lines over the world."""

    def __init__(self, context: Context, options: Options, overlay: Overlay) -> None:
        self.context = context
        self.options = options
        self.overlay = overlay

    def paint(self) -> None:
        """Draw the overlay lines selected by the options."""
        context = self.context
        context.fill_style = _OVERLAY_COLOR
        context.font = _OVERLAY_FONT
        context.fill_text(self.overlay.status_string, _OVERLAY_X, _STATUS_Y)
        if self.options.update_rate_display and not self.options.pause:
            context.fill_text(
                self.overlay.update_rate_string, _OVERLAY_X, _UPDATE_RATE_Y
            )
        if self.options.time_display:
            context.fill_text(self.overlay.time_string, _OVERLAY_X, _TIME_Y)


class RootPainter:
    """Paints background, food, bugs and overlay, in that order."""

    def __init__(
        self,
        context: Context,
        width: float,
        height: float,
        options: Options,
        root_model: Root,
    ) -> None:
        scale_x = width / SPACE_WIDTH
        scale_y = height / SPACE_HEIGHT
        self.painters: list[Painter] = [
            BackgroundPainter(context, width, height, FILL_STYLE_BACKGROUND),
            FloraPainter(context, root_model.flora, scale_x, scale_y),
            FaunaPainter(context, root_model.fauna, scale_x, scale_y),
            OverlayPainter(context, options, root_model.overlay),
        ]

    def paint(self) -> None:
        """Run every painter in order."""
        for painter in self.painters:
            painter.paint()
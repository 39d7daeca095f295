"""The canvas control and the root component that assembles every control."""

from __future__ import annotations

from typing import Any

from ..messages import Events, Inputs
from ..models import Options, Root
from ..painters import Context, RootPainter
from ..space import SPACE_HEIGHT, SPACE_WIDTH, to_index_from_xy
from .controls import (
    BlightComponent,
    Component,
    FloraComponent,
    FrameRateComponent,
    GardenComponent,
    PauseComponent,
    ResetComponent,
    SpeedComponent,
    TimeComponent,
)

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


class CanvasComponent(Component):
    """The drawing surface: paints the world and turns mouse presses into bugs.

    Without a drawing context the component runs headless: it still turns
    mouse presses into bug requests but paints nothing.
    """

    def __init__(
        self,
        id: str,
        inputs: Inputs,
        options: Options,
        root_model: Root,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        context: Context | None = None,
    ) -> None:
        super().__init__(id, inputs)
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive: {width}x{height}")
        self.options = options
        self.root_model = root_model
        self.width = width
        self.height = height
        self.context = context
        self.root_painter: RootPainter | None = None

    def make_html(self) -> str:
        return (
            f'<canvas id="{self.id}" height="{self.height}"'
            f' style="cursor: pointer" width="{self.width}"></canvas>'
        )

    def initialize(self) -> None:
        """Start listening for mouse presses and prepare the painters."""
        super().initialize()
        if self.context is not None:
            self.root_painter = RootPainter(
                self.context, self.width, self.height, self.options, self.root_model
            )

    def mouse_down(self, canvas_x: int, canvas_y: int) -> None:
        """Report a mouse press at the given canvas pixel."""
        _check_non_negative("canvas_x", canvas_x)
        _check_non_negative("canvas_y", canvas_y)
        self._post((canvas_x, canvas_y))

    def to_world_index(self, canvas_x: int, canvas_y: int) -> int:
        """Map a canvas pixel to the world location under it."""
        _check_non_negative("canvas_x", canvas_x)
        _check_non_negative("canvas_y", canvas_y)
        scale_x = self.width / SPACE_WIDTH
        scale_y = self.height / SPACE_HEIGHT
        world_x = min(int(canvas_x / scale_x), SPACE_WIDTH - 1)
        world_y = min(int(canvas_y / scale_y), SPACE_HEIGHT - 1)
        return to_index_from_xy(world_x, world_y)

    def update(self) -> None:
        """Turn the oldest pending mouse press into a bug request."""
        super().update()

    def _apply(self, event: Any) -> None:
        canvas_x, canvas_y = event
        self.inputs.bug_requested = self.to_world_index(canvas_x, canvas_y)

    def paint(self) -> None:
        """Paint the world, once initialized with a drawing context."""
        if self.root_painter is not None:
            self.root_painter.paint()


class RootComponent:
    """Holds every control, lays out their HTML and drives them each frame."""

    def __init__(
        self,
        events: Events,
        inputs: Inputs,
        options: Options,
        root_model: Root,
        context: Context | None = None,
    ) -> None:
        self.events = events
        self.blight_component = BlightComponent("blight", inputs)
        self.canvas_component = CanvasComponent(
            "canvas", inputs, options, root_model, context=context
        )
        self.flora_component = FloraComponent("flora", inputs)
        self.frame_rate_component = FrameRateComponent("frame-rate", inputs)
        self.garden_component = GardenComponent("garden", inputs)
        self.pause_component = PauseComponent("pause", inputs)
        self.reset_component = ResetComponent("reset", inputs)
        self.speed_component = SpeedComponent("speed", inputs)
        self.time_component = TimeComponent("time", inputs)
        self.components: list[Component] = [
            self.blight_component,
            self.canvas_component,
            self.flora_component,
            self.frame_rate_component,
            self.garden_component,
            self.pause_component,
            self.reset_component,
            self.speed_component,
            self.time_component,
        ]

    def make_html(self) -> str:
        """Return the markup for the whole user interface."""
        return "\n".join(
            [
                '<div id="root">',
                self.canvas_component.make_html(),
                "<br>",
                self.reset_component.make_html(),
                self.blight_component.make_html(),
                self.flora_component.make_html(),
                self.garden_component.make_html(),
                "<br>",
                self.speed_component.make_html(),
                self.frame_rate_component.make_html(),
                self.time_component.make_html(),
                self.pause_component.make_html(),
                "</div>",
            ]
        )

    def initialize(self) -> None:
        """Initialize every control so that it starts accepting events."""
        for component in self.components:
            component.initialize()

    def update(self) -> None:
        """Let every control write its pending event into the inputs."""
        for component in self.components:
            component.update()

    def paint(self) -> None:
        """Repaint the canvas if anything changed this frame."""
        if self.events.updated:
            self.canvas_component.paint()
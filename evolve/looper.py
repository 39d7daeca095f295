"""The frame loop that ties controls, updaters and painters together."""

from __future__ import annotations

import argparse
import random

from .components.root import RootComponent
from .messages import Events, Inputs
from .models import Options, Root
from .painters import Context
from .space import CONFIGURATION, INFO, Configuration
from .updaters.root import RootUpdater
from .updaters.timing import FrameRater


class Looper:
    """Runs one frame at a time: gather input, update the world, repaint."""

    def __init__(
        self,
        configuration: Configuration = CONFIGURATION,
        context: Context | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.configuration = configuration
        period = configuration.update_period_millis_initial
        self.frame_rater = FrameRater(period)
        self.events = Events()
        self.inputs = Inputs()
        self.options = Options()
        self.root_model = Root()
        self.root_component = RootComponent(
            self.events, self.inputs, self.options, self.root_model, context
        )
        self.root_updater = RootUpdater(
            configuration,
            self.events,
            self.frame_rater,
            self.inputs,
            self.options,
            self.root_model,
            rng,
        )

    def initialize(self) -> None:
        """Initialize the controls and request a reset on the first frame."""
        self.root_component.initialize()
        self.inputs.reset_requested = True

    def update_loop(self, update_time_millis: float) -> None:
        """Process one frame at the given time."""
        self.inputs.current_time_millis = update_time_millis
        self.root_component.update()
        self.root_updater.update()
        self.root_component.paint()
        self.events.clear()
        self.inputs.clear()


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the simulation headless for a number of steps and report the status."""
    parser = argparse.ArgumentParser(
        prog="evolve",
        description="Evolve the movement of critters through food distribution.",
    )
    parser.add_argument(
        "--steps",
        type=_non_negative_int,
        default=20,
        help="number of simulation steps to run",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    print(INFO)
    looper = Looper(rng=random.Random(args.seed))
    looper.initialize()
    period = looper.configuration.update_period_millis_initial
    for step in range(args.steps + 1):
        looper.update_loop(step * period)
    print(looper.root_model.overlay.status_string)
    return 0
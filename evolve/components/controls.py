"""User-interface controls that turn clicks and changes into frame inputs."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from ..messages import Inputs
from ..space import FLORA_GROWTH_RATE_INIT, FLORA_GROWTH_RATE_MAX, MILLIS_PER_SECOND


def _parse_unsigned(value: str | int) -> int:
    """Parse a non-negative whole number the way a range input reports it."""
    if isinstance(value, bool):
        raise ValueError(f"not a whole number: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"must not be negative: {value}")
        return value
    text = value[1:] if value.startswith("+") else value
    if not text or not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a non-negative whole number: {value!r}")
    return int(text)


class Component(ABC):
    """A control with its own HTML that feeds user events into the inputs.

    Events are only accepted once the component has been initialized, just as
    a page element only reports events after a handler is attached. Each
    update handles at most one pending event.
    """

    def __init__(self, id: str, inputs: Inputs) -> None:
        self.id = id
        self.inputs = inputs
        self._events: deque[Any] | None = None

    @abstractmethod
    def make_html(self) -> str:
        """Return the HTML markup for this control."""

    def initialize(self) -> None:
        """Start listening for events, dropping any still pending."""
        self._events = deque()

    def update(self) -> None:
        """Handle the oldest pending event, if there is one."""
        if self._events:
            self._apply(self._events.popleft())

    def _post(self, event: Any) -> None:
        if self._events is not None:
            self._events.append(event)

    @abstractmethod
    def _apply(self, event: Any) -> None:
        """Write one event into the inputs."""


class BlightComponent(Component):
    """Button that wipes out all food."""

    def make_html(self) -> str:
        return f'<button id="{self.id}">Blight</button>'

    def click(self) -> None:
        """Report a press of the button."""
        self._post(True)

    def _apply(self, event: Any) -> None:
        self.inputs.blight_requested = True


class ResetComponent(Component):
    """Button that restarts the simulation."""

    def make_html(self) -> str:
        return f'<button id="{self.id}">Reset</button>'

    def click(self) -> None:
        """Report a press of the button."""
        self._post(True)

    def _apply(self, event: Any) -> None:
        self.inputs.reset_requested = True


class FloraComponent(Component):
    """Range input for the food growth rate."""

    def make_html(self) -> str:
        return (
            f'Food growth rate <input id="{self.id}" max="{FLORA_GROWTH_RATE_MAX}"'
            f' type="range" value="{FLORA_GROWTH_RATE_INIT}">'
        )

    def change(self, value: str | int) -> None:
        """Report a new slider value."""
        self._post(value)

    def _apply(self, event: Any) -> None:
        self.inputs.flora_growth_rate_change_requested = _parse_unsigned(event)


class _CheckboxComponent(Component):
    _label = ""
    _checked_by_default = False
    _field = ""

    def make_html(self) -> str:
        checked = " checked" if self._checked_by_default else ""
        return f'{self._label} <input id="{self.id}" type="checkbox"{checked}>'

    def _apply(self, event: Any) -> None:
        setattr(self.inputs, self._field, event)


class FrameRateComponent(_CheckboxComponent):
    """Checkbox that shows or hides the update rate."""

    _label = "Display update rate"
    _field = "frame_rate_display_change_requested"

    def change(self, checked: bool) -> None:
        """Report a new checkbox state."""
        self._post(bool(checked))


class GardenComponent(_CheckboxComponent):
    """Checkbox that keeps the Garden of Eden stocked with food."""

    _label = "Garden of Eden"
    _checked_by_default = True
    _field = "garden_change_requested"

    def change(self, checked: bool) -> None:
        """Report a new checkbox state."""
        self._post(bool(checked))


class PauseComponent(_CheckboxComponent):
    """Checkbox that pauses the simulation."""

    _label = "Pause"
    _field = "pause_change_requested"

    def change(self, checked: bool) -> None:
        """Report a new checkbox state."""
        self._post(bool(checked))


class TimeComponent(_CheckboxComponent):
    """Checkbox that shows or hides the wall-clock time."""

    _label = "Display time"
    _field = "time_display_change_requested"

    def change(self, checked: bool) -> None:
        """Report a new checkbox state."""
        self._post(bool(checked))


class SpeedComponent(Component):
    """Range input for simulation updates per second."""

    def make_html(self) -> str:
        return (
            f'Speed <input id="{self.id}" min="1" max="60" type="range" value="1">'
        )

    def change(self, value: str | int) -> None:
        """Report a new slider value in updates per second."""
        self._post(value)

    def _apply(self, event: Any) -> None:
        frequency = float(_parse_unsigned(event))
        if frequency == 0.0:
            period_millis = math.inf
        else:
            period_millis = float(math.trunc(MILLIS_PER_SECOND / frequency))
        self.inputs.period_millis_change_requested = period_millis
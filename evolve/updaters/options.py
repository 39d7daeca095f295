"""Applies user option changes."""

from __future__ import annotations

from typing import Protocol

from ..models import Options


class _OptionsInputs(Protocol):
    pause_change_requested: bool | None
    time_display_change_requested: bool | None
    update_rate_display_change_requested: bool | None


class OptionsUpdater:
    """Copies requested option changes into the options model."""

    def __init__(self, inputs: _OptionsInputs, options: Options) -> None:
        self.inputs = inputs
        self.options = options

    def update(self) -> None:
        """Apply every option change requested this frame."""
        update_rate_display = self.inputs.update_rate_display_change_requested
        if update_rate_display is not None:
            self.options.update_rate_display = update_rate_display
        pause = self.inputs.pause_change_requested
        if pause is not None:
            self.options.pause = pause
        time_display = self.inputs.time_display_change_requested
        if time_display is not None:
            self.options.time_display = time_display
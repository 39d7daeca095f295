"""Per-frame messages: user inputs and events raised while updating."""

from __future__ import annotations

from dataclasses import dataclass, fields


def _reset_to_defaults(instance: object) -> None:
    for item in fields(instance):
        setattr(instance, item.name, item.default)


@dataclass
class Events:
    """Things that happened during the current frame."""

    time_to_update: bool = False
    update_period_millis_changed: float | None = None
    updated: bool = False

    def clear(self) -> None:
        """Forget everything that happened this frame."""
        _reset_to_defaults(self)


@dataclass
class Inputs:
    """Requests gathered from the user interface for the current frame."""

    blight_requested: bool = False
    bug_requested: int | None = None
    current_time_millis: float = 0.0
    flora_growth_rate_change_requested: int | None = None
    frame_rate_display_change_requested: bool | None = None
    garden_change_requested: bool | None = None
    pause_change_requested: bool | None = None
    period_millis_change_requested: float | None = None
    reset_requested: bool = False
    time_display_change_requested: bool | None = None

    def clear(self) -> None:
        """Drop all requests once the frame has been processed."""
        _reset_to_defaults(self)
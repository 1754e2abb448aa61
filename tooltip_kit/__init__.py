"""Balloon-style tooltips that pick their arrow placement to stay on screen.

The geometry modules are pure Python; the PyQt6 adapter lives in
``tooltip_kit.qt_adapter`` and is only imported on demand.
"""
from __future__ import annotations

from tooltip_kit.arrow_supplement import (
    ArrowPlacement,
    apply_auto_configuration,
    guess_arrow_direction,
    guess_arrow_horizontal_position,
    guess_arrow_placement,
    guess_arrow_vertical_position,
)
from tooltip_kit.balloon_shape import BalloonPath, LineTo, MoveTo, RoundedRect, build_balloon_path
from tooltip_kit.configuration import PRESET_SIZES, TooltipConfiguration
from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect, Size
from tooltip_kit.layout import TooltipLayout, compute_attached_layout, compute_view_layout, point_source_rect

__version__ = "0.1.0"

__all__ = [
    "ArrowDirection",
    "ArrowPlacement",
    "ArrowPosition",
    "BalloonPath",
    "LineTo",
    "MoveTo",
    "PRESET_SIZES",
    "Point",
    "Rect",
    "RoundedRect",
    "Size",
    "TooltipConfiguration",
    "TooltipLayout",
    "apply_auto_configuration",
    "build_balloon_path",
    "compute_attached_layout",
    "compute_view_layout",
    "guess_arrow_direction",
    "guess_arrow_horizontal_position",
    "guess_arrow_placement",
    "guess_arrow_vertical_position",
    "point_source_rect",
]

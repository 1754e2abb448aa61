"""Balloon outline: a rounded rectangle plus a triangular arrow notch (pure, no Qt)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from tooltip_kit.configuration import TooltipConfiguration
from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect


@dataclass(frozen=True)
class RoundedRect:
    rect: Rect
    corner_radius: float


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


PathCommand = Union[RoundedRect, MoveTo, LineTo]
BalloonPath = Tuple[PathCommand, ...]


def build_balloon_path(configuration: TooltipConfiguration) -> BalloonPath:
    """Return the outline commands in balloon-local coordinates.

    The notch is an open two-segment polyline appended to the rounded rect so
    both fill as a single shape.
    """
    content_rect = configuration.content_rect
    body = RoundedRect(rect=content_rect, corner_radius=configuration.corner_radius)
    return (body,) + build_arrow_path(configuration, content_rect)


def _arrow_base_x(configuration: TooltipConfiguration, rect: Rect) -> float:
    direction = configuration.arrow_direction
    if direction is ArrowDirection.LEFT:
        return rect.min_x
    if direction is ArrowDirection.RIGHT:
        return rect.max_x
    arrow_height = configuration.arrow_height
    inset = configuration.border_width + configuration.corner_radius
    position = configuration.arrow_position
    if position is ArrowPosition.TRAILING:
        return rect.max_x - (arrow_height * 2.0 + inset)
    if position is ArrowPosition.CENTER:
        return rect.mid_x - arrow_height
    # leading, and top/bottom which do not apply to up/down arrows
    return rect.min_x + inset


def _arrow_base_y(configuration: TooltipConfiguration, rect: Rect) -> float:
    direction = configuration.arrow_direction
    if direction is ArrowDirection.UP:
        return rect.min_y
    if direction is ArrowDirection.DOWN:
        return rect.max_y
    arrow_height = configuration.arrow_height
    inset = configuration.border_width + configuration.corner_radius
    position = configuration.arrow_position
    if position is ArrowPosition.BOTTOM:
        return rect.max_y - (arrow_height * 2.0 + inset)
    if position is ArrowPosition.CENTER:
        return rect.mid_y - arrow_height
    # top, and leading/trailing which do not apply to left/right arrows
    return rect.min_y + inset


# Offsets from the base start to the apex, then from the apex to the base end.
_NOTCH_STEPS = {
    ArrowDirection.UP: ((1.0, -1.0), (1.0, 1.0)),
    ArrowDirection.DOWN: ((1.0, 1.0), (1.0, -1.0)),
    ArrowDirection.LEFT: ((-1.0, 1.0), (1.0, 1.0)),
    ArrowDirection.RIGHT: ((1.0, 1.0), (-1.0, 1.0)),
}


def build_arrow_path(configuration: TooltipConfiguration, rect: Rect) -> Tuple[MoveTo, LineTo, LineTo]:
    arrow_height = configuration.arrow_height
    start = Point(_arrow_base_x(configuration, rect), _arrow_base_y(configuration, rect))
    (apex_dx, apex_dy), (end_dx, end_dy) = _NOTCH_STEPS[configuration.arrow_direction]
    apex = start.offset_by(apex_dx * arrow_height, apex_dy * arrow_height)
    end = apex.offset_by(end_dx * arrow_height, end_dy * arrow_height)
    return (MoveTo(start), LineTo(apex), LineTo(end))


def path_to_payload(path: BalloonPath) -> list[Dict[str, Any]]:
    """Serialise outline commands for JSON output and logging."""
    payload: list[Dict[str, Any]] = []
    for command in path:
        if isinstance(command, RoundedRect):
            payload.append(
                {
                    "op": "rounded_rect",
                    "rect": list(command.rect.to_tuple()),
                    "corner_radius": command.corner_radius,
                }
            )
        elif isinstance(command, MoveTo):
            payload.append({"op": "move_to", "point": list(command.point.to_tuple())})
        elif isinstance(command, LineTo):
            payload.append({"op": "line_to", "point": list(command.point.to_tuple())})
        else:
            raise TypeError(f"Unsupported path command: {command!r}")
    return payload

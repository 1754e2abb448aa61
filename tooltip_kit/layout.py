"""Screen placement of a balloon for the two tooltip flavours (pure, no Qt).

A standalone tooltip view is anchored at the source rect origin. An attached
tooltip follows a source element: the resolver looks at the element center and
the balloon gets an extra shift so it clears the element.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from tooltip_kit.arrow_supplement import apply_auto_configuration
from tooltip_kit.balloon_shape import BalloonPath, build_balloon_path, path_to_payload
from tooltip_kit.configuration import TooltipConfiguration
from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect, Size


@dataclass(frozen=True)
class TooltipLayout:
    frame: Rect
    outline: BalloonPath
    card_rect: Rect
    card_corner_radius: float
    content_center: Point
    direction: ArrowDirection
    position: ArrowPosition

    def to_payload(self) -> Dict[str, Any]:
        return {
            "frame": list(self.frame.to_tuple()),
            "direction": self.direction.value,
            "position": self.position.value,
            "card_rect": list(self.card_rect.to_tuple()),
            "card_corner_radius": self.card_corner_radius,
            "content_center": list(self.content_center.to_tuple()),
            "outline": path_to_payload(self.outline),
        }


def point_source_rect(point: Point) -> Rect:
    return Rect(point.x, point.y, 1.0, 1.0)


def attached_balloon_offset(direction: ArrowDirection, arrow_height: float, source_size: Size) -> Size:
    """Extra shift for attached tooltips; constants were measured, not derived."""
    arrow_height_2 = arrow_height * 0.5
    w_2 = source_size.width * 0.5
    h_2 = source_size.height * 0.5
    if direction is ArrowDirection.UP:
        return Size(0.0, h_2 + arrow_height_2)
    if direction is ArrowDirection.DOWN:
        return Size(0.0, -(h_2 - arrow_height_2))
    if direction is ArrowDirection.LEFT:
        return Size(w_2 + arrow_height_2, 0.0)
    if direction is ArrowDirection.RIGHT:
        return Size(-(w_2 - arrow_height_2), 0.0)
    raise ValueError(f"Unsupported arrow direction: {direction!r}")


def _build_layout(configuration: TooltipConfiguration, frame_center: Point) -> TooltipLayout:
    balloon = configuration.balloon_size
    frame = Rect(
        frame_center.x - balloon.width * 0.5,
        frame_center.y - balloon.height * 0.5,
        balloon.width,
        balloon.height,
    )
    offset = configuration.content_offset
    card_rect = Rect.from_origin_size(Point(offset.width, offset.height), configuration.content_size)
    return TooltipLayout(
        frame=frame,
        outline=build_balloon_path(configuration),
        card_rect=card_rect,
        card_corner_radius=configuration.content_corner_radius,
        content_center=configuration.content_position,
        direction=configuration.arrow_direction,
        position=configuration.arrow_position,
    )


def compute_view_layout(
    configuration: TooltipConfiguration,
    source_rect: Rect,
    screen_bounds: Rect,
) -> TooltipLayout:
    apply_auto_configuration(configuration, source_rect, screen_bounds)
    arrow_offset = configuration.arrow_offset()
    center = source_rect.origin.offset_by(arrow_offset.width, arrow_offset.height)
    return _build_layout(configuration, center)


def compute_attached_layout(
    configuration: TooltipConfiguration,
    source_rect: Rect,
    screen_bounds: Rect,
) -> TooltipLayout:
    source_center = source_rect.center
    apply_auto_configuration(configuration, source_rect, screen_bounds, point=source_center)
    arrow_offset = configuration.arrow_offset()
    extra = attached_balloon_offset(configuration.arrow_direction, configuration.arrow_height, source_rect.size)
    center = source_center.offset_by(arrow_offset.width + extra.width, arrow_offset.height + extra.height)
    return _build_layout(configuration, center)

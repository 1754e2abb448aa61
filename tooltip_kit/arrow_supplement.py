"""Arrow placement helpers: pick the arrow direction and edge position (pure, no Qt)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect, Size
from tooltip_kit.logging_utils import PLACEMENT_LOGGER_NAME

if TYPE_CHECKING:
    from tooltip_kit.configuration import TooltipConfiguration

_PLACEMENT_LOGGER = logging.getLogger(PLACEMENT_LOGGER_NAME)


@dataclass(frozen=True)
class ArrowPlacement:
    direction: ArrowDirection
    position: ArrowPosition


@dataclass(frozen=True)
class ScreenRegions:
    """Six-way split of the screen used to guess the arrow direction.

    +---+---+---+---+
    |U/L| U | U |U/R|
    +---+---+---+---+
    |D/L| D | D |D/R|
    +---+---+---+---+
    """

    upper_left: Rect
    upper: Rect
    upper_right: Rect
    lower_left: Rect
    lower: Rect
    lower_right: Rect


def split_screen_regions(screen_bounds: Rect) -> ScreenRegions:
    origin_x = screen_bounds.x
    origin_y = screen_bounds.y
    width = screen_bounds.width
    height_2 = screen_bounds.height * 0.5
    width_2 = width * 0.5
    width_4 = width_2 * 0.5
    lower_y = origin_y + height_2
    right_x = origin_x + (width - width_4)
    return ScreenRegions(
        upper_left=Rect(origin_x, origin_y, width_4, height_2),
        upper=Rect(origin_x + width_4, origin_y, width_2, height_2),
        upper_right=Rect(right_x, origin_y, width_4, height_2),
        lower_left=Rect(origin_x, lower_y, width_4, height_2),
        lower=Rect(origin_x + width_4, lower_y, width_2, height_2),
        lower_right=Rect(right_x, lower_y, width_4, height_2),
    )


def guess_arrow_direction(
    point: Point,
    content_size: Size,
    source_rect: Rect,
    screen_bounds: Rect,
) -> ArrowDirection:
    width = screen_bounds.width
    regions = split_screen_regions(screen_bounds)

    if regions.upper.contains(point):
        return ArrowDirection.UP
    if regions.lower.contains(point):
        return ArrowDirection.DOWN

    if regions.upper_left.contains(point):
        if source_rect.max_x + content_size.width < width:
            return ArrowDirection.LEFT
        return ArrowDirection.UP
    if regions.upper_right.contains(point):
        if source_rect.max_x < width:
            return ArrowDirection.RIGHT
        return ArrowDirection.UP

    if regions.lower_left.contains(point):
        if source_rect.max_x + content_size.width < width:
            return ArrowDirection.LEFT
        return ArrowDirection.DOWN
    if regions.lower_right.contains(point):
        if source_rect.max_x < width:
            return ArrowDirection.RIGHT
        return ArrowDirection.DOWN

    return ArrowDirection.UP


def guess_arrow_horizontal_position(
    content_size: Size,
    source_rect: Rect,
    screen_bounds: Rect,
) -> ArrowPosition:
    """Position for up/down arrows: leading, center or trailing."""
    width = screen_bounds.width
    width_4 = width * 0.25

    if source_rect.min_x > width_4 and source_rect.max_x < (width - width_4):
        content_width_2 = content_size.width * 0.5
        if (source_rect.mid_x + content_width_2) > width:
            return ArrowPosition.TRAILING
        if (source_rect.mid_x - content_width_2) < 0:
            return ArrowPosition.LEADING
        return ArrowPosition.CENTER
    if (source_rect.max_x + content_size.width) > width:
        return ArrowPosition.TRAILING
    return ArrowPosition.LEADING


def guess_arrow_vertical_position(
    content_size: Size,
    source_rect: Rect,
    screen_bounds: Rect,
) -> ArrowPosition:
    """Position for left/right arrows: top, center or bottom."""
    height = screen_bounds.height
    height_4 = height * 0.25
    content_bottom = source_rect.min_y + content_size.height

    if content_bottom > height:
        return ArrowPosition.BOTTOM
    if source_rect.min_y > height_4 and content_bottom < (height - height_4):
        return ArrowPosition.CENTER
    return ArrowPosition.TOP


def guess_arrow_placement(
    point: Point,
    content_size: Size,
    source_rect: Rect,
    screen_bounds: Rect,
) -> ArrowPlacement:
    direction = guess_arrow_direction(point, content_size, source_rect, screen_bounds)
    if direction.is_vertical:
        position = guess_arrow_horizontal_position(content_size, source_rect, screen_bounds)
    else:
        position = guess_arrow_vertical_position(content_size, source_rect, screen_bounds)
    return ArrowPlacement(direction=direction, position=position)


def apply_auto_configuration(
    configuration: "TooltipConfiguration",
    source_rect: Rect,
    screen_bounds: Rect,
    *,
    point: Optional[Point] = None,
) -> Optional[ArrowPlacement]:
    """Resolve and store the arrow placement when auto-configuration is enabled.

    The resolver is fed the margin-expanded ``configuration.content_size`` for
    both tooltip flavours. ``point`` defaults to the source rect origin (the
    standalone view); attached tooltips pass the source center instead.
    Returns ``None`` without touching the configuration when auto-configuration
    is disabled.
    """
    if not configuration.is_auto_configuration_enabled:
        return None
    anchor = source_rect.origin if point is None else point
    placement = guess_arrow_placement(anchor, configuration.content_size, source_rect, screen_bounds)
    if (
        placement.direction != configuration.arrow_direction
        or placement.position != configuration.arrow_position
    ):
        _PLACEMENT_LOGGER.debug(
            "Arrow placement updated: point=(%.1f, %.1f) source=%s screen=%s -> %s/%s",
            anchor.x,
            anchor.y,
            source_rect.to_tuple(),
            screen_bounds.to_tuple(),
            placement.direction.value,
            placement.position.value,
        )
    configuration.update_arrow_direction(placement.direction)
    configuration.update_arrow_position(placement.position)
    return placement

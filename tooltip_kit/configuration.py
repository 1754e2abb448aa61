"""Tooltip configuration and the balloon geometry derived from it (pure, no Qt)."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect, Size

DEFAULT_ARROW_HEIGHT = 15.0
DEFAULT_BORDER_WIDTH = 4.0
DEFAULT_CORNER_RADIUS = 10.0
DEFAULT_TINT_COLOR = "pink"

PRESET_SIZES: Mapping[str, Size] = {
    "small": Size(80.0, 50.0),
    "default": Size(130.0, 80.0),
    "large": Size(180.0, 110.0),
}


class TooltipConfiguration:
    """Size and style parameters of one tooltip plus its resolved arrow placement.

    A configuration belongs to a single tooltip instance. The arrow direction
    and position only change through ``update_arrow_direction`` /
    ``update_arrow_position``; the placement resolver calls them only while
    ``is_auto_configuration_enabled`` is true. Every derived value below is
    recomputed on access so it always reflects the current placement.

    ``border_width`` should not exceed ``corner_radius``, otherwise the arrow
    notch overlaps the rounded corners. Inputs are not validated.
    """

    def __init__(
        self,
        content_size: Size,
        arrow_direction: ArrowDirection = ArrowDirection.DOWN,
        arrow_position: ArrowPosition = ArrowPosition.CENTER,
        tint_color: Any = DEFAULT_TINT_COLOR,
        *,
        arrow_height: float = DEFAULT_ARROW_HEIGHT,
        border_width: float = DEFAULT_BORDER_WIDTH,
        corner_radius: float = DEFAULT_CORNER_RADIUS,
        auto_configuration: bool = True,
    ) -> None:
        self._base_content_size = content_size
        self._arrow_direction = ArrowDirection(arrow_direction)
        self._arrow_position = ArrowPosition(arrow_position)
        self._tint_color = tint_color
        self.arrow_height = float(arrow_height)
        self.border_width = float(border_width)
        self.corner_radius = float(corner_radius)
        # Set to False to keep a caller-chosen arrow direction and position.
        self.is_auto_configuration_enabled = auto_configuration

    def __repr__(self) -> str:
        return (
            f"TooltipConfiguration(content_size={self._base_content_size!r}, "
            f"arrow_direction={self._arrow_direction.value!r}, "
            f"arrow_position={self._arrow_position.value!r}, "
            f"tint_color={self._tint_color!r})"
        )

    # Presets -----------------------------------------------------------------

    @classmethod
    def small(cls) -> "TooltipConfiguration":
        return cls(PRESET_SIZES["small"])

    @classmethod
    def default(cls) -> "TooltipConfiguration":
        return cls(PRESET_SIZES["default"])

    @classmethod
    def large(cls) -> "TooltipConfiguration":
        return cls(PRESET_SIZES["large"])

    @classmethod
    def from_preset(cls, name: str, **kwargs: Any) -> "TooltipConfiguration":
        key = (name or "").strip().lower()
        try:
            size = PRESET_SIZES[key]
        except KeyError:
            raise ValueError(f"Unknown tooltip preset {name!r}; expected one of {sorted(PRESET_SIZES)}") from None
        return cls(size, **kwargs)

    # State -------------------------------------------------------------------

    @property
    def base_content_size(self) -> Size:
        return self._base_content_size

    @property
    def arrow_direction(self) -> ArrowDirection:
        return self._arrow_direction

    @property
    def arrow_position(self) -> ArrowPosition:
        return self._arrow_position

    @property
    def tint_color(self) -> Any:
        return self._tint_color

    def set_tint_color(self, color: Any) -> "TooltipConfiguration":
        self._tint_color = color
        return self

    def update_arrow_direction(self, direction: ArrowDirection) -> None:
        self._arrow_direction = ArrowDirection(direction)

    def update_arrow_position(self, position: ArrowPosition) -> None:
        self._arrow_position = ArrowPosition(position)

    # Derived geometry --------------------------------------------------------

    @property
    def content_size(self) -> Size:
        """Base size plus room for the rounded corners."""
        margin = self.corner_radius * 2.0
        return Size(self._base_content_size.width + margin, self._base_content_size.height + margin)

    @property
    def content_rect(self) -> Rect:
        margin = self.border_width * 2.0
        size = self.content_size
        return Rect(0.0, 0.0, size.width + margin, size.height + margin)

    @property
    def balloon_size(self) -> Size:
        rect = self.content_rect
        width = rect.width
        height = rect.height
        if self._arrow_direction.is_vertical:
            height += self.arrow_height
        else:
            width += self.arrow_height
        return Size(width, height)

    @property
    def content_offset(self) -> Size:
        return Size(self.border_width, self.border_width)

    @property
    def content_position(self) -> Point:
        size = self.content_size
        return Point(self.border_width + size.width * 0.5, self.border_width + size.height * 0.5)

    @property
    def content_corner_radius(self) -> float:
        radius = self.corner_radius - self.border_width
        return radius if radius > 0 else self.corner_radius

    def arrow_offset(self) -> Size:
        """Shift that moves the balloon so the arrow tip lands on the anchor."""
        rect = self.content_rect
        w_2 = rect.width * 0.5
        h_2 = rect.height * 0.5
        length = self.arrow_height
        inset = length + self.border_width + self.corner_radius
        dx = 0.0
        dy = 0.0

        direction = self._arrow_direction
        if direction is ArrowDirection.UP:
            dy += length + h_2
        elif direction is ArrowDirection.DOWN:
            dy -= length + h_2
        elif direction is ArrowDirection.LEFT:
            dx += length + w_2
        elif direction is ArrowDirection.RIGHT:
            dx -= length + w_2
        else:  # pragma: no cover - closed enum
            raise ValueError(f"Unsupported arrow direction: {direction!r}")

        position = self._arrow_position
        if position is ArrowPosition.TOP:
            dy += h_2 - inset
        elif position is ArrowPosition.BOTTOM:
            dy -= h_2 - inset
        elif position is ArrowPosition.LEADING:
            dx += w_2 - inset
        elif position is ArrowPosition.TRAILING:
            dx -= w_2 - inset
        elif position is ArrowPosition.CENTER:
            pass
        else:  # pragma: no cover - closed enum
            raise ValueError(f"Unsupported arrow position: {position!r}")
        return Size(dx, dy)

    def snapshot(self) -> Dict[str, Any]:
        offset = self.arrow_offset()
        return {
            "base_content_size": list(self._base_content_size.to_tuple()),
            "arrow_direction": self._arrow_direction.value,
            "arrow_position": self._arrow_position.value,
            "tint_color": str(self._tint_color),
            "auto_configuration": bool(self.is_auto_configuration_enabled),
            "arrow_height": self.arrow_height,
            "border_width": self.border_width,
            "corner_radius": self.corner_radius,
            "content_size": list(self.content_size.to_tuple()),
            "content_rect": list(self.content_rect.to_tuple()),
            "balloon_size": list(self.balloon_size.to_tuple()),
            "content_offset": list(self.content_offset.to_tuple()),
            "content_position": list(self.content_position.to_tuple()),
            "content_corner_radius": self.content_corner_radius,
            "arrow_offset": [offset.width, offset.height],
        }

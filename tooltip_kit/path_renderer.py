"""Replays balloon outline commands into a painter adapter (pure, no Qt)."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from tooltip_kit.balloon_shape import BalloonPath, LineTo, MoveTo, RoundedRect


class PathPainterAdapter:
    def add_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...


def render_path(
    adapter: PathPainterAdapter,
    path: BalloonPath,
    *,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    trace: Optional[Callable[[str, Mapping[str, Any]], None]] = None,
) -> None:
    """Replay balloon outline commands into ``adapter``, translated by the offset."""
    if trace:
        trace(
            "render_path:start",
            {
                "commands": len(path),
                "offset_x": offset_x,
                "offset_y": offset_y,
            },
        )

    for command in path:
        if isinstance(command, RoundedRect):
            rect = command.rect
            adapter.add_rounded_rect(
                rect.x + offset_x,
                rect.y + offset_y,
                rect.width,
                rect.height,
                command.corner_radius,
            )
        elif isinstance(command, MoveTo):
            adapter.move_to(command.point.x + offset_x, command.point.y + offset_y)
        elif isinstance(command, LineTo):
            adapter.line_to(command.point.x + offset_x, command.point.y + offset_y)
        else:
            raise TypeError(f"Unsupported path command: {command!r}")

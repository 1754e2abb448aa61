from __future__ import annotations

from typing import List, Tuple

import pytest

from tooltip_kit.balloon_shape import MoveTo, build_balloon_path
from tooltip_kit.configuration import TooltipConfiguration
from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Size
from tooltip_kit.path_renderer import PathPainterAdapter, render_path


class FakeAdapter(PathPainterAdapter):
    def __init__(self) -> None:
        self.operations: List[Tuple[str, Tuple]] = []

    def add_rounded_rect(self, x: float, y: float, width: float, height: float, radius: float) -> None:
        self.operations.append(("rounded_rect", (x, y, width, height, radius)))

    def move_to(self, x: float, y: float) -> None:
        self.operations.append(("move", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self.operations.append(("line", (x, y)))


def _configuration() -> TooltipConfiguration:
    return TooltipConfiguration(
        Size(130.0, 80.0),
        arrow_direction=ArrowDirection.UP,
        arrow_position=ArrowPosition.CENTER,
    )


def test_render_path_replays_commands_in_order():
    adapter = FakeAdapter()

    render_path(adapter, build_balloon_path(_configuration()))

    assert adapter.operations == [
        ("rounded_rect", (0.0, 0.0, 158.0, 108.0, 10.0)),
        ("move", (64.0, 0.0)),
        ("line", (79.0, -15.0)),
        ("line", (94.0, 0.0)),
    ]


def test_render_path_applies_offset_and_traces():
    adapter = FakeAdapter()
    traces = []

    def _trace(stage: str, details: dict) -> None:
        traces.append((stage, details))

    render_path(adapter, build_balloon_path(_configuration()), offset_x=15.0, offset_y=15.0, trace=_trace)

    assert adapter.operations[0] == ("rounded_rect", (15.0, 15.0, 158.0, 108.0, 10.0))
    assert adapter.operations[2] == ("line", (94.0, 0.0))
    assert traces == [("render_path:start", {"commands": 4, "offset_x": 15.0, "offset_y": 15.0})]


def test_render_path_rejects_unknown_commands():
    with pytest.raises(TypeError):
        render_path(FakeAdapter(), (MoveTo(Point(0.0, 0.0)), "close"))  # type: ignore[arg-type]

"""Print the balloon layout computed for a source element as JSON."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from tooltip_kit.configuration import PRESET_SIZES, TooltipConfiguration
from tooltip_kit.geometry import ArrowDirection, ArrowPosition, Point, Rect
from tooltip_kit.layout import compute_attached_layout, compute_view_layout, point_source_rect
from tooltip_kit.logging_utils import CLI_LOGGER_NAME, configure_logging
from tooltip_kit.tooltip_settings import TooltipSettings, apply_env_overrides, build_configuration, load_tooltip_settings

LOG = logging.getLogger(CLI_LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tooltip-kit",
        description="Compute where a balloon tooltip lands for a source element.",
    )
    parser.add_argument(
        "--screen",
        nargs=2,
        type=float,
        metavar=("WIDTH", "HEIGHT"),
        required=True,
        help="Screen bounds the balloon must stay within (origin at 0,0).",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--source", nargs=4, type=float, metavar=("X", "Y", "WIDTH", "HEIGHT"))
    source.add_argument("--point", nargs=2, type=float, metavar=("X", "Y"))
    parser.add_argument("--preset", choices=sorted(PRESET_SIZES), help="Content size preset.")
    parser.add_argument("--tint", help="Balloon tint colour.")
    parser.add_argument(
        "--attached",
        action="store_true",
        help="Lay out as a tooltip attached to the source element instead of a standalone view.",
    )
    parser.add_argument("--direction", choices=[item.value for item in ArrowDirection])
    parser.add_argument("--position", choices=[item.value for item in ArrowPosition])
    parser.add_argument("--settings", help="Path to a tooltip settings JSON file.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")
    return parser


def _resolve_settings(args: argparse.Namespace) -> TooltipSettings:
    if args.settings:
        settings = load_tooltip_settings(Path(args.settings).expanduser())
    else:
        settings = TooltipSettings()
    return apply_env_overrides(settings)


def _build_configuration(args: argparse.Namespace, settings: TooltipSettings) -> TooltipConfiguration:
    configuration = build_configuration(settings)
    if args.preset:
        configuration = TooltipConfiguration.from_preset(
            args.preset,
            tint_color=configuration.tint_color,
            arrow_height=configuration.arrow_height,
            border_width=configuration.border_width,
            corner_radius=configuration.corner_radius,
            auto_configuration=configuration.is_auto_configuration_enabled,
        )
    if args.tint:
        configuration.set_tint_color(args.tint)
    if args.direction or args.position:
        configuration.is_auto_configuration_enabled = False
        if args.direction:
            configuration.update_arrow_direction(ArrowDirection(args.direction))
        if args.position:
            configuration.update_arrow_position(ArrowPosition(args.position))
    return configuration


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _resolve_settings(args)
    configure_logging(args.debug or settings.debug)

    configuration = _build_configuration(args, settings)
    screen_bounds = Rect(0.0, 0.0, args.screen[0], args.screen[1])
    if args.source:
        source_rect = Rect(*args.source)
    else:
        source_rect = point_source_rect(Point(*args.point))
    LOG.debug("Computing layout: source=%s screen=%s attached=%s", source_rect.to_tuple(), screen_bounds.to_tuple(), args.attached)

    if args.attached:
        layout = compute_attached_layout(configuration, source_rect, screen_bounds)
    else:
        layout = compute_view_layout(configuration, source_rect, screen_bounds)

    payload = {
        "layout": layout.to_payload(),
        "configuration": configuration.snapshot(),
    }
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Settings loader for hosts that configure tooltips from a JSON file."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from tooltip_kit.configuration import (
    DEFAULT_ARROW_HEIGHT,
    DEFAULT_BORDER_WIDTH,
    DEFAULT_CORNER_RADIUS,
    DEFAULT_TINT_COLOR,
    PRESET_SIZES,
    TooltipConfiguration,
)

LOG_RETENTION_MIN = 1
LOG_RETENTION_MAX = 20

ENV_PRESET = "TOOLTIP_KIT_PRESET"
ENV_TINT = "TOOLTIP_KIT_TINT"
ENV_AUTO_CONFIGURATION = "TOOLTIP_KIT_AUTO_CONFIGURATION"
ENV_DEBUG = "TOOLTIP_KIT_DEBUG"

_TRUE_TOKENS = {"1", "true", "yes", "on"}
_FALSE_TOKENS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class TooltipSettings:
    """Values used to build tooltip configurations for a host application."""

    preset: str = "default"
    arrow_height: float = DEFAULT_ARROW_HEIGHT
    border_width: float = DEFAULT_BORDER_WIDTH
    corner_radius: float = DEFAULT_CORNER_RADIUS
    tint_color: str = DEFAULT_TINT_COLOR
    auto_configuration: bool = True
    debug: bool = False
    log_retention: int = 5


def _parse_bool_token(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def _float(value: Any, fallback: float) -> float:
    if value is None or isinstance(value, bool):
        return fallback
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return fallback
    if numeric != numeric:
        return fallback
    return numeric


def _preset(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    token = value.strip().lower()
    return token if token in PRESET_SIZES else fallback


def _coerce_log_retention(value: Any, fallback: int) -> int:
    if value is None or isinstance(value, bool):
        return fallback
    try:
        numeric = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(LOG_RETENTION_MIN, min(LOG_RETENTION_MAX, numeric))


def settings_from_mapping(data: Mapping[str, Any]) -> TooltipSettings:
    defaults = TooltipSettings()
    tint = data.get("tint_color", defaults.tint_color)
    auto_configuration = _parse_bool_token(data.get("auto_configuration"))
    debug = _parse_bool_token(data.get("debug"))
    return TooltipSettings(
        preset=_preset(data.get("preset"), defaults.preset),
        arrow_height=_float(data.get("arrow_height"), defaults.arrow_height),
        border_width=_float(data.get("border_width"), defaults.border_width),
        corner_radius=_float(data.get("corner_radius"), defaults.corner_radius),
        tint_color=tint if isinstance(tint, str) and tint.strip() else defaults.tint_color,
        auto_configuration=defaults.auto_configuration if auto_configuration is None else auto_configuration,
        debug=defaults.debug if debug is None else debug,
        log_retention=_coerce_log_retention(data.get("log_retention"), defaults.log_retention),
    )


def load_tooltip_settings(path: Path) -> TooltipSettings:
    """Read tooltip settings from JSON, falling back to defaults on any error."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError, UnicodeDecodeError):
        return TooltipSettings()
    try:
        data: Dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError:
        return TooltipSettings()
    if not isinstance(data, dict):
        return TooltipSettings()
    return settings_from_mapping(data)


def apply_env_overrides(settings: TooltipSettings, env: Optional[Mapping[str, str]] = None) -> TooltipSettings:
    """Return a copy of ``settings`` with TOOLTIP_KIT_* environment values applied."""
    source = os.environ if env is None else env
    updates: Dict[str, Any] = {}

    preset = source.get(ENV_PRESET)
    if preset is not None:
        updates["preset"] = _preset(preset, settings.preset)
    tint = source.get(ENV_TINT)
    if tint is not None and tint.strip():
        updates["tint_color"] = tint.strip()
    auto_configuration = _parse_bool_token(source.get(ENV_AUTO_CONFIGURATION))
    if auto_configuration is not None:
        updates["auto_configuration"] = auto_configuration
    debug = _parse_bool_token(source.get(ENV_DEBUG))
    if debug is not None:
        updates["debug"] = debug

    if not updates:
        return settings
    return replace(settings, **updates)


def build_configuration(settings: TooltipSettings) -> TooltipConfiguration:
    return TooltipConfiguration.from_preset(
        settings.preset,
        tint_color=settings.tint_color,
        arrow_height=settings.arrow_height,
        border_width=settings.border_width,
        corner_radius=settings.corner_radius,
        auto_configuration=settings.auto_configuration,
    )

from __future__ import annotations

import json

import pytest

from tooltip_kit.geometry import Size
from tooltip_kit.tooltip_settings import (
    TooltipSettings,
    apply_env_overrides,
    build_configuration,
    load_tooltip_settings,
)


def test_missing_file_returns_defaults(tmp_path):
    assert load_tooltip_settings(tmp_path / "missing.json") == TooltipSettings()


@pytest.mark.parametrize("raw", ["{not json", "[1, 2, 3]", "null"])
def test_invalid_payloads_return_defaults(tmp_path, raw):
    path = tmp_path / "tooltip.json"
    path.write_text(raw, encoding="utf-8")

    assert load_tooltip_settings(path) == TooltipSettings()


def test_load_reads_values(tmp_path):
    path = tmp_path / "tooltip.json"
    path.write_text(
        json.dumps(
            {
                "preset": "Small",
                "arrow_height": 12,
                "border_width": 3.5,
                "corner_radius": "8",
                "tint_color": "#336699",
                "auto_configuration": "off",
                "debug": True,
                "log_retention": 3,
            }
        ),
        encoding="utf-8",
    )

    settings = load_tooltip_settings(path)

    assert settings == TooltipSettings(
        preset="small",
        arrow_height=12.0,
        border_width=3.5,
        corner_radius=8.0,
        tint_color="#336699",
        auto_configuration=False,
        debug=True,
        log_retention=3,
    )


def test_bad_values_fall_back_individually(tmp_path):
    path = tmp_path / "tooltip.json"
    path.write_text(
        json.dumps(
            {
                "preset": "gigantic",
                "arrow_height": "tall",
                "tint_color": "",
                "auto_configuration": "maybe",
                "log_retention": 99,
            }
        ),
        encoding="utf-8",
    )

    settings = load_tooltip_settings(path)

    assert settings.preset == "default"
    assert settings.arrow_height == 15.0
    assert settings.tint_color == "pink"
    assert settings.auto_configuration is True
    assert settings.log_retention == 20


def test_log_retention_has_a_floor(tmp_path):
    path = tmp_path / "tooltip.json"
    path.write_text(json.dumps({"log_retention": 0}), encoding="utf-8")

    assert load_tooltip_settings(path).log_retention == 1


def test_env_overrides_apply_on_top_of_file_values():
    settings = TooltipSettings(preset="small", tint_color="green")

    updated = apply_env_overrides(
        settings,
        {
            "TOOLTIP_KIT_PRESET": "large",
            "TOOLTIP_KIT_TINT": " blue ",
            "TOOLTIP_KIT_AUTO_CONFIGURATION": "0",
            "TOOLTIP_KIT_DEBUG": "yes",
        },
    )

    assert updated.preset == "large"
    assert updated.tint_color == "blue"
    assert updated.auto_configuration is False
    assert updated.debug is True
    assert settings.preset == "small"


def test_env_overrides_ignore_unknown_tokens():
    settings = TooltipSettings()

    updated = apply_env_overrides(settings, {"TOOLTIP_KIT_PRESET": "enormous", "TOOLTIP_KIT_DEBUG": "sometimes"})

    assert updated == settings


def test_env_overrides_read_process_environment(monkeypatch):
    monkeypatch.setenv("TOOLTIP_KIT_TINT", "orange")

    assert apply_env_overrides(TooltipSettings()).tint_color == "orange"


def test_build_configuration_uses_settings():
    configuration = build_configuration(
        TooltipSettings(preset="large", arrow_height=10.0, tint_color="teal", auto_configuration=False)
    )

    assert configuration.base_content_size == Size(180.0, 110.0)
    assert configuration.arrow_height == 10.0
    assert configuration.tint_color == "teal"
    assert configuration.is_auto_configuration_enabled is False


def test_undecodable_file_returns_defaults(tmp_path):
    path = tmp_path / "tooltip.json"
    path.write_bytes(b'{"preset": "\xff\xfe"}')

    assert load_tooltip_settings(path) == TooltipSettings()

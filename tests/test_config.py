import logging

import pytest

from virtual_stick.config_manager import (
    DEFAULT_BASE_COLOR,
    DEFAULT_SIZE,
    DEFAULT_STICK_COLOR,
    StickConfig,
    to_bool,
)


class TestStickConfig:
    def test_defaults(self):
        cfg = StickConfig()
        assert cfg.size == 100
        assert cfg.radius == 50
        assert cfg.throttle == 0
        assert cfg.base_color == "#000033"
        assert cfg.stick_color == "#3D59AB"
        assert not cfg.disabled

    def test_stick_size_is_two_thirds(self):
        assert StickConfig(size=150).stick_size == pytest.approx(100)

    @pytest.mark.parametrize("kwargs", [
        {"size": 0},
        {"size": -10},
        {"throttle": -1},
        {"base_color": ""},
        {"stick_color": "  "},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            StickConfig(**kwargs)


class TestFromOptions:
    def test_host_option_names(self):
        cfg = StickConfig.from_options({
            "size": 200,
            "baseColor": "#111111",
            "stickColor": "#222222",
            "throttle": 50,
            "disabled": True,
        })
        assert cfg == StickConfig(
            size=200.0, base_color="#111111", stick_color="#222222", throttle=50.0, disabled=True,
        )

    def test_snake_case_names(self):
        cfg = StickConfig.from_options({"base_color": "red", "stick_color": "blue"})
        assert (cfg.base_color, cfg.stick_color) == ("red", "blue")

    def test_empty_mapping_gives_defaults(self):
        assert StickConfig.from_options({}) == StickConfig()

    def test_bad_values_fall_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="virtual_stick.config_manager"):
            cfg = StickConfig.from_options({
                "size": "huge",
                "throttle": -5,
                "baseColor": "",
                "stickColor": " ",
            })
        assert cfg.size == DEFAULT_SIZE
        assert cfg.throttle == 0
        assert cfg.base_color == DEFAULT_BASE_COLOR
        assert cfg.stick_color == DEFAULT_STICK_COLOR
        assert len(caplog.records) == 4

    def test_numeric_strings_are_converted(self):
        cfg = StickConfig.from_options({"size": "80", "throttle": "16.5", "disabled": "yes"})
        assert cfg.size == 80.0
        assert cfg.throttle == 16.5
        assert cfg.disabled


class TestToBool:
    @pytest.mark.parametrize("value, expected", [
        (None, False),
        (True, True),
        ("on", True),
        ("TRUE", True),
        ("0", False),
        ("off", False),
        (1, True),
        (0.0, False),
    ])
    def test_values(self, value, expected):
        assert to_bool(value, False) is expected

    def test_unknown_string_uses_default(self):
        assert to_bool("maybe", True) is True

from __future__ import annotations

import pytest

from objtasks.config import JsonOptions, ObjtasksConfig


class TestJsonOptions:
    def test_default_values(self) -> None:
        opts = JsonOptions()
        assert opts.indent is None
        assert opts.separators == (",", ":")
        assert opts.ensure_ascii is False

    def test_frozen_immutability(self) -> None:
        opts = JsonOptions()
        with pytest.raises(AttributeError):
            opts.indent = 4  # type: ignore[misc]


class TestObjtasksConfig:
    def test_default_values(self) -> None:
        cfg = ObjtasksConfig()
        assert cfg.json == JsonOptions()
        assert cfg.log_level == "WARNING"

    def test_from_env_empty(self) -> None:
        assert ObjtasksConfig.from_env({}) == ObjtasksConfig()

    def test_from_env_overrides(self) -> None:
        cfg = ObjtasksConfig.from_env(
            {"OBJTASKS_LOG_LEVEL": "debug", "OBJTASKS_JSON_INDENT": "2"}
        )
        assert cfg.log_level == "DEBUG"
        assert cfg.json.indent == 2
        assert cfg.json.separators == (",", ": ")

    def test_from_env_bad_indent(self) -> None:
        with pytest.raises(ValueError):
            ObjtasksConfig.from_env({"OBJTASKS_JSON_INDENT": "wide"})

    def test_from_env_bad_log_level(self) -> None:
        with pytest.raises(ValueError, match="OBJTASKS_LOG_LEVEL"):
            ObjtasksConfig.from_env({"OBJTASKS_LOG_LEVEL": "verbose"})

    def test_from_env_blank_log_level(self) -> None:
        assert ObjtasksConfig.from_env({"OBJTASKS_LOG_LEVEL": ""}).log_level == "WARNING"

    def test_frozen_immutability(self) -> None:
        cfg = ObjtasksConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "INFO"  # type: ignore[misc]

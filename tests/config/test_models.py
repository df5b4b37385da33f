"""Tests for config models — defaults and sparse overrides."""

import pytest

from deptdir.config.models import DirectoryConfig, ReplConfig


class TestSectionDefaults:
    def test_repl_defaults(self) -> None:
        cfg = ReplConfig()
        assert cfg.prompt == "> "
        assert cfg.show_prompt is True

    def test_directory_defaults(self) -> None:
        assert DirectoryConfig().keep_sorted is False

    def test_sparse_override(self) -> None:
        cfg = DirectoryConfig.model_validate({"keep_sorted": True})
        assert cfg.keep_sorted is True

    @pytest.mark.parametrize("model", [ReplConfig(), DirectoryConfig()])
    def test_frozen(self, model: object) -> None:
        with pytest.raises(Exception):
            model.anything = 1  # type: ignore[attr-defined]


class TestReplConfig:
    def test_custom_prompt(self) -> None:
        assert ReplConfig(prompt="dept> ").prompt == "dept> "

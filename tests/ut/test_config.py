"""测试 core.config / core.log"""
import importlib

import numpy as np
import pytest
import yaml

from ndassert.core import (
    AssertConfig,
    AssertConfigError,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from ndassert.core import log


class TestGlobalConfig:
    """全局配置"""

    def test_defaults(self):
        config = get_config()
        assert config.rtol == 1e-5
        assert config.atol == 1e-3

    def test_set_partial(self):
        set_config(atol=1e-4)
        config = get_config()
        assert config.atol == 1e-4
        assert config.rtol == 1e-5

    def test_reset(self):
        set_config(rtol=0.1, atol=0.2)
        reset_config()
        assert get_config() == AssertConfig()

    def test_invalid_value_keeps_previous(self):
        set_config(atol=1e-4)
        with pytest.raises(ValueError, match="atol"):
            set_config(atol=-1.0)
        assert get_config().atol == 1e-4

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "abc", None, True, "nan"])
    def test_validate_rejects(self, value):
        with pytest.raises(ValueError):
            AssertConfig(rtol=value).validate()

    def test_validate_coerces_numbers(self):
        config = AssertConfig(rtol=np.float32(0.5), atol="1e-3")
        config.validate()
        assert type(config.rtol) is float and config.rtol == 0.5
        assert type(config.atol) is float and config.atol == 1e-3

    def test_set_config_numpy_scalar(self):
        set_config(atol=np.float64(1e-4))
        assert get_config().atol == 1e-4


class TestLoadConfig:
    """YAML 配置加载"""

    def test_load_tolerance(self, tmp_path):
        path = tmp_path / "ndassert.yaml"
        with open(path, "w") as fh:
            yaml.dump({"tolerance": {"rtol": 0.001, "atol": 0.01}}, fh)
        config = load_config(path)
        assert config.rtol == 0.001
        assert config.atol == 0.01
        assert get_config() is config

    def test_load_partial(self, tmp_path):
        path = tmp_path / "ndassert.yaml"
        path.write_text("tolerance:\n  atol: 0.5\n")
        config = load_config(str(path))
        assert config.atol == 0.5
        assert config.rtol == 1e-5

    def test_load_exponent_without_dot(self, tmp_path):
        """YAML 中 1e-5 被解析为字符串，仍按数值加载"""
        path = tmp_path / "ndassert.yaml"
        path.write_text("tolerance:\n  rtol: 1e-4\n  atol: 5e-3\n")
        config = load_config(path)
        assert config.rtol == 1e-4
        assert config.atol == 5e-3

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AssertConfig()

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(AssertConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yaml")

    def test_load_invalid_yaml(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("[ invalid: yaml: {")
        with pytest.raises(AssertConfigError, match="Failed to parse"):
            load_config(bad)

    def test_load_non_dict(self, tmp_path):
        bad = tmp_path / "list.yaml"
        bad.write_text("- item1\n- item2\n")
        with pytest.raises(AssertConfigError, match="Expected a YAML mapping"):
            load_config(bad)

    def test_load_bad_tolerance_section(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("tolerance: 0.1\n")
        with pytest.raises(AssertConfigError, match="must be a mapping"):
            load_config(bad)

    def test_load_negative_tolerance(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("tolerance:\n  rtol: -0.1\n")
        with pytest.raises(AssertConfigError, match="Invalid tolerance"):
            load_config(bad)
        assert get_config() == AssertConfig()


class TestLog:
    """日志"""

    def test_parse_level(self):
        assert log.parse_level("debug") is log.DEBUG
        assert log.parse_level("WARNING") is log.WARN

    def test_parse_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            log.parse_level("verbose")

    def test_level_filter(self, capsys):
        log.set_level(log.WARN)
        logger = log.Logger("unit")
        logger.info("hidden")
        logger.warn("shown")
        captured = capsys.readouterr()
        assert "hidden" not in captured.out
        assert "[WARN] [unit] shown" in captured.err

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("NDASSERT_LOG_LEVEL", "debug")
        assert log.init_level_from_env() == log.DEBUG
        assert log.get_level() == log.DEBUG

    def test_env_unset_keeps_level(self, monkeypatch):
        monkeypatch.delenv("NDASSERT_LOG_LEVEL", raising=False)
        log.set_level(log.ERROR)
        assert log.init_level_from_env() == log.ERROR

    def test_env_unknown_level_falls_back(self, monkeypatch, capsys):
        """非法取值不影响导入，回退 INFO 并告警"""
        monkeypatch.setenv("NDASSERT_LOG_LEVEL", "verbose")
        try:
            importlib.reload(log)
            assert log.get_level() == log.INFO
            err = capsys.readouterr().err
            assert err.count("ignoring NDASSERT_LOG_LEVEL='verbose', using INFO") == 1
        finally:
            monkeypatch.delenv("NDASSERT_LOG_LEVEL")
            importlib.reload(log)

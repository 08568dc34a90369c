"""Tests for configuration loading and validation."""

import pytest

from resume_linter.config import LinterConfig, load_config, load_raw_config
from resume_linter.config_validator import (
    ConfigError,
    Severity,
    has_errors,
    validate_config,
)


class TestValidateConfig:
    """Tests for validate_config()."""

    def _valid_config(self) -> dict:
        """Return a minimal valid config."""
        return {
            "log_level": "INFO",
            "max_input_chars": 50_000,
            "default_render_format": "rtf",
            "rules": {
                "word_count": {"enabled": True, "params": {"min_words": 50, "max_words": 900}},
                "header_separators": {"enabled": False},
            },
        }

    def test_valid_config_no_errors(self):
        assert validate_config(self._valid_config()) == []

    def test_empty_config_is_valid(self):
        assert validate_config({}) == []

    def test_bad_log_level(self):
        config = self._valid_config()
        config["log_level"] = "LOUD"
        issues = validate_config(config)
        assert has_errors(issues)
        assert [e.field for e in issues] == ["log_level"]

    @pytest.mark.parametrize("value", [0, -5, "big", True])
    def test_bad_max_input_chars(self, value):
        config = self._valid_config()
        config["max_input_chars"] = value
        issues = validate_config(config)
        assert [e.field for e in issues] == ["max_input_chars"]

    def test_bad_render_format(self):
        config = self._valid_config()
        config["default_render_format"] = "pdf"
        issues = validate_config(config)
        assert issues[0].field == "default_render_format"
        assert issues[0].severity == Severity.ERROR

    def test_unknown_rule_is_warning(self):
        config = self._valid_config()
        config["rules"]["spellcheck"] = {"enabled": True}
        issues = validate_config(config)
        assert not has_errors(issues)
        assert issues == [
            ConfigError(field="rules.spellcheck", message="Unknown rule id 'spellcheck' (ignored)", severity=Severity.WARNING)
        ]

    def test_rules_must_be_mapping(self):
        config = self._valid_config()
        config["rules"] = ["word_count"]
        issues = validate_config(config)
        assert has_errors(issues)
        assert issues[0].field == "rules"

    def test_rule_override_shape(self):
        config = self._valid_config()
        config["rules"] = {"grammar": {"enabled": "yes", "params": []}}
        fields = [e.field for e in validate_config(config)]
        assert fields == ["rules.grammar.enabled", "rules.grammar.params"]

    def test_word_count_bounds(self):
        config = self._valid_config()
        config["rules"]["word_count"]["params"] = {"min_words": 900, "max_words": 100}
        issues = validate_config(config)
        assert [e.field for e in issues] == ["rules.word_count.params"]

    def test_word_count_param_types(self):
        config = self._valid_config()
        config["rules"]["word_count"]["params"] = {"min_words": -1}
        issues = validate_config(config)
        assert [e.field for e in issues] == ["rules.word_count.params.min_words"]


class TestHasErrors:
    def test_warnings_only(self):
        assert not has_errors([ConfigError("f", "m", Severity.WARNING)])

    def test_with_error(self):
        assert has_errors([ConfigError("f", "m", Severity.WARNING), ConfigError("g", "m", Severity.ERROR)])


class TestLoadConfig:
    def test_explicit_path(self, tmp_path):
        path = tmp_path / "linter.yaml"
        path.write_text("log_level: debug\nmax_input_chars: 10\nrules:\n  bullets:\n    enabled: false\n")
        config = load_config(str(path))
        assert config == LinterConfig(
            log_level="DEBUG",
            max_input_chars=10,
            default_render_format="html",
            rules={"bullets": {"enabled": False}},
        )

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_raw_config(str(tmp_path / "nope.yaml"))

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_raw_config(str(path))

    def test_env_var_selects_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("default_render_format: rtf\n")
        monkeypatch.setenv("RESUME_LINTER_CONFIG", str(path))
        assert load_config().default_render_format == "rtf"

    def test_local_overlay_is_deep_merged(self, tmp_path, monkeypatch):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(
            "max_input_chars: 100\nrules:\n  word_count:\n    params:\n      min_words: 10\n      max_words: 20\n"
        )
        (config_dir / "config.local.yaml").write_text("rules:\n  word_count:\n    params:\n      max_words: 99\n")
        monkeypatch.chdir(tmp_path)

        raw = load_raw_config()
        assert raw["max_input_chars"] == 100
        assert raw["rules"]["word_count"]["params"] == {"min_words": 10, "max_words": 99}

    def test_shipped_default_config_is_valid(self):
        raw = load_raw_config()
        assert not has_errors(validate_config(raw))
        assert LinterConfig.from_dict(raw).default_render_format in ("html", "rtf")

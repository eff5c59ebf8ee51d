"""Tests for configuration loading and language resolution."""

import pytest

from auto_doc_generator.core import config as core_config
from auto_doc_generator.core.config import (
    detect_language,
    load_config,
    parse_args_and_get_config,
    resolve_language_family,
    validate_config_file,
)
from auto_doc_generator.core.exceptions import ConfigurationError
from auto_doc_generator.models.documentation import LanguageFamily


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_missing_file(self, tmp_path):
        """Test a missing config file is rejected."""
        with pytest.raises(ConfigurationError, match="does not exist"):
            validate_config_file(str(tmp_path / "missing.yaml"))

    def test_directory(self, tmp_path):
        """Test a directory is rejected."""
        with pytest.raises(ConfigurationError, match="not a file"):
            validate_config_file(str(tmp_path))

    def test_empty_file(self, tmp_path):
        """Test an empty config file is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="empty"):
            validate_config_file(str(path))

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- python\n- javascript\n")
        with pytest.raises(ConfigurationError, match="dictionary"):
            validate_config_file(str(path))

    def test_invalid_yaml(self, tmp_path):
        """Test unparsable YAML is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("extensions: [unclosed\n")
        with pytest.raises(ConfigurationError, match="YAML parsing failed"):
            validate_config_file(str(path))

    def test_extension_without_dot(self, tmp_path):
        """Test extensions must start with a dot."""
        path = tmp_path / "config.yaml"
        path.write_text("extensions:\n  pyi: python\n")
        with pytest.raises(ConfigurationError, match="Validation failed"):
            validate_config_file(str(path))

    def test_unknown_family(self, tmp_path):
        """Test languages must map to a known family."""
        path = tmp_path / "config.yaml"
        path.write_text("languages:\n  ruby: ruby\n")
        with pytest.raises(ConfigurationError, match="Validation failed"):
            validate_config_file(str(path))

    def test_valid_config(self, tmp_path):
        """Test a valid config parses into the model."""
        path = tmp_path / "config.yaml"
        path.write_text("extensions:\n  .PYI: python\nlanguages:\n  JSX: javascript\n")
        config = validate_config_file(str(path))
        assert config.extensions == {".pyi": "python"}
        assert config.languages == {"jsx": "javascript"}


class TestLanguageResolution:
    """Tests for language id and extension mapping."""

    @pytest.mark.parametrize("language,family", [
        ("python", LanguageFamily.PYTHON),
        ("Python", LanguageFamily.PYTHON),
        ("javascript", LanguageFamily.JAVASCRIPT),
        ("typescript", LanguageFamily.JAVASCRIPT),
        ("typescriptreact", LanguageFamily.JAVASCRIPT),
        (LanguageFamily.PYTHON, LanguageFamily.PYTHON),
        ("ruby", None),
        ("", None),
        (None, None),
    ])
    def test_builtin_languages(self, language, family):
        """Test the built-in language map."""
        assert resolve_language_family(language) is family

    @pytest.mark.parametrize("file_path,language", [
        ("a/b/module.py", "python"),
        ("APP.JS", "javascript"),
        ("component.tsx", "typescriptreact"),
        ("lib.ts", "typescript"),
        ("README", None),
        ("lib.rb", None),
    ])
    def test_detect_language(self, file_path, language):
        """Test extension detection."""
        assert detect_language(file_path) == language

    def test_config_extends_builtin_maps(self, tmp_path):
        """Test config entries are layered over the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("extensions:\n  .pyi: python\n  .es6: jsx\nlanguages:\n  jsx: javascript\n")

        load_config(str(path))

        assert core_config.CONFIG_PATH == str(path)
        assert detect_language("stub.pyi") == "python"
        assert detect_language("old.es6") == "jsx"
        assert resolve_language_family("jsx") is LanguageFamily.JAVASCRIPT
        assert detect_language("module.py") == "python"

    def test_reset(self, tmp_path):
        """Test load_config(None) restores the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("languages:\n  jsx: javascript\n")
        load_config(str(path))
        load_config(None)

        assert core_config.CONFIG_PATH is None
        assert resolve_language_family("jsx") is None


class TestParseArgs:
    """Tests for server argument parsing."""

    def test_invalid_config_exits(self, tmp_path, no_log_config):
        """Test an invalid --config aborts startup."""
        with pytest.raises(SystemExit):
            parse_args_and_get_config(["--config", str(tmp_path / "missing.yaml")])

    def test_config_from_environment(self, tmp_path, monkeypatch, no_log_config):
        """Test AUTO_DOC_CONFIG is used when --config is absent."""
        path = tmp_path / "config.yaml"
        path.write_text("languages:\n  jsx: javascript\n")
        monkeypatch.setenv("AUTO_DOC_CONFIG", str(path))

        parse_args_and_get_config([])

        assert core_config.CONFIG_PATH == str(path)

    def test_logging_options(self, monkeypatch):
        """Test --log-level and --log-file reach configure_logging."""
        calls = []
        monkeypatch.setattr(core_config, "configure_logging", lambda **kwargs: calls.append(kwargs))

        parse_args_and_get_config(["--log-level", "DEBUG", "--log-file", "out.log"])

        assert calls == [{"log_level": "DEBUG", "log_file": "out.log"}]

"""
Tests for the config validator.

Structural properties checked:
    1. Required path options are present and non-empty strings
    2. Optional toggles, if present, take an enumerated value
    3. Paths are plausible path strings
"""

import pytest
from compass_config.examples import build_foundation_config
from compass_config.model import OutputStyle, ProjectConfig
from compass_config.validation import (
    ConfigValidationError,
    ValidationReport,
    ensure_valid,
    validate_config,
)


def build_valid_config() -> ProjectConfig:
    return ProjectConfig(
        http_path="/",
        css_dir="stylesheets",
        sass_dir="sass",
        images_dir="images",
        javascripts_dir="javascripts",
    )


class TestValidationReport:
    """Test report bookkeeping."""

    def test_empty_report_is_valid(self):
        assert ValidationReport().is_valid

    def test_errors_make_report_invalid(self):
        report = ValidationReport()
        report.add_error("bad")
        assert not report.is_valid

    def test_deduplicates(self):
        report = ValidationReport()
        report.add_error("bad")
        report.add_error("bad")
        report.add_warning("hmm")
        report.add_warning("hmm")
        assert report.errors == ["bad"]
        assert report.warnings == ["hmm"]


class TestRequiredPaths:
    """Required directory options must be present."""

    def test_valid_config(self):
        report = validate_config(build_valid_config())
        assert report.is_valid
        assert report.warnings == []

    def test_foundation_config_is_clean(self):
        report = validate_config(build_foundation_config())
        assert report.is_valid
        assert report.warnings == []

    def test_empty_config_reports_each_path(self):
        report = validate_config(ProjectConfig())
        assert len(report.errors) == 4
        for name in ("css_dir", "sass_dir", "images_dir", "javascripts_dir"):
            assert any(name in err for err in report.errors)

    def test_none_path(self):
        config = build_valid_config()
        config.images_dir = None
        report = validate_config(config)
        assert any("images_dir" in err for err in report.errors)

    def test_whitespace_only_path(self):
        config = build_valid_config()
        config.css_dir = "   "
        assert not validate_config(config).is_valid

    def test_non_string_path(self):
        config = build_valid_config()
        config.sass_dir = 3
        report = validate_config(config)
        assert any("must be a string" in err for err in report.errors)

    def test_nul_byte(self):
        config = build_valid_config()
        config.css_dir = "css\x00"
        assert not validate_config(config).is_valid

    def test_surrounding_whitespace_warns(self):
        config = build_valid_config()
        config.css_dir = " css"
        report = validate_config(config)
        assert report.is_valid
        assert any("whitespace" in w for w in report.warnings)

    def test_absolute_path_warns(self):
        config = build_valid_config()
        config.images_dir = "/var/www/images"
        report = validate_config(config)
        assert report.is_valid
        assert any("absolute" in w for w in report.warnings)

    def test_same_source_and_output(self):
        config = build_valid_config()
        config.css_dir = "assets/"
        config.sass_dir = "assets"
        report = validate_config(config)
        assert any("same directory" in err for err in report.errors)


class TestHttpPath:
    """http_path is optional but must be usable when set."""

    def test_unset_is_fine(self):
        config = build_valid_config()
        config.http_path = None
        assert validate_config(config).is_valid

    def test_missing_trailing_slash_warns(self):
        config = build_valid_config()
        config.http_path = "/static"
        report = validate_config(config)
        assert report.is_valid
        assert any("http_path" in w for w in report.warnings)

    def test_empty_counts_as_unset(self):
        config = build_valid_config()
        config.http_path = ""
        report = validate_config(config)
        assert report.is_valid
        assert report.warnings == []
        assert not config.is_set("http_path")
        assert config.effective("http_path") == "/"

    def test_non_string_is_error(self):
        config = build_valid_config()
        config.http_path = 5
        report = validate_config(config)
        assert any("http_path must be a string" in err for err in report.errors)


class TestOptionalToggles:
    """Optional toggles must hold their enumerated values."""

    def test_valid_toggles(self):
        config = build_valid_config()
        config.output_style = OutputStyle.COMPRESSED
        config.relative_assets = True
        config.line_comments = False
        assert validate_config(config).is_valid

    def test_raw_string_output_style(self):
        config = build_valid_config()
        config.output_style = "fancy"
        report = validate_config(config)
        assert any("output_style" in err for err in report.errors)

    def test_non_bool_toggle(self):
        config = build_valid_config()
        config.line_comments = "no"
        report = validate_config(config)
        assert any("line_comments must be true or false" in err for err in report.errors)


class TestEnsureValid:
    """ensure_valid raises with the full report."""

    def test_returns_report_when_valid(self):
        report = ensure_valid(build_valid_config())
        assert report.is_valid

    def test_raises_on_errors(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            ensure_valid(ProjectConfig(css_dir="css"))
        assert len(exc_info.value.report.errors) == 3
        assert "sass_dir" in str(exc_info.value)

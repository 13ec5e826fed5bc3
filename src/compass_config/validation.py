"""
Config Validator — structural checks of ProjectConfig objects.

This module checks:
    - Required directory options are present and non-empty
    - Optional toggles hold one of their enumerated values
    - Paths are plausible path strings
    - Source and output directories are distinct

IMPORTANT: This is the analysis layer. It does NOT modify the config.
It only produces read-only reports.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from compass_config.model import (
    OPTIONAL_OPTIONS,
    REQUIRED_PATH_OPTIONS,
    OutputStyle,
    PreferredSyntax,
    ProjectConfig,
)


_OPTIONAL_TYPES = {
    "output_style": OutputStyle,
    "preferred_syntax": PreferredSyntax,
    "relative_assets": bool,
    "line_comments": bool,
}


class ConfigValidationError(Exception):
    """Raised by ensure_valid when a config has validation errors."""

    def __init__(self, report: ValidationReport):
        lines = "\n".join(f"  - {err}" for err in report.errors)
        super().__init__(f"Invalid project configuration:\n{lines}")
        self.report = report


@dataclass
class ValidationReport:
    """Findings for a single ProjectConfig."""

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        if msg not in self.errors:
            self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        if msg not in self.warnings:
            self.warnings.append(msg)


def _check_path(report: ValidationReport, name: str, value: str) -> None:
    if "\x00" in value:
        report.add_error(f"{name} contains a NUL byte")
    if value != value.strip():
        report.add_warning(f"{name} has leading or trailing whitespace: {value!r}")


def validate_config(config: ProjectConfig) -> ValidationReport:
    """
    Perform structural validation of a ProjectConfig.

    Returns a ValidationReport with errors and warnings.
    """
    report = ValidationReport()

    # =========================================================================
    # 1. REQUIRED PATHS
    # =========================================================================

    for name in REQUIRED_PATH_OPTIONS:
        value = getattr(config, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            report.add_error(f"{name} is required and must be a non-empty path")
            continue
        if not isinstance(value, str):
            report.add_error(f"{name} must be a string, got {type(value).__name__}")
            continue
        _check_path(report, name, value)
        if os.path.isabs(value):
            report.add_warning(f"{name} is absolute ({value}); Compass resolves directories from the project root")

    # =========================================================================
    # 2. HTTP PATH
    # =========================================================================

    # "" counts as unset, like ProjectConfig.is_set
    if config.is_set("http_path"):
        if not isinstance(config.http_path, str):
            report.add_error(f"http_path must be a string, got {type(config.http_path).__name__}")
        else:
            _check_path(report, "http_path", config.http_path)
            if not config.http_path.endswith("/"):
                report.add_warning(f"http_path should end with '/' ({config.http_path})")

    # =========================================================================
    # 3. OPTIONAL TOGGLES
    # =========================================================================

    for name in OPTIONAL_OPTIONS:
        value = getattr(config, name)
        if value is None:
            continue
        expected = _OPTIONAL_TYPES[name]
        if not isinstance(value, expected):
            if issubclass(expected, bool):
                report.add_error(f"{name} must be true or false, got {value!r}")
            else:
                valid = ", ".join(member.value for member in expected)
                report.add_error(f"{name} must be one of [{valid}], got {value!r}")

    # =========================================================================
    # 4. DIRECTORY RELATIONSHIPS
    # =========================================================================

    if config.sass_dir and config.css_dir and isinstance(config.sass_dir, str) and isinstance(config.css_dir, str):
        if os.path.normpath(config.sass_dir) == os.path.normpath(config.css_dir):
            report.add_error(f"sass_dir and css_dir point to the same directory ({config.sass_dir})")

    return report


def ensure_valid(config: ProjectConfig) -> ValidationReport:
    """
    Validate and raise if there are errors.

    Raises:
        ConfigValidationError: If the report has any errors
    """
    report = validate_config(config)
    if not report.is_valid:
        raise ConfigValidationError(report)
    return report


__all__ = ["ConfigValidationError", "ValidationReport", "validate_config", "ensure_valid"]

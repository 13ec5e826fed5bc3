"""
Core Project Configuration Objects

Defines the data structures describing a Compass/Sass project manifest.

These are pure data classes representing:
    - Output styles (CSS formatting density)
    - Preferred syntaxes (scss / sass)
    - The project configuration itself (paths + toggles)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about config.rb syntax
        - Perform no I/O
        - Are fully serializable
        - Represent configuration, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_CONFIG_FILENAME = "config.rb"


class OutputStyle(Enum):
    """CSS formatting modes understood by the Sass compiler."""
    EXPANDED = "expanded"
    NESTED = "nested"
    COMPACT = "compact"
    COMPRESSED = "compressed"


class PreferredSyntax(Enum):
    """Input syntax preference for generated stylesheets."""
    SCSS = "scss"
    SASS = "sass"


@dataclass(frozen=True)
class Symbol:
    """
    A Ruby symbol literal (:name) from a manifest.

    Never equal to a str. Only Symbol values are written back as :name.
    """

    name: str

    def __str__(self) -> str:
        return f":{self.name}"


REQUIRED_PATH_OPTIONS = ("css_dir", "sass_dir", "images_dir", "javascripts_dir")

OPTIONAL_OPTIONS = ("output_style", "relative_assets", "line_comments", "preferred_syntax")

ALL_OPTIONS = ("http_path",) + REQUIRED_PATH_OPTIONS + OPTIONAL_OPTIONS

# Values the compiler falls back to when an option is absent from the manifest.
OPTION_DEFAULTS: Dict[str, Any] = {
    "http_path": "/",
    "output_style": OutputStyle.EXPANDED,
    "relative_assets": False,
    "line_comments": True,
    "preferred_syntax": PreferredSyntax.SCSS,
}

_ENUM_OPTIONS = {
    "output_style": OutputStyle,
    "preferred_syntax": PreferredSyntax,
}

_BOOL_OPTIONS = ("relative_assets", "line_comments")


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Option '{name}' expects a boolean, got {value!r}")


def _coerce_enum(name: str, value: Any) -> Enum:
    enum_cls = _ENUM_OPTIONS[name]
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, Symbol):
        value = value.name
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lstrip(":").lower())
        except ValueError:
            pass
    valid = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Option '{name}' must be one of [{valid}], got {value!r}")


def coerce_option(name: str, value: Any) -> Any:
    """
    Convert a raw value to the type expected by a known option.

    Args:
        name: Option name (must be in ALL_OPTIONS)
        value: Raw value (string, Symbol, bool, enum member or None)

    Returns:
        The coerced value, or None when value is None

    Raises:
        KeyError: If the option is unknown
        ValueError: If the value cannot be coerced
    """
    if name not in ALL_OPTIONS:
        raise KeyError(f"Unknown configuration option: {name}")
    if value is None:
        return None
    if name in _ENUM_OPTIONS:
        return _coerce_enum(name, value)
    if name in _BOOL_OPTIONS:
        return _coerce_bool(name, value)
    if isinstance(value, Symbol):
        raise ValueError(f"Option '{name}' expects a path string, got the symbol {value}")
    if not isinstance(value, str):
        raise ValueError(f"Option '{name}' expects a path string, got {value!r}")
    return value


@dataclass
class ProjectConfig:
    """
    Root container for a Compass project manifest.

    Properties:
        http_path:
            Root path for deployed assets (e.g. "_site/")

        css_dir, sass_dir, images_dir, javascripts_dir:
            Project-relative directory locations

        output_style, relative_assets, line_comments, preferred_syntax:
            Optional toggles. None means "not set in the manifest";
            use effective() to read the value the compiler would use.

        requires:
            Plugins loaded before the options (e.g. "zurb-foundation")

        extra:
            Assignments to options this package does not model
            (fonts_dir, project_type, ...). Kept so nothing is lost.

    INVARIANTS:
        - Required path options are non-empty strings
        - Optional toggles are None or of their enumerated type
    """

    css_dir: str = ""
    sass_dir: str = ""
    images_dir: str = ""
    javascripts_dir: str = ""
    http_path: Optional[str] = None
    output_style: Optional[OutputStyle] = None
    relative_assets: Optional[bool] = None
    line_comments: Optional[bool] = None
    preferred_syntax: Optional[PreferredSyntax] = None
    requires: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_option(self, name: str) -> Any:
        """
        Retrieve the raw value of an option as written in the manifest.

        Raises:
            KeyError: If the option is unknown
        """
        if name not in ALL_OPTIONS:
            raise KeyError(f"Unknown configuration option: {name}")
        return getattr(self, name)

    def set_option(self, name: str, value: Any) -> None:
        """Set an option, coercing strings to the option's type."""
        setattr(self, name, coerce_option(name, value))

    def is_set(self, name: str) -> bool:
        value = self.get_option(name)
        return value is not None and value != ""

    def effective(self, name: str) -> Any:
        """Value the compiler would use, falling back to OPTION_DEFAULTS."""
        value = self.get_option(name)
        if not self.is_set(name):
            return OPTION_DEFAULTS.get(name, value)
        return value

    def effective_options(self) -> Dict[str, Any]:
        return {name: self.effective(name) for name in ALL_OPTIONS}

    def set_options(self) -> List[str]:
        """Names of the known options explicitly set, in manifest order."""
        return [name for name in ALL_OPTIONS if self.is_set(name)]

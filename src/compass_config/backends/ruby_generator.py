"""
config.rb manifest generator for ProjectConfig objects.

Converts a ProjectConfig back into the Ruby manifest Compass reads.

Supports two modes:
    - MINIMAL: Only the requires and options that are set
    - ANNOTATED: Stock Compass layout, unset toggles shown as commented examples
"""

import unicodedata
from enum import Enum
from typing import Any, List

from compass_config.model import (
    REQUIRED_PATH_OPTIONS,
    OPTIONAL_OPTIONS,
    OutputStyle,
    PreferredSyntax,
    ProjectConfig,
    Symbol,
)


class RubyMode(Enum):
    """Layout modes for config.rb output."""
    MINIMAL = "minimal"        # Just the assignments
    ANNOTATED = "annotated"    # Compass scaffold comments


_TOGGLE_HELP = {
    "output_style": (
        ["# You can select your preferred output style here (can be overridden via the command line):"],
        "# output_style = :expanded or :nested or :compact or :compressed",
    ),
    "relative_assets": (
        ["# To enable relative paths to assets via compass helper functions. Uncomment:"],
        "# relative_assets = true",
    ),
    "line_comments": (
        ["# To disable debugging comments that display the original location of your selectors. Uncomment:"],
        "# line_comments = false",
    ),
    "preferred_syntax": (
        [
            "# If you prefer the indented syntax, you might want to regenerate this",
            "# project again passing --syntax sass, or you can uncomment this:",
        ],
        "# preferred_syntax = :sass",
    ),
}


_CHAR_ESCAPES = {
    '\\': '\\\\', '"': '\\"', '\n': '\\n', '\t': '\\t', '\r': '\\r',
    '\x1b': '\\e', '\x07': '\\a', '\x08': '\\b', '\x0c': '\\f', '\x0b': '\\v',
}


def _quote_string(s: str) -> str:
    """Quote a string as a Ruby double-quoted literal on a single line."""
    out = []
    for i, ch in enumerate(s):
        if ch in _CHAR_ESCAPES:
            out.append(_CHAR_ESCAPES[ch])
        elif unicodedata.category(ch) in ("Cc", "Zl", "Zp"):
            out.append(f"\\u{{{ord(ch):X}}}")
        elif ch == '#' and s[i + 1:i + 2] in ('{', '@', '$'):
            # Block interpolation
            out.append('\\#')
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def format_value(value: Any) -> str:
    """Render a Python value as a Ruby literal."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (OutputStyle, PreferredSyntax)):
        return f":{value.value}"
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, str):
        return _quote_string(value)
    raise TypeError(f"Unsupported value type: {type(value)}")


def _assignment(name: str, value: Any, width: int = 0) -> str:
    return f"{name.ljust(width)} = {format_value(value)}"


def generate_ruby(config: ProjectConfig, mode: RubyMode = RubyMode.MINIMAL) -> str:
    """
    Generate a config.rb manifest for a project configuration.

    Args:
        config: ProjectConfig to render
        mode: Layout mode (MINIMAL, ANNOTATED)

    Returns:
        String containing the manifest
    """
    lines: List[str] = []
    annotated = mode == RubyMode.ANNOTATED

    # =========================================================================
    # REQUIRES
    # =========================================================================

    for name in config.requires:
        lines.append(f"require '{name}'")
    if annotated:
        lines.append("# Require any additional compass plugins here.")
        lines.append("")

    # =========================================================================
    # PATHS
    # =========================================================================

    path_names = [name for name in REQUIRED_PATH_OPTIONS if config.is_set(name)]
    width = max([len("http_path")] + [len(n) for n in path_names]) if annotated else 0

    if annotated:
        lines.append("# Set this to the root of your project when deployed:")
    if config.is_set("http_path"):
        lines.append(_assignment("http_path", config.http_path, width))
    elif annotated:
        lines.append("# " + _assignment("http_path", "/", width))
    if annotated:
        lines.append("")

    for name in path_names:
        lines.append(_assignment(name, getattr(config, name), width))

    # =========================================================================
    # TOGGLES
    # =========================================================================

    for name in OPTIONAL_OPTIONS:
        value = getattr(config, name)
        if annotated:
            help_lines, example = _TOGGLE_HELP[name]
            lines.append("")
            lines.extend(help_lines)
            lines.append(example if value is None else _assignment(name, value))
        elif value is not None:
            lines.append(_assignment(name, value))

    # =========================================================================
    # EXTRA OPTIONS
    # =========================================================================

    if config.extra:
        if annotated:
            lines.append("")
            lines.append("# Additional options")
        for name, value in config.extra.items():
            lines.append(_assignment(name, value))

    return "\n".join(lines) + "\n"


def save_ruby_file(config: ProjectConfig, filename: str, mode: RubyMode = RubyMode.MINIMAL) -> None:
    """
    Generate a manifest and save to file.

    Args:
        config: ProjectConfig to render
        filename: Output file path (normally config.rb)
        mode: Layout mode
    """
    text = generate_ruby(config, mode=mode)
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(text)


__all__ = ["RubyMode", "format_value", "generate_ruby", "save_ruby_file"]

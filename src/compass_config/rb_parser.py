r"""
Manifest Parser (Raw Input → ProjectConfig).

Converts a Compass config.rb manifest into a ProjectConfig object.

Manifest Format:
    require 'zurb-foundation'
    http_path = "_site/"
    css_dir   = "stylesheets"
    output_style = :compressed
    relative_assets = true

Syntax Notes:
    - Only the Ruby subset Compass manifests use is accepted
    - Values: "double" / 'single' quoted strings, :symbols, true, false, nil
    - Double-quoted strings decode the Ruby escape set, including \u{...}
    - Commented-out assignments are documentation, not options
    - Unknown option names are preserved in ProjectConfig.extra
"""

import os
import re
import warnings
from typing import Any, List, Optional, Tuple

from compass_config.model import ALL_OPTIONS, DEFAULT_CONFIG_FILENAME, ProjectConfig, Symbol


class ConfigParseError(Exception):
    """Raised when manifest parsing fails."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


_REQUIRE_RE = re.compile(r'^require\s*\(?\s*(["\'])(?P<name>[^"\']+)\1\s*\)?$')
_ASSIGN_RE = re.compile(r'^(?P<name>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?P<value>.+)$')
_SYMBOL_RE = re.compile(r'^:(?P<name>[A-Za-z_][A-Za-z0-9_]*)$')


def _strip_comment(line: str, line_num: int) -> str:
    """Drop a trailing '#' comment that is not inside a quoted string."""
    quote = None
    i = 0
    while i < len(line):
        ch = line[i]
        if quote:
            if ch == '\\':
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ('"', "'"):
            quote = ch
        elif ch == '#':
            return line[:i].rstrip()
        i += 1

    if quote:
        raise ConfigParseError("Unterminated string literal", line_num)
    return line.rstrip()


_ESCAPES = {
    'n': '\n', 't': '\t', 'r': '\r', 's': ' ', 'e': '\x1b',
    'a': '\x07', 'b': '\x08', 'f': '\x0c', 'v': '\x0b',
}

_OCTAL_RE = re.compile(r'[0-7]{1,3}')
_HEX_RE = re.compile(r'[0-9A-Fa-f]{1,2}')
_UNICODE_RE = re.compile(r'[0-9A-Fa-f]{4}')
_UNICODE_BRACES_RE = re.compile(r'\{\s*([0-9A-Fa-f]{1,6}(?:\s+[0-9A-Fa-f]{1,6})*)\s*\}')


def _decode_escape(body: str, i: int, line_num: int) -> Tuple[str, int]:
    """
    Decode the double-quoted escape whose letter starts at body[i].

    Returns the decoded text and the index after the escape.
    """
    ch = body[i]
    if ch in _ESCAPES:
        return _ESCAPES[ch], i + 1

    if ch in '01234567':
        match = _OCTAL_RE.match(body, i)
        return chr(int(match.group(), 8)), match.end()

    if ch == 'x':
        match = _HEX_RE.match(body, i + 1)
        if not match:
            raise ConfigParseError("Invalid hex escape", line_num)
        return chr(int(match.group(), 16)), match.end()

    if ch == 'u':
        match = _UNICODE_BRACES_RE.match(body, i + 1)
        if match:
            codepoints = [int(cp, 16) for cp in match.group(1).split()]
            if any(cp > 0x10FFFF for cp in codepoints):
                raise ConfigParseError("Invalid Unicode escape", line_num)
            return "".join(chr(cp) for cp in codepoints), match.end()
        match = _UNICODE_RE.match(body, i + 1)
        if not match:
            raise ConfigParseError("Invalid Unicode escape", line_num)
        return chr(int(match.group(), 16)), match.end()

    if ch in ('c', 'C', 'M'):
        raise ConfigParseError(f"Unsupported control/meta escape: \\{ch}", line_num)

    # Ruby drops the backslash of any other escape (\", \\, \#, ...)
    return ch, i + 1


def _unquote(literal: str, line_num: int) -> str:
    """Decode a quoted Ruby string literal (single or double quoted)."""
    quote = literal[0]
    if len(literal) < 2 or literal[-1] != quote:
        raise ConfigParseError(f"Malformed string literal: {literal}", line_num)
    body = literal[1:-1]

    chars = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '\\':
            if i + 1 >= len(body):
                raise ConfigParseError(f"Unterminated string literal: {literal}", line_num)
            nxt = body[i + 1]
            if quote == '"':
                decoded, i = _decode_escape(body, i + 1, line_num)
                chars.append(decoded)
                continue
            if nxt in ("'", '\\'):
                chars.append(nxt)
            else:
                chars.append(ch + nxt)
            i += 2
            continue
        if ch == quote:
            raise ConfigParseError(f"Unexpected quote inside string: {literal}", line_num)
        chars.append(ch)
        i += 1
    return "".join(chars)


def parse_value(raw: str, line_num: int = 0) -> Any:
    """
    Convert the right-hand side of an assignment to a Python value.

    Strings stay strings, :symbols become Symbol objects,
    true/false become bools and nil becomes None.

    Raises:
        ConfigParseError: If the value is not a supported literal
    """
    raw = raw.strip()
    if not raw:
        raise ConfigParseError("Missing value in assignment", line_num)

    if raw[0] in ('"', "'"):
        return _unquote(raw, line_num)
    if raw == "true":
        return True
    if raw == "false":
        return False
    if raw == "nil":
        return None
    match = _SYMBOL_RE.match(raw)
    if match:
        return Symbol(match.group("name"))

    raise ConfigParseError(f"Unsupported value: {raw}", line_num)


def _parse_lines(text: str) -> List[Tuple[int, str, str, Any]]:
    """
    Parse manifest text into (line, kind, name, value) statements.

    kind is "require" or "assign".
    """
    statements = []
    for line_num, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith('#'):
            continue

        line = _strip_comment(line, line_num)
        if not line:
            continue

        match = _REQUIRE_RE.match(line)
        if match:
            statements.append((line_num, "require", match.group("name"), None))
            continue

        match = _ASSIGN_RE.match(line)
        if match:
            value = parse_value(match.group("value"), line_num)
            statements.append((line_num, "assign", match.group("name"), value))
            continue

        raise ConfigParseError(f"Unsupported statement: {line}", line_num)

    return statements


def parse_config_string(text: str) -> ProjectConfig:
    """
    Parse manifest content into a ProjectConfig object.

    Args:
        text: config.rb content as string

    Returns:
        ProjectConfig with every assignment applied in order

    Raises:
        ConfigParseError: If parsing fails
    """
    config = ProjectConfig()
    seen = set()

    for line_num, kind, name, value in _parse_lines(text):
        if kind == "require":
            if name not in config.requires:
                config.requires.append(name)
            continue

        if name in seen:
            warnings.warn(f"Option '{name}' assigned more than once (line {line_num}); last value wins", UserWarning)
        seen.add(name)

        if name not in ALL_OPTIONS:
            warnings.warn(f"Unknown option '{name}' on line {line_num} kept as extra", UserWarning)
            config.extra[name] = value
            continue

        try:
            config.set_option(name, value)
        except ValueError as e:
            raise ConfigParseError(str(e), line_num)

    return config


def parse_config_file(filepath: str) -> ProjectConfig:
    """
    Parse a manifest file into a ProjectConfig object.

    Args:
        filepath: Path to config.rb, or to a project directory containing one

    Returns:
        ProjectConfig object

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigParseError: If parsing fails
    """
    if os.path.isdir(filepath):
        filepath = os.path.join(filepath, DEFAULT_CONFIG_FILENAME)

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")

    return parse_config_string(content)


__all__ = [
    "parse_config_string",
    "parse_config_file",
    "parse_value",
    "ConfigParseError",
]

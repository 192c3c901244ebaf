"""Parser for the JSON-like configuration format used by asset descriptions."""

from __future__ import annotations

import os
import re
from typing import NoReturn

from .config import Config, ConfigValue, ValueKind
from .cursor import TextCursor

_NUMBER_START = frozenset("0123456789+-")
_NUMBER_CHARS = frozenset("0123456789+-.")
_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t"}
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_INT_PREFIX = re.compile(r"[+-]?\d+")
_ULONG_MAX = 2**64 - 1
_UINT32_MODULUS = 2**32


class ConfigParseError(ValueError):
    """Raised when configuration text is malformed."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} at line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column


def parse_config(text: str) -> Config:
    """Parse configuration text into a flat Config with dotted keys."""
    cursor = TextCursor(text)
    config = Config()
    _parse_object(cursor, config, "")
    return config


def load_config(filepath: str | os.PathLike[str]) -> Config:
    """Read and parse a configuration file."""
    with open(filepath, encoding="utf-8") as handle:
        text = handle.read()
    return parse_config(text)


def _fail(message: str, cursor: TextCursor) -> NoReturn:
    raise ConfigParseError(message, cursor.line, cursor.column)


def _parse_object(cursor: TextCursor, config: Config, parent: str) -> None:
    if cursor.next_char() != "{":
        _fail("JSON must start with '{'", cursor)

    while True:
        if cursor.peek_char() != '"':
            _fail("JSON keys are strings that start with '\"'", cursor)
        name = _parse_string(cursor)
        key = f"{parent}.{name}" if parent else name
        if cursor.next_char() != ":":
            _fail("JSON keys and values are separated with ':'", cursor)

        peek = cursor.peek_char()
        if peek == "{":
            _parse_object(cursor, config, key)
        elif peek == '"':
            config.set(key, ConfigValue(_parse_string(cursor), ValueKind.STRING))
        elif peek in _NUMBER_START:
            config.set(key, _parse_number(cursor))
        elif peek == "[":
            config.set(key, _parse_array(cursor))
        elif peek in ("t", "f"):
            config.set(key, _parse_bool(cursor))

        ch = cursor.next_char()
        if ch == "}":
            return
        if ch != ",":
            _fail("Expected ',' or '}' after value", cursor)


def _parse_string(cursor: TextCursor) -> str:
    if cursor.next_char() != '"':
        _fail("Expected '\"' at beginning of string", cursor)

    parts: list[str] = []
    while True:
        ch = cursor.next_char()
        if ch == "":
            _fail("Unexpected EOF while parsing string", cursor)
        if ch == '"':
            return "".join(parts)
        if ch == "\\":
            escaped = _ESCAPES.get(cursor.next_char())
            if escaped is None:
                _fail("Unsupported escape sequence in string", cursor)
            parts.append(escaped)
        else:
            parts.append(ch)


def _parse_number(cursor: TextCursor) -> ConfigValue:
    chars: list[str] = []
    while cursor.peek_char() in _NUMBER_CHARS:
        chars.append(cursor.next_char())
    literal = "".join(chars)

    if "." in literal:
        match = _FLOAT_PREFIX.match(literal)
        if match is None:
            _fail(f"Invalid number '{literal}'", cursor)
        try:
            return ConfigValue(float(match.group()), ValueKind.FLOAT)
        except OverflowError:
            _fail(f"Number out of range '{literal}'", cursor)

    match = _INT_PREFIX.match(literal)
    if match is None:
        _fail(f"Invalid number '{literal}'", cursor)
    value = int(match.group())
    if abs(value) > _ULONG_MAX:
        _fail(f"Number out of range '{literal}'", cursor)
    return ConfigValue(value % _UINT32_MODULUS, ValueKind.UINT32)


def _parse_array(cursor: TextCursor) -> ConfigValue:
    if cursor.next_char() != "[":
        _fail("Expected '[' at beginning of array", cursor)

    items: list[float] = []
    while True:
        if cursor.peek_char() == "]":
            cursor.next_char()
            break
        items.append(float(_parse_number(cursor).value))
        ch = cursor.next_char()
        if ch == "]":
            break
        if ch != ",":
            _fail("Expected ',' or ']' after array element", cursor)

    return ConfigValue(items, ValueKind.FLOAT_LIST)


def _parse_bool(cursor: TextCursor) -> ConfigValue:
    peek = cursor.peek_char()
    if peek == "t":
        word, result = "true", True
    elif peek == "f":
        word, result = "false", False
    else:
        _fail("Unexpected character while parsing bool", cursor)

    for expected in word:
        if cursor.next_char() != expected:
            _fail(f"Expected '{word}'", cursor)
    return ConfigValue(result, ValueKind.BOOL)
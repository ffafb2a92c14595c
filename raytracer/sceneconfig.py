"""Reader for scene files written in the libconfig text format."""

import re
from typing import NamedTuple


class ConfigError(Exception):
    """Raised when a scene file cannot be parsed or holds a bad value."""

    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class SettingNotFoundError(ConfigError):
    """Raised when a looked-up setting does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"setting not found: {path}")


_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<comment>\#[^\n]*|//[^\n]*|/\*.*?\*/)
  | (?P<string>"(?:[^"\\]|\\.)*")
  | (?P<float>[-+]?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?\d+[eE][-+]?\d+)
  | (?P<hex>[-+]?0[xX][0-9A-Fa-f]+L{0,2})
  | (?P<int>[-+]?\d+L{0,2})
  | (?P<bool>(?i:true|false)(?![-A-Za-z0-9_*]))
  | (?P<name>[A-Za-z*][-A-Za-z0-9_*]*)
  | (?P<punct>[=:;,\[\](){}])
    """,
    re.VERBOSE | re.DOTALL,
)

_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "r": "\r", "f": "\f"}
_SCALARS = (bool, int, float, str)
_PATH_SEGMENT = re.compile(r"\[(\d+)\]|([^.\[\]]+)")


class _Token(NamedTuple):
    kind: str
    text: str
    line: int


def _tokenize(text):
    tokens = []
    pos = 0
    line = 1
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise ConfigError(f"syntax error near {text[pos]!r}", line)
        kind = match.lastgroup
        if kind not in ("ws", "comment"):
            tokens.append(_Token(kind, match.group(), line))
        line += match.group().count("\n")
        pos = match.end()
    return tokens


def _unescape(body, line):
    def replace(match):
        escape = match.group(1)
        if escape.startswith("x") and len(escape) == 3:
            return chr(int(escape[1:], 16))
        if escape in _ESCAPES:
            return _ESCAPES[escape]
        raise ConfigError(f"unknown escape sequence \\{escape}", line)

    return re.sub(r"\\(x[0-9A-Fa-f]{2}|.)", replace, body, flags=re.DOTALL)


class _Parser:
    def __init__(self, tokens):
        self._tokens = tokens
        self._pos = 0
        self._last_line = tokens[-1].line if tokens else 1

    def _peek(self):
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self):
        token = self._peek()
        if token is None:
            raise ConfigError("unexpected end of input", self._last_line)
        self._pos += 1
        return token

    def _at_punct(self, chars):
        token = self._peek()
        return token is not None and token.kind == "punct" and token.text in chars

    def settings(self, closing=None):
        result = {}
        while True:
            token = self._peek()
            if token is None:
                if closing is None:
                    return result
                raise ConfigError(f"expected '{closing}'", self._last_line)
            if closing is not None and self._at_punct(closing):
                self._pos += 1
                return result
            if token.kind != "name":
                raise ConfigError(f"expected a setting name, got {token.text!r}", token.line)
            self._pos += 1
            separator = self._next()
            if separator.kind != "punct" or separator.text not in "=:":
                raise ConfigError(f"expected '=' or ':' after {token.text!r}", separator.line)
            value = self._value()
            if token.text in result:
                raise ConfigError(f"duplicate setting {token.text!r}", token.line)
            result[token.text] = value
            if self._at_punct(";,"):
                self._pos += 1

    def _value(self):
        token = self._next()
        if token.kind == "string":
            parts = [_unescape(token.text[1:-1], token.line)]
            while (following := self._peek()) is not None and following.kind == "string":
                self._pos += 1
                parts.append(_unescape(following.text[1:-1], following.line))
            return "".join(parts)
        if token.kind == "int":
            return int(token.text.rstrip("L"), 10)
        if token.kind == "hex":
            return int(token.text.rstrip("L"), 16)
        if token.kind == "float":
            return float(token.text)
        if token.kind == "bool":
            return token.text.lower() == "true"
        if token.kind == "punct":
            if token.text == "{":
                return self.settings("}")
            if token.text == "[":
                return self._array(token.line)
            if token.text == "(":
                return self._sequence(")")
        raise ConfigError(f"unexpected {token.text!r}", token.line)

    def _sequence(self, closing):
        items = []
        if self._at_punct(closing):
            self._pos += 1
            return items
        while True:
            items.append(self._value())
            token = self._next()
            if token.kind == "punct" and token.text == closing:
                return items
            if token.kind == "punct" and token.text == ",":
                if self._at_punct(closing):
                    self._pos += 1
                    return items
                continue
            raise ConfigError(f"expected ',' or '{closing}'", token.line)

    def _array(self, line):
        items = self._sequence("]")
        if any(not isinstance(item, _SCALARS) for item in items):
            raise ConfigError("arrays may only hold scalar values", line)
        if any(type(item) is not type(items[0]) for item in items):
            raise ConfigError("array elements must all have the same type", line)
        return items


def parse_config(text):
    """Parse scene text into nested dicts (groups) and lists (arrays, lists)."""
    return _Parser(_tokenize(text)).settings()


def load_config(path):
    """Read and parse the scene file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        try:
            text = handle.read()
        except UnicodeDecodeError as exc:
            raise ConfigError(f"cannot decode file: {exc}") from exc
    return parse_config(text)


def lookup(setting, path):
    """Follow a dotted path such as ``camera.position.x`` or ``items.[0]``."""
    current = setting
    for index, name in _PATH_SEGMENT.findall(path):
        if index:
            position = int(index)
            if isinstance(current, dict):
                children = list(current.values())
            elif isinstance(current, list):
                children = current
            else:
                raise SettingNotFoundError(path)
            if position >= len(children):
                raise SettingNotFoundError(path)
            current = children[position]
        else:
            if not isinstance(current, dict) or name not in current:
                raise SettingNotFoundError(path)
            current = current[name]
    return current
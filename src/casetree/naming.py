"""Display names for parameterized test cases and fixtures.

A pattern is plain text with brace tokens:

    {m}  method name            {M}  full method name
    {c}  class name             {C}  full class name
    {n}  namespace              {a}  argument list, e.g. ``(1,"x")``
    {0}..{9}  a single argument

Unknown tokens are copied through unchanged.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from casetree.descriptors import MethodInfo, TypeInfo

DEFAULT_PATTERN = "{m}{a}"
MAX_STRING_LENGTH = 40

_TOKEN = re.compile(r"\{([a-zA-Z]|\d)\}")
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def display_argument(value: Any, max_string_length: int = MAX_STRING_LENGTH) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        escaped = "".join(_ESCAPES.get(ch, ch) for ch in value)
        if max_string_length > 0 and len(escaped) > max_string_length:
            escaped = escaped[: max_string_length - 3] + "..."
        return f'"{escaped}"'
    if isinstance(value, (list, tuple)):
        inner = ",".join(display_argument(v, max_string_length) for v in value)
        return f"[{inner}]"
    return repr(value)


def display_arguments(arguments: Sequence[Any]) -> str:
    if not arguments:
        return ""
    return "(" + ",".join(display_argument(arg) for arg in arguments) + ")"


class TestNameGenerator:
    __test__ = False

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self.pattern = pattern

    def get_display_name(self, method: MethodInfo, arguments: Sequence[Any] = ()) -> str:
        return self._expand(method.type_info, method, arguments)

    def get_fixture_name(self, type_info: TypeInfo, arguments: Sequence[Any] = ()) -> str:
        return self._expand(type_info, None, arguments)

    def _expand(self, type_info: TypeInfo, method: MethodInfo | None, arguments: Sequence[Any]) -> str:
        pattern = self.pattern
        if method is None:
            # Fixtures have no method part, so fall back to the class name.
            pattern = pattern.replace("{m}", "{c}").replace("{M}", "{C}")

        def replace(match: re.Match[str]) -> str:
            token = match.group(1)
            if token.isdigit():
                index = int(token)
                return display_argument(arguments[index]) if index < len(arguments) else ""
            if token == "a":
                return display_arguments(arguments)
            if token == "c":
                return type_info.name
            if token == "C":
                return type_info.full_name
            if token == "n":
                return type_info.namespace
            if token == "m" and method is not None:
                return method.name
            if token == "M" and method is not None:
                return method.full_name
            return match.group(0)

        return _TOKEN.sub(replace, pattern)

"""
JsonOutput: serialized chain bytes with a pretty-print transform.
"""

from __future__ import annotations

import json as _json
import logging as _logging
import re as _re

import jsonchain.chain._codec as _codec
import jsonchain.constants as constants

_logger = _logging.getLogger(__name__)

_JSON_WHITESPACE = " \t\r\n"

# Strings (escapes included), structural characters, and bare literals.
# Whitespace between tokens matches nothing and is dropped.
_TOKEN_RE = _re.compile(r'"(?:[^"\\]|\\.)*"|[{}\[\],:]|[^\s{}\[\],:"]+', _re.DOTALL)

_OPENERS = ("{", "[")
_CLOSERS = ("}", "]")


def _reindent(text: str, indent: int) -> str:
    """
    Lay out already-validated JSON text with newlines and indentation.

    Tokens are copied verbatim, so numbers and string escapes keep their
    original spelling. Empty objects and arrays stay on one line.
    """
    pad = " " * indent
    tokens = _TOKEN_RE.findall(text)
    out: list[str] = []
    depth = 0
    skip_next = False

    for index, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue
        if token in _OPENERS:
            following = tokens[index + 1] if index + 1 < len(tokens) else ""
            if following in _CLOSERS:
                out.append(token + following)
                skip_next = True
                continue
            depth += 1
            out.append(token + "\n" + pad * depth)
        elif token in _CLOSERS:
            depth -= 1
            out.append("\n" + pad * depth + token)
        elif token == ",":
            out.append(",\n" + pad * depth)
        elif token == ":":
            out.append(": ")
        else:
            out.append(token)

    return "".join(out)


class JsonOutput(bytes):
    """
    Raw JSON bytes produced by JsonChain.to_json().

    Behaves exactly like bytes (write it to a file or socket as-is), and adds
    pretty() for human-readable output.

    Example:
        >>> out = JsonOutput(b'{"a":[1,2]}')
        >>> print(out.pretty())
        {
          "a": [
            1,
            2
          ]
        }
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JsonOutput({bytes(self)!r})"

    def text(self) -> str:
        """Decode the bytes as UTF-8."""
        return self.decode("utf-8")

    def pretty(self, indent: int = constants.DEFAULT_INDENT) -> str:
        """
        Re-indent the JSON for display.

        Only whitespace changes: keys keep their order, and numbers and
        strings keep their exact text (1e2 stays 1e2). Leading whitespace is
        dropped; trailing whitespace (such as the newline to_json() appends)
        is kept.

        Args:
            indent: Spaces per nesting level.

        Returns:
            The indented JSON text, or "" if the bytes are not valid JSON.
        """
        try:
            text = self.decode("utf-8")
            _json.loads(text, parse_constant=_codec.reject_constant)
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            _logger.debug("Cannot pretty-print invalid JSON: %s", e)
            return ""

        trailing = text[len(text.rstrip(_JSON_WHITESPACE)):]
        return _reindent(text, indent) + trailing

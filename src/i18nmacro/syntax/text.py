"""Host lowering helpers for literal text.

The host decodes its concrete syntax before building a message tree. These
helpers cover the decoding chores shared by most hosts:

- Raw template-literal chunks: backslash escapes, line continuations
- Markup text: HTML character references (&amp;, &nbsp;)
- Expression references: whether a name may become a named placeholder

Python 3.13+. Zero external dependencies.
"""

import html
import re

__all__ = ["decode_entities", "decode_template_raw", "is_simple_name"]

# Identifier as written in the host language: letters, digits, _ and $,
# not starting with a digit.
_SIMPLE_NAME = re.compile(r"(?:[^\W\d]|\$)[\w$]*")

# Backslash escapes of a template literal. Order of alternatives matters:
# line continuation first, so "\\\n" is never read as an escaped "n".
_TEMPLATE_ESCAPE = re.compile(
    r"""\\(?:
        (?P<continuation>\r\n|\r|\n)[ \t]*
      | u\{(?P<code_point>[0-9a-fA-F]{1,6})\}
      | u(?P<unicode>[0-9a-fA-F]{4})
      | x(?P<hex>[0-9a-fA-F]{2})
      | (?P<char>.)
    )""",
    re.VERBOSE | re.DOTALL,
)

_SINGLE_CHAR_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def is_simple_name(name: str) -> bool:
    """True if name is a bare identifier usable as a placeholder name.

    Example:
        >>> is_simple_name("userName"), is_simple_name("$el"), is_simple_name("user.name")
        (True, True, False)
    """
    return _SIMPLE_NAME.fullmatch(name) is not None


def decode_template_raw(raw: str) -> str:
    """Decode one raw template-literal chunk.

    Backslash followed by a line break is a line continuation: the break
    and the indentation of the next line are removed. Standard escapes are
    decoded; an unknown escape yields the escaped character itself, so
    ``\\``` becomes a backtick and ``\\$`` a dollar sign.

    Example:
        >>> decode_template_raw("Variable \\\\`name\\\\`")
        'Variable `name`'
    """

    def _decode(match: re.Match[str]) -> str:
        if match.group("continuation") is not None:
            return ""
        if (code_point := match.group("code_point")) is not None:
            return chr(int(code_point, 16))
        if (unicode := match.group("unicode")) is not None:
            return chr(int(unicode, 16))
        if (hex_code := match.group("hex")) is not None:
            return chr(int(hex_code, 16))
        char = match.group("char")
        return _SINGLE_CHAR_ESCAPES.get(char, char)

    return _TEMPLATE_ESCAPE.sub(_decode, raw)


def decode_entities(text: str) -> str:
    """Decode HTML character references in markup text.

    Example:
        >>> decode_entities("Tom &amp; Jerry&nbsp;")
        'Tom & Jerry\\xa0'
    """
    return html.unescape(text)

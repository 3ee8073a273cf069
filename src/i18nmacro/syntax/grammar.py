"""Message string grammar: literal escaping and tokenization.

A compiled message is plain text interleaved with placeholder tokens:

    {name}          value placeholder (named or positional: {0})
    <0>...</0>      component placeholder wrapping content
    <0/>            self-closing component placeholder

Syntax characters ({, }, <, >) inside literal text are protected with
ICU-style apostrophe quoting:

    literal "a {b}"  ->  a '{'b'}'
    literal "x < y"  ->  x '<' y

An apostrophe is literal on its own ("Don't" stays "Don't") and is only
doubled where it would otherwise start a quoted section: in front of
another apostrophe or a syntax character, including the first character
of a placeholder token that follows the text. Inside a quoted section a
literal apostrophe is always doubled.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from i18nmacro.constants import QUOTE_CHAR, SYNTAX_CHARS
from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.enums import PlaceholderKind

__all__ = [
    "PlaceholderToken",
    "escape_text",
    "tokenize_message",
    "unescape_text",
]


def escape_text(text: str, *, followed_by_syntax: bool = False) -> str:
    """Escape literal text for inclusion in a message string.

    Args:
        text: Literal text (already decoded by the host)
        followed_by_syntax: The next thing emitted after this text is a
            placeholder token, so a trailing apostrophe must be doubled

    Returns:
        Escaped text that reads back as exactly ``text``

    Example:
        >>> escape_text("Use {braces}")
        "Use '{'braces'}'"
        >>> escape_text("it's")
        "it's"
    """
    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char in SYNTAX_CHARS:
            end = index
            while end < length and (text[end] in SYNTAX_CHARS or text[end] == QUOTE_CHAR):
                end += 1
            quoted = text[index:end].replace(QUOTE_CHAR, QUOTE_CHAR * 2)
            out.append(f"{QUOTE_CHAR}{quoted}{QUOTE_CHAR}")
            index = end
        elif char == QUOTE_CHAR:
            if index + 1 < length:
                following = text[index + 1]
                double = following == QUOTE_CHAR or following in SYNTAX_CHARS
            else:
                double = followed_by_syntax
            out.append(QUOTE_CHAR * 2 if double else QUOTE_CHAR)
            index += 1
        else:
            out.append(char)
            index += 1
    return "".join(out)


def unescape_text(fragment: str) -> str:
    """Read an escaped literal fragment back into plain text.

    Inverse of escape_text() for fragments that contain no placeholder
    tokens.

    Raises:
        UsageError: If the fragment contains an unquoted syntax character
            or an unterminated quoted section
    """
    tokens = tokenize_message(fragment)
    if any(isinstance(token, PlaceholderToken) for token in tokens):
        raise UsageError(ErrorTemplate.message_syntax("unexpected placeholder", 0))
    return "".join(token for token in tokens if isinstance(token, str))


@dataclass(frozen=True, slots=True)
class PlaceholderToken:
    """Placeholder token read from a message string.

    Attributes:
        kind: Value or component placeholder
        key: Placeholder key ("name", "0")
        closing: True for the closing half of a component pair (</0>)
        self_closing: True for <0/>
        position: Character offset of the token in the message
    """

    kind: PlaceholderKind
    key: str
    closing: bool = False
    self_closing: bool = False
    position: int = 0


def tokenize_message(message: str) -> list[str | PlaceholderToken]:
    """Split a message string into literal text runs and placeholder tokens.

    Consecutive literal characters are merged into one string; quoting is
    resolved so the strings are plain text.

    Raises:
        UsageError: On unterminated quotes, unclosed or empty tokens
    """
    tokens: list[str | PlaceholderToken] = []
    literal: list[str] = []
    index = 0
    length = len(message)

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    while index < length:
        char = message[index]
        if char == QUOTE_CHAR:
            following = message[index + 1] if index + 1 < length else ""
            if following == QUOTE_CHAR:
                literal.append(QUOTE_CHAR)
                index += 2
            elif following and following in SYNTAX_CHARS:
                index = _read_quoted(message, index + 1, literal)
            else:
                literal.append(QUOTE_CHAR)
                index += 1
        elif char == "{":
            flush()
            token, index = _read_value_token(message, index)
            tokens.append(token)
        elif char == "<":
            flush()
            token, index = _read_component_token(message, index)
            tokens.append(token)
        elif char in SYNTAX_CHARS:
            raise UsageError(ErrorTemplate.message_syntax(f"unexpected {char!r}", index))
        else:
            literal.append(char)
            index += 1
    flush()
    return tokens


def _read_quoted(message: str, index: int, literal: list[str]) -> int:
    """Consume a quoted section starting after its opening apostrophe."""
    start = index - 1
    length = len(message)
    while index < length:
        char = message[index]
        if char == QUOTE_CHAR:
            if index + 1 < length and message[index + 1] == QUOTE_CHAR:
                literal.append(QUOTE_CHAR)
                index += 2
                continue
            return index + 1
        literal.append(char)
        index += 1
    raise UsageError(ErrorTemplate.message_syntax("unterminated quoted section", start))


def _read_value_token(message: str, start: int) -> tuple[PlaceholderToken, int]:
    end = message.find("}", start + 1)
    if end == -1:
        raise UsageError(ErrorTemplate.message_syntax("unclosed '{'", start))
    key = message[start + 1 : end].strip()
    if not key or any(char in SYNTAX_CHARS for char in key):
        raise UsageError(ErrorTemplate.message_syntax("invalid value placeholder", start))
    return PlaceholderToken(PlaceholderKind.VALUE, key, position=start), end + 1


def _read_component_token(message: str, start: int) -> tuple[PlaceholderToken, int]:
    end = message.find(">", start + 1)
    if end == -1:
        raise UsageError(ErrorTemplate.message_syntax("unclosed '<'", start))
    body = message[start + 1 : end]
    closing = body.startswith("/")
    self_closing = body.endswith("/") and not closing
    key = body.strip("/")
    if not key.isdigit():
        raise UsageError(ErrorTemplate.message_syntax("invalid component placeholder", start))
    token = PlaceholderToken(
        PlaceholderKind.COMPONENT,
        key,
        closing=closing,
        self_closing=self_closing,
        position=start,
    )
    return token, end + 1

"""Tests for reading placeholder structure back from message strings."""

import pytest

from i18nmacro.diagnostics import DiagnosticCode, UsageError
from i18nmacro.introspection import MessagePlaceholders, extract_text, parse_placeholders


class TestParsePlaceholders:
    """Test parse_placeholders."""

    def test_values_and_components(self) -> None:
        """Keys are collected per kind in first-occurrence order."""
        result = parse_placeholders("Hello <0>{name}</0><1/> {0} {name}")
        assert result == MessagePlaceholders(values=("name", "0"), components=("0", "1"))

    def test_quoted_syntax_ignored(self) -> None:
        """Quoted braces are literal text, not placeholders."""
        assert parse_placeholders("Use '{'braces'}'") == MessagePlaceholders((), ())

    def test_all_keys_tagged_by_kind(self) -> None:
        """Value 0 and component 0 are distinct keys."""
        result = parse_placeholders("<0>{0}</0>")
        assert result.all_keys == frozenset({"value:0", "component:0"})

    @pytest.mark.parametrize(
        "message",
        ["<0>open", "close</0>", "<0><1></0></1>", "{unclosed"],
    )
    def test_unbalanced_or_malformed(self, message: str) -> None:
        """Unbalanced component tags are grammar errors."""
        with pytest.raises(UsageError) as exc_info:
            parse_placeholders(message)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.MESSAGE_SYNTAX


class TestExtractText:
    """Test extract_text."""

    def test_tokens_removed(self) -> None:
        """Only literal text remains, with quoting resolved."""
        assert extract_text("Use '{'braces'}' for <0>{name}</0>") == "Use {braces} for "

    def test_apostrophes(self) -> None:
        """Doubled apostrophes read back as one."""
        assert extract_text("arguments: ''{name}'") == "arguments: ''"

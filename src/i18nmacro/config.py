"""Compiler configuration.

Provides a single frozen dataclass that encapsulates the ambient settings
of a compilation run: output mode, extraction override and depth limit.
Invalid values are rejected at construction time with ConfigurationError,
which aborts the run before any call site is compiled.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from i18nmacro.constants import MAX_DEPTH
from i18nmacro.diagnostics import ConfigurationError, ErrorTemplate
from i18nmacro.enums import Mode

__all__ = ["CompilerConfig"]


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Immutable configuration for MacroCompiler.

    All fields have sensible defaults; ``CompilerConfig()`` compiles in
    development mode.

    Attributes:
        mode: DEVELOPMENT keeps every descriptor field; PRODUCTION keeps
            only what runtime rendering needs (id, values, components).
        extract: Keep full metadata even in production mode, for building
            translation catalogs (default: False).
        max_depth: Maximum element/macro nesting depth (default: MAX_DEPTH).

    Example:
        >>> config = CompilerConfig(mode=Mode.PRODUCTION)
        >>> config.keeps_metadata
        False
        >>> CompilerConfig(mode=Mode.PRODUCTION, extract=True).keeps_metadata
        True
    """

    mode: Mode = Mode.DEVELOPMENT
    extract: bool = False
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        String modes are accepted and converted to Mode.

        Raises:
            ConfigurationError: If mode is unknown, extract is not a bool,
                or max_depth is not a positive int
        """
        if not isinstance(self.mode, Mode):
            try:
                mode = Mode(self.mode)
            except ValueError:
                raise ConfigurationError(ErrorTemplate.invalid_mode(self.mode)) from None
            object.__setattr__(self, "mode", mode)
        if not isinstance(self.extract, bool):
            raise ConfigurationError(ErrorTemplate.invalid_extract(self.extract))
        if (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth <= 0
        ):
            raise ConfigurationError(ErrorTemplate.invalid_max_depth(self.max_depth))

    @property
    def keeps_metadata(self) -> bool:
        """True if message, context and comment survive compilation."""
        return self.mode is Mode.DEVELOPMENT or self.extract

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> CompilerConfig:
        """Build a config from a host-supplied option mapping.

        Example:
            >>> CompilerConfig.from_options({"mode": "production", "extract": True})
            CompilerConfig(mode=<Mode.PRODUCTION: 'production'>, extract=True, max_depth=100)

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {field.name for field in fields(cls)}
        for name in options:
            if name not in known:
                raise ConfigurationError(ErrorTemplate.unknown_option(str(name)))
        return cls(**options)  # type: ignore[arg-type]

"""Macro compilation pipeline.

MacroCompiler runs one call site through every stage, in order:

    1. resolve nested macros (each compiled first, with its own registry)
    2. normalize whitespace (structural macros only)
    3. flatten into a message string with a fresh PlaceholderRegistry
    4. generate the id and compile the descriptor (mode-dependent fields)
    5. build the output invocation

Thread-safe: the compiler holds only its frozen configuration; every
registry, guard and buffer is created per call and discarded afterwards.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from i18nmacro.config import CompilerConfig
from i18nmacro.core.depth_guard import DepthGuard
from i18nmacro.diagnostics import DepthLimitExceededError, ErrorTemplate, UsageError
from i18nmacro.enums import MacroKind, Mode
from i18nmacro.syntax.ast import Macro
from i18nmacro.syntax.whitespace import normalize_whitespace

from .builder import ComponentCall, MessageCall, build_call
from .descriptor import MessageDescriptor, compile_descriptor
from .flattener import MessageFlattener
from .registry import PlaceholderRegistry
from .resolver import NestedMacroResolver

__all__ = [
    "BatchResult",
    "CallSiteFailure",
    "CompiledMacro",
    "MacroCompiler",
    "compile_macro",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledMacro:
    """Result of compiling one call site.

    Attributes:
        descriptor: Compiled message descriptor
        call: Invocation for the host to splice into its source tree
    """

    descriptor: MessageDescriptor
    call: MessageCall | ComponentCall


@dataclass(frozen=True, slots=True)
class CallSiteFailure:
    """A call site skipped by compile_all().

    Attributes:
        index: Position of the macro in the input sequence
        location: Host call site location, if known
        error: The UsageError that aborted the call site
    """

    index: int
    location: str | None
    error: UsageError


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Outcome of compiling independent call sites.

    Attributes:
        results: One entry per input macro; None where compilation failed
        errors: Failures, in input order
    """

    results: tuple[CompiledMacro | None, ...]
    errors: tuple[CallSiteFailure, ...]

    @property
    def compiled(self) -> tuple[CompiledMacro, ...]:
        """Successfully compiled call sites, in input order."""
        return tuple(result for result in self.results if result is not None)

    @property
    def ok(self) -> bool:
        """True if every call site compiled."""
        return not self.errors


class MacroCompiler:
    """Compiles macro call sites into descriptors and invocations.

    Usage:
        >>> compiler = MacroCompiler(CompilerConfig(mode=Mode.PRODUCTION))
        >>> compiled = compiler.compile(Macro((Text("Message"),)))
        >>> compiled.descriptor.as_dict()
        {'id': 'xDAtGP'}
    """

    __slots__ = ("_config", "_flattener")

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self._config = config if config is not None else CompilerConfig()
        self._flattener = MessageFlattener(max_depth=self._config.max_depth)

    @property
    def config(self) -> CompilerConfig:
        """Configuration this compiler was created with."""
        return self._config

    def compile(self, macro: Macro) -> CompiledMacro:
        """Compile one call site through the full pipeline.

        Raises:
            UsageError: If the call site cannot be compiled; the host may
                continue with other call sites
        """
        try:
            descriptor = self.compile_descriptor_only(macro)
            call = build_call(descriptor, macro.kind, max_depth=self._config.max_depth)
        except UsageError as error:
            if macro.options.location:
                error.add_note(f"call site: {macro.options.location}")
            raise
        logger.debug(
            "Compiled %s macro %s -> %s",
            macro.kind,
            macro.options.location or "<unknown>",
            descriptor.id,
        )
        return CompiledMacro(descriptor=descriptor, call=call)

    def compile_descriptor_only(self, macro: Macro) -> MessageDescriptor:
        """Compile one call site into its descriptor, without building a call.

        One DepthGuard covers the whole call site: element levels and nested
        macro levels of every pass add up on it. A RecursionError that still
        gets through (a lowered recursion limit, a deep host stack) is reported
        as the same DepthLimitExceededError.
        """
        guard = DepthGuard(max_depth=self._config.max_depth)
        try:
            return self._compile_descriptor(macro, guard)
        except RecursionError as error:
            raise DepthLimitExceededError(
                ErrorTemplate.depth_exceeded(guard.max_depth)
            ) from error

    def compile_all(self, macros: Iterable[Macro]) -> BatchResult:
        """Compile independent call sites, isolating per-site usage errors.

        A UsageError aborts only its own call site; it is logged, collected
        and the remaining call sites are still compiled.
        """
        results: list[CompiledMacro | None] = []
        errors: list[CallSiteFailure] = []
        for index, macro in enumerate(macros):
            try:
                results.append(self.compile(macro))
            except UsageError as error:
                location = macro.options.location
                logger.warning(
                    "Skipping macro call site %s: %s",
                    location if location is not None else f"#{index}",
                    error,
                )
                results.append(None)
                errors.append(CallSiteFailure(index=index, location=location, error=error))
        logger.info(
            "Compiled %d macro call site(s), %d failed",
            len(results) - len(errors),
            len(errors),
        )
        return BatchResult(results=tuple(results), errors=tuple(errors))

    def _compile_descriptor(self, macro: Macro, guard: DepthGuard) -> MessageDescriptor:
        resolver = NestedMacroResolver(self._compile_descriptor, guard)
        nodes = resolver.resolve(macro.children)
        if macro.kind == MacroKind.STRUCTURAL:
            nodes = normalize_whitespace(nodes, guard=guard)

        registry = PlaceholderRegistry()
        message = self._flattener.flatten(nodes, registry, guard=guard)
        options = macro.options
        return compile_descriptor(
            message,
            registry.values,
            registry.components,
            context=options.context,
            comment=options.comment,
            custom_id=options.id,
            config=self._config,
            location=options.location,
        )


def compile_macro(
    macro: Macro,
    *,
    mode: Mode | str = Mode.DEVELOPMENT,
    extract: bool = False,
) -> CompiledMacro:
    """Compile one call site with a throwaway compiler.

    Raises:
        ConfigurationError: If mode or extract are invalid
        UsageError: If the call site cannot be compiled
    """
    config = CompilerConfig(mode=mode, extract=extract)  # type: ignore[arg-type]
    return MacroCompiler(config).compile(macro)

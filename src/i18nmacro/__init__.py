"""i18nmacro - compile translatable message macros into ICU-style descriptors.

Takes rich translatable content lowered by a host tool (text templates with
embedded expressions, or markup trees mixing text, elements and
expressions) and produces a normalized message descriptor: a canonical
message string, a deterministic id, and maps of substitutable values and
structural components.

Public API:
    MacroCompiler - Compile call sites with a shared configuration
    CompilerConfig - Mode (development/production) and extract override
    compile_macro - One-shot compilation of a single call site
    MessageDescriptor - Compiled, immutable message record
    generate_message_id - Deterministic id from message and context

Exceptions:
    MacroError - Base exception class
    UsageError - Invalid macro usage at one call site
    ConfigurationError - Invalid configuration, aborts the run

Submodules:
    i18nmacro.syntax - Message tree nodes, builders, whitespace, grammar
    i18nmacro.compiler - Registry, flattener, resolver, descriptors, calls
    i18nmacro.introspection - Read placeholders back from message strings
    i18nmacro.validation - Descriptor invariant checks
    i18nmacro.extraction - Babel PO catalog extraction (optional dependency)
"""

from .compiler import (
    CompiledMacro,
    ComponentCall,
    MacroCompiler,
    MessageCall,
    MessageDescriptor,
    compile_macro,
    generate_message_id,
)
from .config import CompilerConfig
from .diagnostics import ConfigurationError, MacroError, UsageError
from .enums import MacroKind, Mode

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nmacro")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompiledMacro",
    "CompilerConfig",
    "ComponentCall",
    "ConfigurationError",
    "MacroCompiler",
    "MacroError",
    "MacroKind",
    "MessageCall",
    "MessageDescriptor",
    "Mode",
    "UsageError",
    "__version__",
    "compile_macro",
    "generate_message_id",
]

"""Macro compiler: registry, flattener, ids, descriptors, calls.

    core <- syntax <- compiler

Python 3.13+.
"""

from .builder import ComponentCall, MessageCall, build_call
from .descriptor import MessageDescriptor, compile_descriptor
from .flattener import MessageFlattener, flatten
from .message_id import generate_message_id
from .pipeline import BatchResult, CallSiteFailure, CompiledMacro, MacroCompiler, compile_macro
from .registry import PlaceholderRegistry
from .resolver import NestedMacroResolver

__all__ = [
    "BatchResult",
    "CallSiteFailure",
    "CompiledMacro",
    "ComponentCall",
    "MacroCompiler",
    "MessageCall",
    "MessageDescriptor",
    "MessageFlattener",
    "NestedMacroResolver",
    "PlaceholderRegistry",
    "build_call",
    "compile_descriptor",
    "compile_macro",
    "flatten",
    "generate_message_id",
]

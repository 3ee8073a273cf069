"""Placeholder registry: stable keys for values and components.

One registry belongs to exactly one macro invocation. Nested macros are
compiled with their own registry, so numbering never leaks between call
sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType

from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.syntax.text import is_simple_name

__all__ = ["PlaceholderRegistry"]


class PlaceholderRegistry:
    """Assigns placeholder keys in document order.

    Values and components are numbered independently, both from 0:

        >>> registry = PlaceholderRegistry()
        >>> registry.intern_expression("props.name")
        '0'
        >>> registry.intern_element("<b>")
        '0'
        >>> registry.intern_expression("name", "name")
        'name'
        >>> registry.intern_expression("random()")
        '1'

    Named expressions are deduplicated by name when the bound expressions
    compare equal; anonymous expressions and elements never are. A name
    bound to two different expressions raises UsageError.

    Counters only grow: there is no removal operation.
    """

    __slots__ = ("_component_count", "_components", "_value_count", "_values")

    def __init__(self) -> None:
        self._values: dict[str, object] = {}
        self._components: dict[str, object] = {}
        self._value_count = 0
        self._component_count = 0

    def intern_expression(self, source: object, simple_name: str | None = None) -> str:
        """Register an embedded value and return its key.

        Args:
            source: Host expression
            simple_name: Identifier name for bare references, else None

        Returns:
            simple_name for named expressions, else the next decimal index

        Raises:
            UsageError: If simple_name is not an identifier, or is already
                bound to a different expression
        """
        if simple_name is None:
            key = str(self._value_count)
            self._value_count += 1
            self._values[key] = source
            return key

        if not is_simple_name(simple_name):
            raise UsageError(ErrorTemplate.unresolvable_reference(simple_name))

        if simple_name in self._values:
            existing = self._values[simple_name]
            if existing is not source and existing != source:
                raise UsageError(ErrorTemplate.placeholder_name_conflict(simple_name))
            return simple_name

        self._values[simple_name] = source
        return simple_name

    def intern_element(self, shape: object) -> str:
        """Register a structural element and return its (always fresh) key."""
        key = str(self._component_count)
        self._component_count += 1
        self._components[key] = shape
        return key

    @property
    def values(self) -> Mapping[str, object]:
        """Registered values in first-registration order (read-only view)."""
        return MappingProxyType(self._values)

    @property
    def components(self) -> Mapping[str, object]:
        """Registered components in first-registration order (read-only view)."""
        return MappingProxyType(self._components)

    def __len__(self) -> int:
        return len(self._values) + len(self._components)

    def __repr__(self) -> str:
        return (
            f"PlaceholderRegistry(values={list(self._values)}, "
            f"components={list(self._components)})"
        )

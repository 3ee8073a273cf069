"""Collect compiled descriptors into a gettext catalog.

Extraction compiles call sites with full metadata (development mode, or
production with extract=True) and hands the descriptors to a
CatalogCollector, which builds a Babel message catalog and writes it as a
PO template:

    #. Greeting shown on the dashboard
    #. placeholder {0}: user.name
    #: src/app.js:12
    msgctxt "dashboard"
    msgid "Hello {0}"
    msgstr ""

Descriptors with a caller-supplied id use that id as msgid, carry the
message as the source-language msgstr and are flagged ``explicit-id``.

Requires the optional Babel dependency: pip install i18nmacro[babel]

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, BinaryIO

from i18nmacro.core.babel_compat import require_babel
from i18nmacro.diagnostics import ErrorTemplate, UsageError
from i18nmacro.syntax.ast import NestedMessage

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

    from i18nmacro.compiler.descriptor import MessageDescriptor
    from i18nmacro.compiler.pipeline import CompiledMacro

__all__ = ["EXPLICIT_ID_FLAG", "CatalogCollector", "Location"]

logger = logging.getLogger(__name__)

EXPLICIT_ID_FLAG = "explicit-id"

type Location = tuple[str, int | None]


class CatalogCollector:
    """Accumulates descriptors into a babel.messages.catalog.Catalog.

    Messages with the same msgid and context are merged by Babel: their
    locations and comments accumulate on one entry.

    Example:
        >>> collector = CatalogCollector(project="shop")
        >>> collector.add(compiled.descriptor, location=("src/app.js", 12))
        >>> with open("messages.pot", "wb") as fileobj:
        ...     collector.write(fileobj)
    """

    __slots__ = ("_catalog",)

    def __init__(
        self,
        *,
        project: str | None = None,
        version: str | None = None,
        locale: str | None = None,
    ) -> None:
        require_babel("CatalogCollector")
        from babel.messages.catalog import Catalog  # noqa: PLC0415

        self._catalog = Catalog(locale=locale, project=project, version=version)

    @property
    def catalog(self) -> Catalog:
        """The underlying Babel catalog."""
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def add(self, descriptor: MessageDescriptor, *, location: Location | None = None) -> None:
        """Add one descriptor.

        Raises:
            UsageError: If the descriptor has no message text and no
                explicit id (compiled for production without extract)
        """
        if descriptor.message is None and not descriptor.custom_id:
            raise UsageError(ErrorTemplate.missing_metadata(descriptor.id))

        auto_comments = []
        if descriptor.comment:
            auto_comments.append(descriptor.comment)
        auto_comments.extend(_describe_placeholders(descriptor))

        if descriptor.custom_id:
            msgid = descriptor.id
            string = descriptor.message or ""
            flags: tuple[str, ...] = (EXPLICIT_ID_FLAG,)
        else:
            msgid = descriptor.message or ""
            string = ""
            flags = ()

        self._catalog.add(
            msgid,
            string,
            locations=(location,) if location is not None else (),
            flags=flags,
            auto_comments=auto_comments,
            context=descriptor.context,
        )
        logger.debug("Extracted message %s", descriptor.id)

    def add_all(self, compiled: Iterable[CompiledMacro], *, location: Location | None = None) -> None:
        """Add the descriptors of several compiled call sites."""
        for item in compiled:
            self.add(item.descriptor, location=location)

    def write(self, fileobj: BinaryIO, *, width: int = 76, sort_output: bool = False) -> None:
        """Write the catalog as a PO template to a binary file object."""
        from babel.messages.pofile import write_po  # noqa: PLC0415

        write_po(fileobj, self._catalog, width=width, sort_output=sort_output)
        logger.info("Wrote catalog with %d message(s)", len(self._catalog))


def _describe_placeholders(descriptor: MessageDescriptor) -> list[str]:
    lines = []
    for key, value in descriptor.values.items():
        if isinstance(value, NestedMessage):
            lines.append(f"placeholder {{{key}}}: nested message {value.descriptor.id}")
        elif key.isdigit():
            lines.append(f"placeholder {{{key}}}: {value}")
    return lines

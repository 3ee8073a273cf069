"""Every user-facing error text, built as a Diagnostic.

Raise sites call an ErrorTemplate factory instead of formatting their own
message, so tests can compare against one canonical wording per code.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Static factories returning one Diagnostic per failure kind."""

    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    @staticmethod
    def empty_message(location: str | None = None) -> Diagnostic:
        """Macro call site produced no message text and has no custom id.

        Args:
            location: Host-supplied call site location

        Returns:
            Diagnostic for EMPTY_MESSAGE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_MESSAGE,
            message="Macro call has an empty message and no explicit id",
            hint="Add message content or pass an explicit id",
            location=location,
        )

    @staticmethod
    def malformed_macro(reason: str, location: str | None = None) -> Diagnostic:
        """Nested macro invocation cannot be compiled.

        Args:
            reason: What is wrong with the invocation
            location: Host-supplied call site location

        Returns:
            Diagnostic for MALFORMED_MACRO
        """
        msg = f"Malformed macro invocation: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_MACRO,
            message=msg,
            hint="A macro needs message content or an explicit id",
            location=location,
        )

    @staticmethod
    def unresolvable_reference(name: str) -> Diagnostic:
        """Expression reference name is not a usable placeholder name.

        Args:
            name: The offending reference name

        Returns:
            Diagnostic for UNRESOLVABLE_REFERENCE
        """
        msg = f"Expression reference '{name}' is not a valid identifier"
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVABLE_REFERENCE,
            message=msg,
            hint="Only bare identifiers become named placeholders; pass simple_name=None",
            placeholder=name,
        )

    @staticmethod
    def placeholder_name_conflict(name: str) -> Diagnostic:
        """Two different expressions claim the same placeholder name.

        Args:
            name: The contested placeholder name

        Returns:
            Diagnostic for PLACEHOLDER_NAME_CONFLICT
        """
        msg = f"Placeholder '{name}' is bound to two different expressions"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NAME_CONFLICT,
            message=msg,
            hint="Rename one of the expressions or pass it as an anonymous placeholder",
            placeholder=name,
        )

    @staticmethod
    def unresolved_macro() -> Diagnostic:
        """A Macro node reached the flattener without being resolved.

        Returns:
            Diagnostic for UNRESOLVED_MACRO
        """
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_MACRO,
            message="Nested macro reached the flattener unresolved",
            hint="Run NestedMacroResolver before flattening",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Message tree nested beyond the depth limit.

        Args:
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce element or macro nesting inside the message",
        )

    @staticmethod
    def message_syntax(reason: str, position: int) -> Diagnostic:
        """Message string does not follow the placeholder grammar.

        Args:
            reason: What went wrong
            position: Character offset of the problem

        Returns:
            Diagnostic for MESSAGE_SYNTAX
        """
        msg = f"Invalid message syntax at offset {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_SYNTAX,
            message=msg,
            help_url=f"{ErrorTemplate._DOCS_BASE}/#quotingescaping",
        )

    @staticmethod
    def missing_metadata(message_id: str) -> Diagnostic:
        """Descriptor was compiled without message metadata.

        Args:
            message_id: Id of the stripped descriptor

        Returns:
            Diagnostic for MISSING_METADATA
        """
        msg = f"Descriptor '{message_id}' has no message text to extract"
        return Diagnostic(
            code=DiagnosticCode.MISSING_METADATA,
            message=msg,
            hint="Compile with mode=development or extract=True",
        )

    @staticmethod
    def invalid_mode(value: object) -> Diagnostic:
        """Unknown compilation mode.

        Args:
            value: The rejected mode value

        Returns:
            Diagnostic for INVALID_MODE
        """
        msg = f"Invalid mode {value!r}; expected 'development' or 'production'"
        return Diagnostic(code=DiagnosticCode.INVALID_MODE, message=msg)

    @staticmethod
    def invalid_extract(value: object) -> Diagnostic:
        """Extract override is not a boolean.

        Args:
            value: The rejected extract value

        Returns:
            Diagnostic for INVALID_EXTRACT
        """
        msg = f"Invalid extract flag {value!r}; expected True or False"
        return Diagnostic(code=DiagnosticCode.INVALID_EXTRACT, message=msg)

    @staticmethod
    def unknown_option(name: str) -> Diagnostic:
        """Option mapping contains an unrecognized key.

        Args:
            name: The unknown key

        Returns:
            Diagnostic for UNKNOWN_OPTION
        """
        msg = f"Unknown compiler option '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPTION,
            message=msg,
            hint="Supported options: mode, extract, max_depth",
        )

    @staticmethod
    def invalid_max_depth(value: object) -> Diagnostic:
        """Depth limit is not a positive integer.

        Args:
            value: The rejected max_depth value

        Returns:
            Diagnostic for INVALID_MAX_DEPTH
        """
        msg = f"Invalid max_depth {value!r}; expected a positive integer"
        return Diagnostic(code=DiagnosticCode.INVALID_MAX_DEPTH, message=msg)

"""i18nmacro exception hierarchy with structured diagnostics.

Errors raised from an ErrorTemplate carry their Diagnostic for tools to inspect.

Hierarchy:
    MacroError (base)
    ├─ UsageError (fatal for one call site, other call sites continue)
    │  └─ DepthLimitExceededError (tree nested beyond MAX_DEPTH)
    └─ ConfigurationError (fatal for the whole compilation run)

Python 3.13+.
"""

from .codes import Diagnostic


class MacroError(Exception):
    """Root of every exception the compiler raises.

    Attributes:
        diagnostic: The Diagnostic behind the error, or None for a bare message
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, str):
            self.diagnostic: Diagnostic | None = None
            super().__init__(message)
            return
        self.diagnostic = message
        super().__init__(message.format_error())


class UsageError(MacroError):
    """Invalid macro usage at one call site.

    Examples:
    - Empty message with no explicit id
    - Nested macro with neither content nor id
    - Expression reference that is not a valid identifier
    - One placeholder name bound to two different expressions

    The host aborts processing of the offending call site and may continue
    with the others.
    """


class DepthLimitExceededError(UsageError):
    """Raised when a message tree is nested deeper than the configured limit.

    This error indicates either:
    - Malformed programmatic tree construction by the host
    - Adversarial input designed to cause stack overflow
    """


class ConfigurationError(MacroError):
    """Invalid compiler configuration.

    Raised when the host supplies an unknown mode, a non-boolean extract
    flag or an unknown option key. Aborts the whole compilation run.
    """

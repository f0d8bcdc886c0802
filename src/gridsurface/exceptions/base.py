"""Root of the gridsurface error tree.

Encoders and lookups never raise; errors come from loading a definitions
file or asking the registry for a model it does not know. Each error
carries two texts: a short one the CLI prints after ``ERROR:`` and a
longer one, with file paths and parser output, that goes to the log.
"""

from typing import Optional


class GridSurfaceError(Exception):
    """
    Base class for definition loading and lookup failures.

    Attributes:
        user_message: One line for the CLI, e.g. "No controller definition named 'X'"
        technical_message: Log line with the path, field or raw parser error
        recoverable: True when the caller can carry on, e.g. by picking another model
        recovery_hint: What to change in the command or definitions file, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, for display outside the CLI."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"

"""Definition-related exceptions.

This module defines exceptions for controller definition errors:
- DefinitionError: Base class for definition errors
- DefinitionFileInvalidError: Definitions file has invalid syntax or schema
- DefinitionValidationError: A definition violates a device invariant
- UnknownDefinitionError: Lookup for a model that is not registered
"""

from typing import Any, Optional

from .base import GridSurfaceError


class DefinitionError(GridSurfaceError):
    """Controller definitions are invalid or cannot be loaded."""
    pass


class DefinitionFileInvalidError(DefinitionError):
    """Definitions file has invalid JSON or does not match the schema."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize definitions file invalid error.

        Args:
            file_path: Path to the invalid definitions file
            parse_error: The parsing or schema error message
        """
        user_msg = "Definitions file is invalid"
        recovery = "Check for common JSON errors:\n"
        recovery += "  - Trailing commas (remove commas after last item)\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Unclosed braces or brackets\n"
        recovery += f"  - Edit: {file_path}"

        if "trailing comma" in parse_error.lower():
            user_msg = "Definitions file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object or array"
            )
        elif "field required" in parse_error.lower():
            user_msg = "Definitions file is missing a required field"
            recovery = f"Add the missing field named in the log to {file_path}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Definitions error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class DefinitionValidationError(DefinitionError):
    """A merged definition breaks a device invariant."""

    def __init__(self, model: str, field: str, error_msg: str, value: Any = None):
        """
        Initialize definition validation error.

        Args:
            model: Device model whose definition is invalid
            field: The definition field that failed validation
            error_msg: Why the value is invalid
            value: The offending value (optional)
        """
        super().__init__(
            user_message=f"Invalid definition for '{model}' ({field}): {error_msg}",
            technical_message=f"Definition validation failed for {model}.{field}={value!r}: {error_msg}",
            recoverable=False,
            recovery_hint=f"Fix the '{field}' entry of '{model}' in the definitions file",
        )
        self.model = model
        self.field = field
        self.value = value


class UnknownDefinitionError(DefinitionError):
    """No definition is registered under the requested name."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        """
        Initialize unknown definition error.

        Args:
            name: Model name or unique id that was requested
            available: Registered model names, for the recovery hint
        """
        recovery = "Run 'gridsurface list' to see supported controllers"
        if available:
            recovery = "Supported controllers: " + ", ".join(available)

        super().__init__(
            user_message=f"No controller definition named '{name}'",
            technical_message=f"Definition lookup failed for {name!r}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.name = name
        self.available = available or []

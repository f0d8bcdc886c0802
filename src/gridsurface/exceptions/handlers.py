"""
Error conversion helpers.

Pydantic errors raised while loading the definitions file are converted to
`DefinitionFileInvalidError` so the CLI can show a short message and a
recovery hint instead of a traceback.

```python
from gridsurface.exceptions import wrap_validation_error

try:
    schema = DefinitionRegistrySchema.model_validate_json(path.read_text())
except ValidationError as e:
    raise wrap_validation_error(e, str(path)) from e
```
"""

from typing import Optional

from pydantic import ValidationError

from .base import GridSurfaceError
from .definitions import DefinitionFileInvalidError


def wrap_validation_error(error: Exception, file_path: str) -> DefinitionFileInvalidError:
    """
    Convert Pydantic validation errors to a DefinitionFileInvalidError.

    Args:
        error: The Pydantic ValidationError (or JSON decode error)
        file_path: Path to the definitions file that failed validation

    Returns:
        DefinitionFileInvalidError with a readable parse error
    """
    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON:" in error_msg:
        parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        return DefinitionFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        lines = []
        for err in error.errors():
            field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
            lines.append(f"{field}: {err.get('msg', 'validation failed')}")
        if lines:
            return DefinitionFileInvalidError(file_path, "; ".join(lines))

    return DefinitionFileInvalidError(file_path, error_msg)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, GridSurfaceError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None

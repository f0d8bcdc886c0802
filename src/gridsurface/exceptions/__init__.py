"""
Custom exception hierarchy for gridsurface.

## Exception Hierarchy

```
GridSurfaceError (base)
└── DefinitionError
    ├── DefinitionFileInvalidError
    ├── DefinitionValidationError
    └── UnknownDefinitionError
```

The encoders and lookups never raise: unsupported buttons are absent from
the map and unknown operating systems fall back to the base discovery list.
These exceptions only cover loading and resolving definitions.
"""

from .base import GridSurfaceError
from .definitions import (
    DefinitionError,
    DefinitionFileInvalidError,
    DefinitionValidationError,
    UnknownDefinitionError,
)
from .handlers import format_error_for_display, wrap_validation_error

__all__ = [
    "GridSurfaceError",
    "DefinitionError",
    "DefinitionFileInvalidError",
    "DefinitionValidationError",
    "UnknownDefinitionError",
    "format_error_for_display",
    "wrap_validation_error",
]

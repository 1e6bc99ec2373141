"""Error hierarchy for byte transforms.

Every error carries a stable ``code`` and renders to a plain dict through
``to_dict()`` so the CLI can report it as JSON. Each kind also subclasses the
builtin exception a Python caller would expect (TypeError, ValueError, ...).
"""

from typing import Any, Dict, Optional


class BytesTransformError(Exception):
    """Base exception for all bytetransform failures."""

    code = "TRANSFORM_ERROR"

    def __init__(self, message: str, transform: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.transform = transform

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "transform": self.transform,
            }
        }


class NullParameterError(BytesTransformError, TypeError):
    """A required construction argument (or input buffer) is missing."""

    code = "NULL_PARAMETER"

    def __init__(self, parameter: str, transform: Optional[str] = None):
        super().__init__(f"{parameter} must not be None", transform)
        self.parameter = parameter


class LengthMismatchError(BytesTransformError, ValueError):
    """Bitwise binary operation on buffers of different lengths."""

    code = "LENGTH_MISMATCH"

    def __init__(self, expected: int, actual: int, transform: Optional[str] = None):
        super().__init__(
            f"all byte arrays must be of same length doing bitwise operation "
            f"(expected {expected}, got {actual})",
            transform,
        )
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(BytesTransformError, IndexError):
    """Sub-range lies outside the buffer."""

    code = "INDEX_OUT_OF_RANGE"


class InvalidArgumentError(BytesTransformError, ValueError):
    """Argument has an unusable value (negative size, unknown mode, ...)."""

    code = "INVALID_ARGUMENT"


class UnknownTransformError(BytesTransformError, KeyError):
    """No transform is registered under the requested name."""

    code = "UNKNOWN_TRANSFORM"

    def __init__(self, name: str):
        super().__init__(f"unknown transform '{name}'", name)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message

"""Plugin API definitions for bytetransform."""

import inspect
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Tuple

from .buffer_utils import BytesLike
from .errors import InvalidArgumentError


class BasePlugin(ABC):
    """Base class for all plugins."""

    @abstractmethod
    def describe(self) -> str:
        """Return plugin description."""
        pass


class TransformPlugin(BasePlugin):
    """Base class for transformation plugins.

    A transform is an immutable, pre-configured operation. ``transform`` either
    mutates and returns ``buffer`` itself (``in_place=True`` and the output has
    the input's length) or returns a newly allocated ``bytearray`` and leaves
    ``buffer`` untouched. Transforms whose output length can differ from the
    input (shift, concat, copy, resize) ignore ``in_place`` and always allocate.

    Required constructor arguments are validated when the plugin is built;
    checks depending on the input buffer happen in ``transform``.
    """

    # Registry name, also used to label raised errors
    name: ClassVar[str] = "transform"
    # Keys accepted by from_params; None means the constructor's parameters
    param_names: ClassVar[Optional[Tuple[str, ...]]] = None

    @abstractmethod
    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        """Apply transformation."""
        pass

    @classmethod
    def check_params(cls, params: Dict[str, Any]) -> None:
        """Raise InvalidArgumentError for keys ``from_params`` would not use."""
        allowed = cls.param_names
        if allowed is None:
            allowed = tuple(inspect.signature(cls).parameters)
        unknown = sorted(str(k) for k in params if k not in allowed)
        if unknown:
            raise InvalidArgumentError(
                f"unknown parameter(s) {', '.join(unknown)}; accepted: {', '.join(allowed) or 'none'}",
                cls.name,
            )

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "TransformPlugin":
        """Build an instance from a config ``params`` mapping."""
        cls.check_params(params)
        return cls(**params)

"""Resize transform plugin."""

from dataclasses import dataclass
from typing import Any, Dict

from ..buffer_utils import BytesLike, to_buffer
from ..errors import InvalidArgumentError, NullParameterError
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class ResizeTransformer(TransformPlugin):
    """Resizes the buffer as if it held a big-endian number.

    Growing pads zero bytes on the left, keeping the value; shrinking drops
    the leftmost (most significant) bytes.
    """

    new_size: int

    name = "resize"
    param_names = ("new_size", "size")

    def __post_init__(self):
        if self.new_size is None:
            raise NullParameterError("new_size", self.name)
        if isinstance(self.new_size, bool) or not isinstance(self.new_size, int):
            raise InvalidArgumentError(f"new_size must be an integer, got {self.new_size!r}", self.name)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "ResizeTransformer":
        cls.check_params(params)
        return cls(params.get("new_size", params.get("size")))

    def describe(self) -> str:
        return f"Resizes to {self.new_size} bytes, padding or truncating on the left"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        current = len(buffer)
        if current == self.new_size:
            if in_place and isinstance(buffer, bytearray):
                return buffer
            return to_buffer(buffer)
        if self.new_size < 0:
            raise InvalidArgumentError("cannot resize to smaller than 0", self.name)
        if self.new_size == 0:
            return bytearray()

        if self.new_size > current:
            return bytearray(self.new_size - current) + buffer
        return bytearray(buffer[current - self.new_size:])

"""Sub-range copy transform plugin."""

from dataclasses import dataclass
from typing import Any, Dict

from ..buffer_utils import BytesLike
from ..errors import IndexOutOfRangeError, InvalidArgumentError, NullParameterError
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class CopyTransformer(TransformPlugin):
    """Extracts ``length`` bytes starting at ``offset`` into a new buffer."""

    offset: int
    length: int

    name = "copy"
    param_names = ("offset", "length")

    def __post_init__(self):
        for field_name in ("offset", "length"):
            value = getattr(self, field_name)
            if value is None:
                raise NullParameterError(field_name, self.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{field_name} must be an integer, got {value!r}", self.name)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "CopyTransformer":
        cls.check_params(params)
        return cls(params.get("offset", 0), params.get("length"))

    def describe(self) -> str:
        return f"Copies {self.length} bytes from offset {self.offset}"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        end = self.offset + self.length
        if self.offset < 0 or self.length < 0 or end > len(buffer):
            raise IndexOutOfRangeError(
                f"range [{self.offset}, {end}) is out of bounds for length {len(buffer)}",
                self.name,
            )
        return bytearray(buffer[self.offset:end])

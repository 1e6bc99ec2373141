"""Arithmetic bit shift transform plugin."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from ..buffer_utils import BytesLike
from ..errors import InvalidArgumentError, NullParameterError
from ..plugin_api import TransformPlugin


class ShiftDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


def to_signed_int(buffer: BytesLike) -> int:
    """Read ``buffer`` as a big-endian two's-complement integer."""
    return int.from_bytes(buffer, "big", signed=True)


def to_minimal_bytes(value: int) -> bytearray:
    """Serialize ``value`` as the shortest big-endian two's-complement sequence.

    Zero and -1 both take one byte; there is always room for the sign bit.
    """
    magnitude_bits = (value if value >= 0 else ~value).bit_length()
    return bytearray(value.to_bytes(magnitude_bits // 8 + 1, "big", signed=True))


@dataclass(frozen=True)
class ShiftTransformer(TransformPlugin):
    """Shifts the whole buffer, read as a signed big-endian integer.

    The result is re-encoded minimally, so its length may differ from the
    input; ``in_place`` is therefore never honored. A negative
    ``shift_count`` shifts the other way. Right shifts floor, keeping the sign.

    See https://en.wikipedia.org/wiki/Bitwise_operation#Bit_shifts
    """

    shift_count: int
    direction: ShiftDirection

    name = "shift"
    param_names = ("shift_count", "count", "direction")

    def __post_init__(self):
        if self.shift_count is None:
            raise NullParameterError("shift_count", self.name)
        if self.direction is None:
            raise NullParameterError("direction", self.name)
        if isinstance(self.shift_count, bool) or not isinstance(self.shift_count, int):
            raise InvalidArgumentError(f"shift_count must be an integer, got {self.shift_count!r}", self.name)
        try:
            direction = ShiftDirection(self.direction)
        except ValueError:
            raise InvalidArgumentError(f"unknown shift type {self.direction!r}", self.name)
        object.__setattr__(self, "direction", direction)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "ShiftTransformer":
        cls.check_params(params)
        return cls(params.get("shift_count", params.get("count")), params.get("direction"))

    def describe(self) -> str:
        return f"Arithmetic {self.direction.value} shift by {self.shift_count} bits"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        if len(buffer) == 0:
            raise InvalidArgumentError("an empty buffer does not encode an integer to shift", self.name)
        value = to_signed_int(buffer)
        count = self.shift_count

        if self.direction is ShiftDirection.LEFT:
            value = value << count if count >= 0 else value >> -count
        elif self.direction is ShiftDirection.RIGHT:
            value = value >> count if count >= 0 else value << -count
        else:
            raise InvalidArgumentError(f"unknown shift type {self.direction!r}", self.name)
        return to_minimal_bytes(value)

"""Bitwise AND/OR/XOR transform plugin."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

import numpy as np

from ..buffer_utils import BytesLike, parse_buffer, require_mutable, to_buffer, unsigned_view
from ..errors import InvalidArgumentError, LengthMismatchError, NullParameterError
from ..plugin_api import TransformPlugin


class BitwiseMode(str, Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"


_UFUNCS = {
    BitwiseMode.AND: np.bitwise_and,
    BitwiseMode.OR: np.bitwise_or,
    BitwiseMode.XOR: np.bitwise_xor,
}


@dataclass(frozen=True)
class BitwiseTransformer(TransformPlugin):
    """Combines the buffer byte by byte with a second, equally long buffer.

    See https://en.wikipedia.org/wiki/Bitwise_operation#Bitwise_operators
    """

    second: bytes
    mode: BitwiseMode

    name = "bitwise"
    param_names = ("second", "mode")

    def __post_init__(self):
        if self.second is None:
            raise NullParameterError("second", self.name)
        if self.mode is None:
            raise NullParameterError("mode", self.name)
        try:
            mode = BitwiseMode(self.mode)
        except ValueError:
            raise InvalidArgumentError(f"unknown bitwise transform mode {self.mode!r}", self.name)
        object.__setattr__(self, "second", parse_buffer(self.second, "second"))
        object.__setattr__(self, "mode", mode)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "BitwiseTransformer":
        cls.check_params(params)
        return cls(params.get("second"), params.get("mode"))

    def describe(self) -> str:
        return f"Bitwise {self.mode.name} with a second buffer of the same length"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        if len(buffer) != len(self.second):
            raise LengthMismatchError(len(self.second), len(buffer), self.name)
        ufunc = _UFUNCS.get(self.mode)
        if ufunc is None:
            raise InvalidArgumentError(f"unknown bitwise transform mode {self.mode!r}", self.name)

        out = require_mutable(buffer, self.name) if in_place else to_buffer(buffer)
        if out:
            view = unsigned_view(out)
            ufunc(view, unsigned_view(self.second), out=view)
        return out

"""Concatenation transform plugin."""

from dataclasses import dataclass
from typing import Any, Dict

from ..buffer_utils import BytesLike, concat, parse_buffer
from ..errors import NullParameterError
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class ConcatTransformer(TransformPlugin):
    """Appends a second buffer; always allocates since the result is longer."""

    second: bytes

    name = "concat"
    param_names = ("second",)

    def __post_init__(self):
        if self.second is None:
            raise NullParameterError("second", self.name)
        object.__setattr__(self, "second", parse_buffer(self.second, "second"))

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "ConcatTransformer":
        cls.check_params(params)
        return cls(params.get("second"))

    def describe(self) -> str:
        return f"Appends {len(self.second)} bytes"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        return concat(buffer, self.second)

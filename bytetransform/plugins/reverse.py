"""Reverse transform plugin."""

from dataclasses import dataclass

from ..buffer_utils import BytesLike, require_mutable, to_buffer
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class ReverseTransformer(TransformPlugin):
    """Reverses the byte order by swapping from both ends."""

    name = "reverse"

    def describe(self) -> str:
        return "Reverses the byte order"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        out = require_mutable(buffer, self.name) if in_place else to_buffer(buffer)
        n = len(out)
        for i in range(n // 2):
            out[i], out[n - i - 1] = out[n - i - 1], out[i]
        return out

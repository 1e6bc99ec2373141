"""Bitwise NOT transform plugin."""

from dataclasses import dataclass

import numpy as np

from ..buffer_utils import BytesLike, require_mutable, to_buffer, unsigned_view
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class NegateTransformer(TransformPlugin):
    """One's complement of every byte (not of the buffer as a number)."""

    name = "not"

    def describe(self) -> str:
        return "Bitwise NOT of every byte"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        out = require_mutable(buffer, self.name) if in_place else to_buffer(buffer)
        if out:
            view = unsigned_view(out)
            np.invert(view, out=view)
        return out

"""Sort transform plugin."""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Dict, Optional

from ..buffer_utils import BytesLike, require_mutable, signed_view, to_buffer, to_signed
from ..errors import InvalidArgumentError
from ..plugin_api import TransformPlugin

Comparator = Callable[[int, int], int]


def descending(a: int, b: int) -> int:
    return (b > a) - (b < a)


@dataclass(frozen=True)
class SortTransformer(TransformPlugin):
    """Sorts the bytes, by signed 8-bit value unless a comparator is given.

    The comparator receives signed byte values (-128..127). Sorting with a
    comparator goes through an intermediate list and always returns a new
    buffer, whatever ``in_place`` says.
    """

    comparator: Optional[Comparator] = None

    name = "sort"
    param_names = ("comparator", "descending")

    def __post_init__(self):
        if self.comparator is not None and not callable(self.comparator):
            raise InvalidArgumentError("comparator must be callable", self.name)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "SortTransformer":
        cls.check_params(params)
        if "comparator" in params:
            return cls(params["comparator"])
        return cls(descending if params.get("descending") else None)

    def describe(self) -> str:
        if self.comparator is None:
            return "Sorts bytes ascending by signed value"
        return "Sorts bytes with a custom comparator"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        if self.comparator is None:
            out = require_mutable(buffer, self.name) if in_place else to_buffer(buffer)
            if out:
                signed_view(out).sort()
            return out

        # no in-place variant with a comparator
        values = sorted((to_signed(b) for b in buffer), key=cmp_to_key(self.comparator))
        return bytearray(v & 0xFF for v in values)

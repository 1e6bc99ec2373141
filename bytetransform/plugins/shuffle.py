"""Shuffle transform plugin."""

import random
from dataclasses import dataclass
from typing import Any, Dict

from ..buffer_utils import BytesLike, require_mutable, shuffle, to_buffer
from ..errors import InvalidArgumentError, NullParameterError
from ..plugin_api import TransformPlugin


@dataclass(frozen=True)
class ShuffleTransformer(TransformPlugin):
    """Fisher-Yates shuffle driven by a caller-owned, seeded generator.

    The generator is advanced on every call, so reusing one instance gives a
    different permutation each time while two generators with the same seed
    give the same sequence of permutations.
    """

    rng: random.Random

    name = "shuffle"
    param_names = ("rng", "seed")

    def __post_init__(self):
        if self.rng is None:
            raise NullParameterError("rng", self.name)
        if not callable(getattr(self.rng, "randrange", None)):
            raise InvalidArgumentError("rng must provide randrange()", self.name)

    @classmethod
    def from_params(cls, params: Dict[str, Any]) -> "ShuffleTransformer":
        cls.check_params(params)
        if params.get("rng") is not None:
            return cls(params["rng"])
        if params.get("seed") is None:
            raise NullParameterError("seed", cls.name)
        return cls(random.Random(params["seed"]))

    def describe(self) -> str:
        return "Shuffles bytes with a seeded Fisher-Yates shuffle"

    def transform(self, buffer: BytesLike, in_place: bool) -> bytearray:
        out = require_mutable(buffer, self.name) if in_place else to_buffer(buffer)
        shuffle(out, self.rng)
        return out

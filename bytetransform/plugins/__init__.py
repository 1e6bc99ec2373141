"""Built-in transform plugins."""

from .bitwise import BitwiseMode, BitwiseTransformer
from .negate import NegateTransformer
from .shift import ShiftDirection, ShiftTransformer
from .concat import ConcatTransformer
from .reverse import ReverseTransformer
from .sort import SortTransformer
from .shuffle import ShuffleTransformer
from .copy import CopyTransformer
from .resize import ResizeTransformer

__all__ = [
    "BitwiseMode",
    "BitwiseTransformer",
    "NegateTransformer",
    "ShiftDirection",
    "ShiftTransformer",
    "ConcatTransformer",
    "ReverseTransformer",
    "SortTransformer",
    "ShuffleTransformer",
    "CopyTransformer",
    "ResizeTransformer",
]

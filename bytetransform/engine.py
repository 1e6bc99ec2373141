"""bytetransform dispatch engine."""

import datetime
import importlib.metadata
import json
import logging
import traceback
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from .buffer_utils import BytesLike, to_buffer
from .errors import NullParameterError, UnknownTransformError
from .plugin_api import TransformPlugin
from .plugins import (
    BitwiseTransformer,
    ConcatTransformer,
    CopyTransformer,
    NegateTransformer,
    ResizeTransformer,
    ReverseTransformer,
    ShiftTransformer,
    ShuffleTransformer,
    SortTransformer,
)

ENTRY_POINT_GROUP = "bytetransform.transformers"

TransformEntry = Union[str, Dict[str, Any]]

logger = logging.getLogger(__name__)


class _JSONFormatter(logging.Formatter):
    def format(self, record):
        rec = {
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            rec["exc"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(rec, ensure_ascii=False)


def normalize_transform_entry(entry: TransformEntry) -> Dict[str, Any]:
    """Normalize a single transform entry which may be either a string or a dict."""
    if isinstance(entry, str):
        return {"name": entry, "params": {}}
    if isinstance(entry, dict):
        return {"name": entry.get("name"), "params": entry.get("params") or {}}
    raise ValueError("Invalid transform entry type")


class Engine:
    """Registers transform plugins by name and applies them to buffers."""

    def __init__(self):
        self._transforms: Dict[str, Tuple[Type[TransformPlugin], Dict[str, Any]]] = {}
        # Map of configured log_path -> handler to avoid duplicate handlers across calls
        self._log_handlers: Dict[str, logging.Handler] = {}
        self._discover_plugins()

    def _discover_plugins(self):
        """Register built-in plugins, then plugins published via entry points."""
        self.register_transform("and", BitwiseTransformer, {"mode": "and"})
        self.register_transform("or", BitwiseTransformer, {"mode": "or"})
        self.register_transform("xor", BitwiseTransformer, {"mode": "xor"})
        self.register_transform("not", NegateTransformer)
        self.register_transform("shift_left", ShiftTransformer, {"direction": "left"})
        self.register_transform("shift_right", ShiftTransformer, {"direction": "right"})
        self.register_transform("concat", ConcatTransformer)
        self.register_transform("reverse", ReverseTransformer)
        self.register_transform("sort", SortTransformer)
        self.register_transform("shuffle", ShuffleTransformer)
        self.register_transform("copy", CopyTransformer)
        self.register_transform("resize", ResizeTransformer)

        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            cls = ep.load()
            if isinstance(cls, type) and issubclass(cls, TransformPlugin):
                self.register_transform(ep.name, cls)
            else:
                logger.warning("ignoring entry point %s: not a TransformPlugin subclass", ep.name)

    def configure_logging(self, log_level: str = "INFO", log_path: Optional[str] = None) -> None:
        """Set the root log level and optionally attach a JSONL file handler.

        Repeated calls with the same ``log_path`` only update the handler level.
        """
        level_no = getattr(logging, str(log_level).upper(), logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(level_no)

        if not log_path:
            return

        existing = self._log_handlers.get(log_path)
        if existing:
            existing.setLevel(level_no)
            return

        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(level_no)
        fh.setFormatter(_JSONFormatter())
        root_logger.addHandler(fh)
        self._log_handlers[log_path] = fh

    def close(self) -> None:
        """Detach and close file handlers added by configure_logging."""
        root_logger = logging.getLogger()
        for handler in self._log_handlers.values():
            root_logger.removeHandler(handler)
            handler.close()
        self._log_handlers.clear()

    def register_transform(self, name: str, cls: Type[TransformPlugin], defaults: Optional[Dict[str, Any]] = None):
        """Register a transform plugin class, optionally with default params."""
        self._transforms[name] = (cls, dict(defaults or {}))

    def get_available_transforms(self) -> List[str]:
        """Get list of available transform names."""
        return list(self._transforms.keys())

    def _lookup(self, name: str) -> Tuple[Type[TransformPlugin], Dict[str, Any]]:
        try:
            return self._transforms[name]
        except KeyError:
            raise UnknownTransformError(name) from None

    def build(self, name: str, params: Optional[Dict[str, Any]] = None) -> TransformPlugin:
        """Construct the transform registered as ``name`` from ``params``."""
        cls, defaults = self._lookup(name)
        merged = dict(defaults)
        merged.update(params or {})
        return cls.from_params(merged)

    def describe(self, name: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Describe a registered transform.

        With ``params`` the transform is built and its own ``describe()`` is
        returned. Without them only the class docstring's first line is used,
        since most transforms cannot be built before their required parameters
        are known.
        """
        if params is not None:
            return self.build(name, params).describe()
        cls, _ = self._lookup(name)
        doc = (cls.__doc__ or "").strip().splitlines()
        return doc[0] if doc else cls.__name__

    def apply(self, data: BytesLike, name: str, params: Optional[Dict[str, Any]] = None, in_place: bool = False) -> bytearray:
        """Build and apply one transform."""
        return self.apply_pipeline(data, [{"name": name, "params": params or {}}], in_place=in_place)

    def apply_pipeline(self, data: BytesLike, transforms: List[TransformEntry], in_place: bool = False) -> bytearray:
        """Apply transforms in sequence.

        With ``in_place=False`` the caller's buffer is never written; the first
        step produces an engine-owned buffer and later steps reuse it in place.
        With ``in_place=True`` the caller's ``bytearray`` may be overwritten.
        """
        if data is None:
            raise NullParameterError("data")

        steps = [normalize_transform_entry(t) for t in transforms]
        plugins = [self.build(s["name"], s["params"]) for s in steps]

        if not plugins:
            return data if in_place and isinstance(data, bytearray) else to_buffer(data)

        buffer = data
        owned = in_place
        for step, plugin in zip(steps, plugins):
            before = len(buffer)
            result = plugin.transform(buffer, owned)
            logger.debug(
                "applied transform %s (%s): %d -> %d bytes (reused=%s)",
                step["name"], plugin.describe(), before, len(result), result is buffer,
            )
            buffer = result
            owned = True
        return buffer

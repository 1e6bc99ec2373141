"""bytetransform - Composable in-place/copy transforms over byte buffers."""

__version__ = "0.1.0"

# Expose a package-level logger so the engine and plugins can call:
#   from bytetransform import logger
#   logger.debug("...")
# Engine.configure_logging attaches handlers (e.g. JSONL FileHandler) when given a `log_path`.
import logging
logger = logging.getLogger("bytetransform")
# Provide a NullHandler by default to avoid "No handler found" warnings if not configured.
logger.addHandler(logging.NullHandler())

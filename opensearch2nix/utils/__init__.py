"""Utils module -- config, logging."""

from opensearch2nix.utils.config import settings
from opensearch2nix.utils.logger import get_logger, set_log_level

__all__ = ["settings", "get_logger", "set_log_level"]

# Utils module for triplestore

from .config import StoreConfig, load_config
from .logger import get_logger, set_global_log_level

__all__ = [
    "StoreConfig",
    "load_config",
    "get_logger",
    "set_global_log_level",
]

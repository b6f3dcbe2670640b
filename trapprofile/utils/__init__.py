from .log_utils import init_logger
from .config_loader import load_config_toml, load_limits_toml


__all__ = [
    "init_logger",
    "load_config_toml",
    "load_limits_toml"
]

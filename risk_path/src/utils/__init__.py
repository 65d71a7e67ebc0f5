from .logger import get_logger
from .config_loader import load_config, load_solver_config

__all__ = ["get_logger", "load_config", "load_solver_config"]

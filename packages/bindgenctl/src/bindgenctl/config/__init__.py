from .loader import DriverConfig, load_config

__all__ = ["DriverConfig", "load_config"]

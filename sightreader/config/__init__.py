from .config import Settings, load_config, load_settings, validate_config

__all__ = ["Settings", "load_config", "load_settings", "validate_config"]

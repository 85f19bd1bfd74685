"""Configuration models and loaders."""

from .loader import load_config
from .schema import ParseConfig, SerializeConfig, TagValueConfig

__all__ = ["load_config", "ParseConfig", "SerializeConfig", "TagValueConfig"]

from .factory import build_source, build_sources, source_label
from .loader import ConfigError, load_config, load_yaml, parse_config
from .models import LoggingConfig, MergeConfig, OutputConfig

__all__ = [
    "ConfigError",
    "LoggingConfig",
    "MergeConfig",
    "OutputConfig",
    "build_source",
    "build_sources",
    "load_config",
    "load_yaml",
    "parse_config",
    "source_label",
]

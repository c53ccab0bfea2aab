"""Public configuration API for MetaResolver."""

from __future__ import annotations

from MetaResolver.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from MetaResolver.config.output import OutputConfig
from MetaResolver.config.resolver import ResolverConfig
from MetaResolver.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ResolverConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]

"""
addmissing.config

Configuration management for addmissing.

Exports:
- Config schema
- Loading/saving utilities
- Hashing for reproducibility
"""

from .schema import InjectorConfig

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

from .hashing import (
    hash_config,
    hash_dict,
    config_signature,
)

__all__ = [
    "InjectorConfig",
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
    "hash_config",
    "hash_dict",
    "config_signature",
]

"""
addmissing.config.load

Config loading and saving.
"""

import yaml
from dataclasses import fields
from pathlib import Path
from typing import Union, Dict, Any

from .schema import InjectorConfig
from ..core.exceptions import ConfigError, ValidationError


def load_config(path: Union[str, Path]) -> InjectorConfig:
    """Load configuration from YAML file."""
    path = Path(path)
    
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    
    # Empty file means all defaults
    return config_from_dict(raw or {})


def config_from_dict(d: Dict[str, Any]) -> InjectorConfig:
    """Create InjectorConfig from dictionary."""
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")
    
    known = {f.name for f in fields(InjectorConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {unknown}")
    
    try:
        return InjectorConfig(**d)
    except (TypeError, ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: InjectorConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    
    d = config_to_dict(config)
    
    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: InjectorConfig) -> Dict[str, Any]:
    """Convert InjectorConfig to dictionary."""
    return {
        "rate": config.rate,
        "seed": config.seed,
    }

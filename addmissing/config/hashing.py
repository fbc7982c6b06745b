"""
addmissing.config.hashing

Stable identifiers for injector configs, so runs that share a rate and
seed can be matched up across log files.
"""

import hashlib
import json
from typing import Any, Dict

from .schema import InjectorConfig
from .load import config_to_dict


def hash_config(config: InjectorConfig) -> str:
    """Hash the YAML-facing form of `config` (16 hex chars)."""
    return hash_dict(config_to_dict(config))


def hash_dict(d: Dict[str, Any]) -> str:
    """Hash a JSON-serialisable mapping; key order does not matter."""
    payload = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def config_signature(config: InjectorConfig) -> str:
    """Readable run tag: ``r{rate}_s{seed|default}_{hash}``.

    Example: "r0.10_s42_a1b2c3d4e5f6a7b8"
    """
    seed = "default" if config.seed is None else config.seed
    return f"r{config.rate:.2f}_s{seed}_{hash_config(config)}"

"""
addmissing

Inject missing values into a data vector under MCAR, MAR, or MNAR schemes.
"""

from .core import (
    AddMissingError,
    ValidationError,
    ContractViolation,
    MissingYParameter,
    LengthMismatch,
    ProbabilityOutOfRange,
    ConfigError,
    RNGState,
    get_default_rng,
    set_default_seed,
    InjectionResult,
)

from .inject import (
    DEFAULT_RATE,
    default_fun,
    add_missing,
    add_missing_with_mask,
    MissingnessInjector,
)

from .config import InjectorConfig, load_config, save_config

from .logging import create_logger, summarize_injection

__version__ = "0.1.0"

__all__ = [
    # Injection
    "DEFAULT_RATE",
    "default_fun",
    "add_missing",
    "add_missing_with_mask",
    "MissingnessInjector",
    # Errors
    "AddMissingError",
    "ValidationError",
    "ContractViolation",
    "MissingYParameter",
    "LengthMismatch",
    "ProbabilityOutOfRange",
    "ConfigError",
    # RNG
    "RNGState",
    "get_default_rng",
    "set_default_seed",
    # Types
    "InjectionResult",
    # Config
    "InjectorConfig",
    "load_config",
    "save_config",
    # Logging
    "create_logger",
    "summarize_injection",
]

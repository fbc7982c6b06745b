"""
addmissing.core

Core infrastructure for addmissing.

Exports:
- Exception classes
- RNG management
- Core data types
- Validation utilities
"""

from .exceptions import (
    AddMissingError,
    ValidationError,
    ContractViolation,
    MissingYParameter,
    LengthMismatch,
    ProbabilityOutOfRange,
    ConfigError,
)

from .rng import (
    RNGState,
    get_default_rng,
    set_default_seed,
    resolve_rng,
)

from .types import (
    InjectionResult,
)

from .validation import (
    validate_probability,
    validate_non_negative_int,
    validate_fun_signature,
    validate_probabilities,
    accepts_keyword,
)

__all__ = [
    # Exceptions
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
    "resolve_rng",
    # Types
    "InjectionResult",
    # Validation
    "validate_probability",
    "validate_non_negative_int",
    "validate_fun_signature",
    "validate_probabilities",
    "accepts_keyword",
]

"""
addmissing.core.exceptions

All custom exceptions for addmissing.

Design: Fail fast and loud with informative errors.
"""


class AddMissingError(Exception):
    """Base exception for all addmissing errors."""
    pass


class ValidationError(AddMissingError):
    """Input validation failed.
    
    Raised when data or parameters fail boundary checks.
    """
    pass


class ContractViolation(ValidationError):
    """A missingness function broke the probability-function contract."""
    pass


class MissingYParameter(ContractViolation):
    """Missingness function does not declare a `y` parameter."""
    pass


class LengthMismatch(ContractViolation):
    """Probability vector length differs from the input vector length."""
    pass


class ProbabilityOutOfRange(ContractViolation):
    """A returned probability is outside [0, 1] (or not a number)."""
    pass


class ConfigError(AddMissingError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or required fields are absent.
    """
    pass

"""
addmissing.config.schema

Configuration schema using dataclasses.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.validation import validate_probability, validate_non_negative_int


@dataclass
class InjectorConfig:
    """Injector configuration.
    
    Attributes:
        rate: Default missingness rate handed to the missingness function.
        seed: RNG seed. None = use the process-level default RNG.
    """
    rate: float = 0.1
    seed: Optional[int] = None
    
    def __post_init__(self):
        validate_probability(self.rate, name="rate")
        if self.seed is not None:
            validate_non_negative_int(self.seed, name="seed")

"""
addmissing.core.types

Core data types for addmissing.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np


@dataclass(frozen=True)
class InjectionResult:
    """Output of one injection call.
    
    Attributes:
        values: Copy of the input vector with missing markers placed.
        mask: [N] bool array. True = selected for missingness by this call.
        probs: [N] float64 array of validated probabilities.
    """
    values: Any
    mask: np.ndarray
    probs: np.ndarray
    
    def __post_init__(self):
        if self.mask.shape != self.probs.shape:
            raise ValueError(
                f"mask shape {self.mask.shape} != probs shape {self.probs.shape}"
            )
        if self.mask.dtype != np.bool_:
            raise ValueError(f"mask must be bool, got {self.mask.dtype}")
    
    @property
    def n(self) -> int:
        return int(self.mask.shape[0])
    
    @property
    def n_selected(self) -> int:
        """Number of elements selected by the Bernoulli trials."""
        return int(self.mask.sum())
    
    @property
    def rate(self) -> float:
        """Fraction of elements selected (0.0 for an empty vector)."""
        if self.n == 0:
            return 0.0
        return self.n_selected / self.n

"""
addmissing.core.rng

RNG management.

Design Principles:
- Explicit RNG passing wherever the caller wants control
- Reproducible by construction
- One process-level default for callers that seed once per session
"""

from dataclasses import dataclass
from typing import Optional
import torch
import numpy as np


@dataclass
class RNGState:
    """Encapsulates RNG state for reproducibility.
    
    All randomness in addmissing flows through RNGState instances.
    
    Usage:
        rng = RNGState(seed=42)
        mask = rng.bernoulli([0.1, 0.5, 0.9])
        child_rng = rng.spawn()  # Independent stream
    """
    
    seed: int
    _generator: torch.Generator = None
    _spawn_counter: int = 0
    
    def __post_init__(self):
        if self._generator is None:
            self._generator = torch.Generator()
            self._generator.manual_seed(self.seed)
    
    def bernoulli(self, probs) -> np.ndarray:
        """One independent Bernoulli trial per probability.
        
        Args:
            probs: 1-d array-like of success probabilities in [0, 1].
        
        Returns:
            Bool numpy array, True = success.
        """
        p = torch.as_tensor(np.asarray(probs, dtype=np.float64))
        return torch.bernoulli(p, generator=self._generator).bool().numpy()
    
    def spawn(self) -> "RNGState":
        """Create independent child RNG.
        
        Each spawn gets a deterministic but different seed,
        enabling parallel reproducible streams.
        """
        self._spawn_counter += 1
        child_seed = self.seed + self._spawn_counter * 1000003  # Large prime
        return RNGState(seed=child_seed)
    
    def spawn_many(self, n: int) -> list["RNGState"]:
        """Create n independent child RNGs."""
        return [self.spawn() for _ in range(n)]


# Process-level default source, created lazily.
_DEFAULT_RNG: Optional[RNGState] = None


def _entropy_seed() -> int:
    return int(np.random.SeedSequence().entropy % (2 ** 63))


def get_default_rng() -> RNGState:
    """Return the process-level RNG, creating it from OS entropy if unset."""
    global _DEFAULT_RNG
    if _DEFAULT_RNG is None:
        _DEFAULT_RNG = RNGState(seed=_entropy_seed())
    return _DEFAULT_RNG


def set_default_seed(seed: int) -> RNGState:
    """Reseed the process-level RNG.
    
    Call once per session (or per test) to make calls that do not pass
    an explicit `rng` reproducible.
    """
    global _DEFAULT_RNG
    _DEFAULT_RNG = RNGState(seed=seed)
    return _DEFAULT_RNG


def resolve_rng(rng: Optional[RNGState]) -> RNGState:
    """Return `rng` if given, else the process-level default."""
    if rng is None:
        return get_default_rng()
    if not isinstance(rng, RNGState):
        raise TypeError(f"rng must be an RNGState, got {type(rng).__name__}")
    return rng

"""
addmissing.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
"""

import inspect
from typing import Any, Callable
import numpy as np
import torch

from .exceptions import (
    ValidationError,
    MissingYParameter,
    LengthMismatch,
    ProbabilityOutOfRange,
)


def validate_probability(
    value: float,
    name: str = "probability"
) -> None:
    """Validate value is in [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not (0 <= value <= 1):
        raise ValidationError(f"{name} must be in [0, 1], got {value}")


def validate_non_negative_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is an integer >= 0."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"{name} must be a non-negative int, got {value!r}")


def declared_parameters(fun: Callable) -> tuple:
    """Return the names of the parameters `fun` declares.
    
    Raises:
        MissingYParameter: If `fun` is not callable or its signature
            cannot be introspected.
    """
    if not callable(fun):
        raise MissingYParameter(f"fun must be callable, got {type(fun).__name__}")
    try:
        sig = inspect.signature(fun)
    except (TypeError, ValueError) as e:
        raise MissingYParameter(f"cannot inspect signature of {fun!r}: {e}")
    return tuple(sig.parameters)


def validate_fun_signature(fun: Callable, param: str = "y") -> None:
    """Validate `fun` declares a parameter named `param`.
    
    Only declared names count: a bare ``**kwargs`` does not satisfy the
    check, and `fun` is never called.
    
    Raises:
        MissingYParameter: If the parameter is not declared.
    """
    names = declared_parameters(fun)
    sig = inspect.signature(fun)
    if param not in names:
        raise MissingYParameter(
            f"fun must include a '{param}' argument, got parameters {names}"
        )
    kind = sig.parameters[param].kind
    if kind in (inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD):
        raise MissingYParameter(
            f"'{param}' must be passable by keyword, got {kind.description} parameter"
        )


def as_probability_array(probs: Any) -> np.ndarray:
    """Flatten a returned probability container to a 1-d array.
    
    Row or column vectors (e.g. the product of a coefficient vector and
    a model matrix) are flattened. Scalars become 0-d arrays so the
    length check reports them.
    
    Raises:
        LengthMismatch: If `probs` is ragged or a matrix with more than
            one non-singleton dimension.
    """
    if isinstance(probs, torch.Tensor):
        probs = probs.detach().cpu().numpy()
    try:
        arr = np.asarray(probs)
    except (TypeError, ValueError) as e:
        raise LengthMismatch(f"fun returned a ragged sequence: {e}")
    if arr.ndim > 1:
        if sum(d != 1 for d in arr.shape) > 1:
            raise LengthMismatch(
                f"fun returned an array of shape {arr.shape}, expected a vector"
            )
        arr = arr.reshape(-1)
    return arr


def validate_probabilities(probs: Any, n: int) -> np.ndarray:
    """Validate a probability vector against the input length.
    
    Checks run in order: length, then range.
    
    Args:
        probs: Value returned by the missingness function.
        n: Length of the input vector.
    
    Returns:
        [n] float64 array of probabilities.
    
    Raises:
        LengthMismatch: If the flattened length is not `n`.
        ProbabilityOutOfRange: If any value is not a real number in [0, 1].
    """
    arr = as_probability_array(probs)
    
    length = arr.shape[0] if arr.ndim == 1 else None
    if length != n:
        got = "a scalar" if length is None else f"{length} probabilities"
        raise LengthMismatch(f"fun returned {got}, expected {n}")
    
    msg = f"probabilities must be numeric, got dtype {arr.dtype}"
    if arr.dtype.kind in "cUSV":
        raise ProbabilityOutOfRange(msg)
    try:
        values = arr.astype(np.float64)
    except (TypeError, ValueError):
        raise ProbabilityOutOfRange(msg)
    
    bad = ~((values >= 0) & (values <= 1))  # NaN fails both comparisons
    if bad.any():
        idx = int(np.flatnonzero(bad)[0])
        raise ProbabilityOutOfRange(
            f"{int(bad.sum())} probabilities outside [0, 1]; "
            f"first at index {idx}: {values[idx]}"
        )
    return values


def accepts_keyword(fun: Callable, name: str) -> bool:
    """True if `fun` can be called with keyword argument `name`."""
    params = inspect.signature(fun).parameters
    if name in params:
        return params[name].kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.VAR_POSITIONAL,
        )
    return any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values())

"""
addmissing.containers

Container-aware copying and missing-marker placement.

Each supported container keeps its type on the way out:
- list / tuple: None marks missing
- numpy.ndarray: NaN (integer/bool arrays upcast to float64), NaT for
  datetimes/timedeltas, None for object, string and wide-integer arrays
- torch.Tensor: NaN (integer/bool tensors upcast to float64)
- pandas.Series: the Series' own NA via Series.mask (index and name kept)

When nothing is selected the copy keeps the input dtype. The input is
never modified.
"""

from typing import Any, Sized
import numpy as np
import pandas as pd
import torch


def vector_length(y: Any) -> int:
    """Length of a 1-d input vector."""
    if isinstance(y, pd.DataFrame):
        raise TypeError("y must be a single column; pass a Series, not a DataFrame")
    if isinstance(y, (np.ndarray, torch.Tensor)) and y.ndim != 1:
        raise ValueError(f"y must be 1-dimensional, got shape {tuple(y.shape)}")
    if not isinstance(y, Sized):
        raise TypeError(f"y must be a sized sequence, got {type(y).__name__}")
    return len(y)


# Largest magnitude float64 holds exactly
_EXACT_INT_LIMIT = 2 ** 53


def _fits_float64(y: np.ndarray) -> bool:
    if y.size == 0 or y.dtype.kind == "b":
        return True
    if int(y.max()) > _EXACT_INT_LIMIT:
        return False
    return y.dtype.kind == "u" or int(y.min()) >= -_EXACT_INT_LIMIT


def _place_numpy(y: np.ndarray, mask: np.ndarray) -> np.ndarray:
    if not mask.any():
        return y.copy()
    kind = y.dtype.kind
    if kind in "fc":
        out = y.copy()
        out[mask] = np.nan
    elif kind == "M":
        out = y.copy()
        out[mask] = np.datetime64("NaT")
    elif kind == "m":
        out = y.copy()
        out[mask] = np.timedelta64("NaT")
    elif kind in "biu" and _fits_float64(y):
        out = y.astype(np.float64)
        out[mask] = np.nan
    else:
        # objects, strings and wide integers keep exact values as Python objects
        out = y.astype(object)
        out[mask] = None
    return out


def _place_torch(y: torch.Tensor, mask: np.ndarray) -> torch.Tensor:
    if not mask.any():
        return y.clone()
    if y.is_floating_point() or y.is_complex():
        out = y.clone()
    else:
        out = y.to(torch.float64)
    out[torch.from_numpy(mask).to(out.device)] = float("nan")
    return out


def place_missing(y: Any, mask: np.ndarray) -> Any:
    """Return a copy of `y` with marker values where `mask` is True.
    
    Args:
        y: Input vector (list, tuple, numpy array, tensor, Series, or
            any sized sequence).
        mask: [len(y)] bool array.
    
    Returns:
        Fresh container of the same kind as `y`.
    """
    if isinstance(y, pd.Series):
        return y.mask(mask)
    if isinstance(y, np.ndarray):
        return _place_numpy(y, mask)
    if isinstance(y, torch.Tensor):
        return _place_torch(y, mask)
    
    out = [None if m else v for v, m in zip(y, mask)]
    if isinstance(y, tuple):
        return tuple(out)
    return out

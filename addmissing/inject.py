"""
addmissing.inject

Inject missing values into a vector under an MCAR, MAR, or MNAR scheme.

A missingness function maps the input vector (and any extra keyword
arguments) to one probability per element. Each element is then
independently replaced by a missing marker with that probability.

- MCAR: probabilities do not depend on any data (the default).
- MAR: probabilities depend on observed covariates passed as extras,
  i.e. P(y = NA | X).
- MNAR: probabilities depend on y itself or on variables outside the
  working data, i.e. P(y = NA | X, Z, y).

Usage:
    >>> from addmissing import add_missing, set_default_seed
    >>> set_default_seed(1)
    >>> y = list(range(1000))
    >>> ymiss = add_missing(y)                 # ~10% missing
    >>> ymiss = add_missing(y, rate=0.5)       # ~50% missing
    >>> def fun(y, X):
    ...     return [0.2 if g == "female" else 0.0 for g in X["group"]]
    >>> ymiss = add_missing(y, fun=fun, X=X)   # MAR on a covariate table
    >>> ymiss = add_missing(y, fun=lambda y: [0.4 if abs(v) > 1 else 0.0 for v in y])
"""

from typing import Any, Callable, Dict, Optional, Sequence

from addmissing.core.rng import RNGState, resolve_rng
from addmissing.core.types import InjectionResult
from addmissing.core.validation import (
    accepts_keyword,
    validate_fun_signature,
    validate_probabilities,
)
from addmissing.containers import place_missing, vector_length
from addmissing.logging import summarize_injection

MissingnessFn = Callable[..., Sequence[float]]

DEFAULT_RATE = 0.1


def default_fun(y, rate: float = DEFAULT_RATE, **kwargs) -> list:
    """MCAR: every element missing with the same probability `rate`."""
    return [rate] * len(y)


def add_missing_with_mask(
    y: Any,
    fun: MissingnessFn = default_fun,
    *,
    rng: Optional[RNGState] = None,
    **extra,
) -> InjectionResult:
    """Inject missing values and report which elements were selected.

    Same contract as `add_missing`, but returns an InjectionResult
    carrying the output vector, the selection mask and the validated
    probabilities.
    """
    validate_fun_signature(fun, "y")
    n = vector_length(y)

    probs = validate_probabilities(fun(y=y, **extra), n)

    # Draw only after validation so a failed call consumes no entropy
    mask = resolve_rng(rng).bernoulli(probs)

    return InjectionResult(
        values=place_missing(y, mask),
        mask=mask,
        probs=probs,
    )


def add_missing(
    y: Any,
    fun: MissingnessFn = default_fun,
    *,
    rng: Optional[RNGState] = None,
    **extra,
) -> Any:
    """Replace elements of `y` with missing values according to `fun`.

    Args:
        y: Input vector. May already contain missing values; those stay
            missing.
        fun: Missingness function. Must declare a parameter named `y`
            and return one probability in [0, 1] per element of `y`.
            Defaults to MCAR at a 10% rate (override with ``rate=``).
        rng: Random source. Defaults to the process-level RNG, which
            can be seeded with `set_default_seed`.
        **extra: Forwarded to `fun` unchanged.

    Returns:
        A copy of `y` with sampled missing values.

    Raises:
        MissingYParameter: `fun` has no `y` parameter.
        LengthMismatch: `fun` returned the wrong number of probabilities.
        ProbabilityOutOfRange: a probability is outside [0, 1].
    """
    return add_missing_with_mask(y, fun, rng=rng, **extra).values


class MissingnessInjector:
    """Reusable injector bound to a missingness function and RNG.

    Usage:
        injector = MissingnessInjector(fun=my_fun, rng=RNGState(seed=7))
        ymiss = injector.inject(y, X=covariates)
    """

    def __init__(
        self,
        fun: MissingnessFn = default_fun,
        rng: Optional[RNGState] = None,
        log_fn: Optional[Callable[[Dict[str, Any]], None]] = None,
        defaults: Optional[Dict[str, Any]] = None,
    ):
        # Fail at construction rather than on first use
        validate_fun_signature(fun, "y")

        self._fun = fun
        self._rng = rng
        self._log_fn = log_fn
        self._defaults = {
            k: v for k, v in (defaults or {}).items() if accepts_keyword(fun, k)
        }
        self._n_calls = 0

    @classmethod
    def from_config(
        cls,
        config,
        fun: MissingnessFn = default_fun,
        log_fn: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> "MissingnessInjector":
        """Build an injector from an InjectorConfig.

        `config.rate` becomes a default ``rate`` extra argument. It is
        dropped for functions that cannot take ``rate`` as a keyword.
        """
        rng = RNGState(seed=config.seed) if config.seed is not None else None
        return cls(fun=fun, rng=rng, log_fn=log_fn, defaults={"rate": config.rate})

    @property
    def fun(self) -> MissingnessFn:
        return self._fun

    def inject_with_mask(
        self,
        y: Any,
        *,
        rng: Optional[RNGState] = None,
        **extra,
    ) -> InjectionResult:
        """Inject and return the InjectionResult.

        A per-call `rng` takes precedence over the bound one.
        """
        kwargs = {**self._defaults, **extra}
        rng = rng if rng is not None else self._rng
        result = add_missing_with_mask(y, self._fun, rng=rng, **kwargs)

        self._n_calls += 1
        if self._log_fn is not None:
            self._log_fn({"call": self._n_calls, **summarize_injection(result)})

        return result

    def inject(self, y: Any, *, rng: Optional[RNGState] = None, **extra) -> Any:
        """Return a copy of `y` with sampled missing values."""
        return self.inject_with_mask(y, rng=rng, **extra).values

    def __call__(self, y: Any, *, rng: Optional[RNGState] = None, **extra) -> Any:
        return self.inject(y, rng=rng, **extra)

    def __repr__(self) -> str:
        name = getattr(self._fun, "__name__", type(self._fun).__name__)
        return f"{self.__class__.__name__}(fun={name})"

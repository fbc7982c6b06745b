"""
addmissing.logging

Logging utilities for injection runs.
"""

from pathlib import Path
from typing import Callable, Optional, Union

from addmissing.core.types import InjectionResult


def summarize_injection(result: InjectionResult) -> dict:
    """Metrics dict for one injection call."""
    return {
        "n": result.n,
        "n_selected": result.n_selected,
        "rate": result.rate,
        "mean_prob": float(result.probs.mean()) if result.n else 0.0,
    }


def create_logger(
    output_dir: Optional[Union[str, Path]] = None,
    verbose: bool = True,
) -> Callable[[dict], None]:
    """Create logging function for injection metrics.
    
    Args:
        output_dir: Optional directory. When given, every metrics dict is
            appended to ``output_dir/logs/injection.log``.
        verbose: Print a one-line summary per call.
    
    Returns:
        Logging callback function that accepts a metrics dict.
    """
    log_file = Path(output_dir) / "logs" / "injection.log" if output_dir else None
    
    def log(metrics: dict):
        if verbose and "n_selected" in metrics:
            call = metrics.get("call", "?")
            call_str = f"{call:4d}" if isinstance(call, int) else str(call)
            print(f"  Call {call_str} | "
                  f"n: {metrics.get('n', 0)} | "
                  f"missing: {metrics['n_selected']} "
                  f"({metrics.get('rate', 0)*100:.1f}%) | "
                  f"mean_prob: {metrics.get('mean_prob', 0):.3f}")
        
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(log_file, "a") as f:
                f.write(f"{metrics}\n")
    
    return log

"""Experiment configuration and package-wide defaults."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from pathlib import Path

from ._exceptions import ParameterError

# Parameters a sweep may vary. ``include_intercept`` is a switch, not a
# numeric parameter, so it is left out.
SWEEPABLE_PARAMETERS = (
    "n", "beta", "alpha_y", "alpha_x", "sigma_a", "sigma_ex", "sigma_ey",
)

# Default sweep: 21 evenly spaced alpha_y values on [1, 3].
DEFAULT_SWEEP_PARAMETER = "alpha_y"
DEFAULT_SWEEP_START = 1.0
DEFAULT_SWEEP_STOP = 3.0
DEFAULT_SWEEP_NUM = 21
DEFAULT_PLOT_PATH = Path("bias_vs_alpha_y.png")

# Absolute tolerance used by ExperimentResult.diagnose() when comparing
# simulated quantities with their population values.
DEFAULT_TOLERANCE = 0.05


def _as_sample_size(n) -> int:
    try:
        value = float(n)
    except (TypeError, ValueError):
        raise ParameterError(f"n must be an integer, got {n!r}") from None
    if not math.isfinite(value) or not value.is_integer():
        raise ParameterError(f"n must be an integer, got {n!r}")
    return int(value)


@dataclass(frozen=True)
class ExperimentConfig:
    """
    All parameters of one simulated experiment.

    Defaults reproduce the reference scenario: ``n = 10_000``,
    ``beta = -0.5``, ``alpha_y = 1.5``, ``alpha_x = 2.5``, unit standard
    deviations and no intercept.

    Example::

        config = ExperimentConfig(alpha_y=2.0)
        bigger = config.replace(n=1_000_000)
    """

    n: int = 10_000
    beta: float = -0.5
    alpha_y: float = 1.5
    alpha_x: float = 2.5
    sigma_a: float = 1.0
    sigma_ex: float = 1.0
    sigma_ey: float = 1.0
    include_intercept: bool = False

    def replace(self, **changes) -> ExperimentConfig:
        """
        Return a copy with ``changes`` applied.

        ``n`` may be a whole-valued float, as produced by ``numpy.linspace``,
        and is cast to ``int``. A fractional, non-finite or non-numeric ``n``
        raises ``ParameterError``.
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ValueError(
                f"Unknown experiment parameter(s): {sorted(unknown)}. "
                f"Known parameters: {[f.name for f in dataclasses.fields(self)]}"
            )
        if "n" in changes:
            changes["n"] = _as_sample_size(changes["n"])
        return dataclasses.replace(self, **changes)

    @property
    def analytic_bias(self) -> float:
        """Large-sample bias of the naive regression under these parameters."""
        from .experiment import analytic_bias

        return analytic_bias(self.alpha_y, self.alpha_x, self.sigma_a, self.sigma_ex)

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, NamedTuple, Optional

import numpy as np
import pandas as pd

from ._exceptions import ExperimentError, ParameterError
from .config import SWEEPABLE_PARAMETERS, ExperimentConfig
from .experiment import run_comparisons, run_full
from .generators import make_rng
from .generators.vector import RandomState
from .plotting import render_line_chart

logger = logging.getLogger(__name__)

BIAS_METHODS = ("simulated", "analytic")


class SweepFailure(NamedTuple):
    """An iteration that was skipped because its experiment failed."""

    value: float
    stage: str
    message: str


class SweepResult:
    """
    Bias as a function of one experiment parameter.

    ``values`` and ``biases`` are parallel lists in sweep order, holding
    only the iterations that succeeded. Skipped iterations are listed in
    ``failures``.
    """

    def __init__(
        self,
        parameter: str,
        method: str,
        values: list[float],
        biases: list[float],
        failures: list[SweepFailure],
    ) -> None:
        self._parameter = parameter
        self._method = method
        self._values = values
        self._biases = biases
        self._failures = failures

    @property
    def parameter(self) -> str:
        """Name of the parameter that was varied."""
        return self._parameter

    @property
    def method(self) -> str:
        """``"simulated"`` or ``"analytic"``."""
        return self._method

    @property
    def values(self) -> list[float]:
        return list(self._values)

    @property
    def biases(self) -> list[float]:
        return list(self._biases)

    @property
    def failures(self) -> list[SweepFailure]:
        return list(self._failures)

    def to_frame(self) -> pd.DataFrame:
        """The series as a two-column dataframe: the parameter and ``bias``."""
        return pd.DataFrame({self._parameter: self._values, "bias": self._biases})

    def plot(self, output_path, title: Optional[str] = None) -> Path:
        """Render bias against the swept parameter as a line chart."""
        if title is None:
            title = f"Bias vs {self._parameter}"
        return render_line_chart(
            self._values,
            self._biases,
            output_path,
            title=title,
            x_label=self._parameter,
            y_label=f"Bias ({self._method})",
        )

    def summary(self) -> str:
        lines = [
            "",
            f"Bias Sweep over {self._parameter}  ({self._method} bias)",
            "─" * 50,
            f"  {self._parameter:>12}  {'bias':>12}",
        ]
        for value, bias in zip(self._values, self._biases):
            lines.append(f"  {value:>12.4f}  {bias:>+12.4f}")
        if self._failures:
            lines += ["", f"  {len(self._failures)} iteration(s) skipped:"]
            for failure in self._failures:
                lines.append(f"    {self._parameter} = {failure.value:g}: {failure.message}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()


def linspace_values(start: float, stop: float, num: int) -> list[float]:
    """``num`` evenly spaced values from ``start`` to ``stop`` inclusive."""
    return [float(v) for v in np.linspace(start, stop, num)]


def sweep_bias(
    config: ExperimentConfig,
    parameter: str,
    values: Iterable[float],
    method: str = "simulated",
    rng: RandomState = None,
) -> SweepResult:
    """
    Run one experiment per value of ``parameter`` and collect the bias.

    Parameters
    ----------
    config : ExperimentConfig
        Fixed parameters. ``parameter`` is overridden in each iteration.
    parameter : str
        One of ``SWEEPABLE_PARAMETERS``.
    values : iterable of float
        Values to substitute, in order. For ``n`` whole-valued floats are
        cast to int; fractional or non-finite values are skipped with stage
        ``"configuration"``.
    method : str
        ``"simulated"`` (default) records the naive coefficient on x minus
        ``beta``. ``"analytic"`` records the closed-form bias; the
        regressions are still run so that invalid values fail the same way
        under both methods.
    rng : numpy.random.Generator, int or None
        Random source or seed, shared across iterations.

    Raises
    ------
    ValueError
        If ``parameter`` or ``method`` is not recognised. A failing
        iteration is logged and recorded in ``failures`` instead.
    """
    if parameter not in SWEEPABLE_PARAMETERS:
        raise ValueError(
            f"Cannot sweep '{parameter}'. Sweepable parameters: {list(SWEEPABLE_PARAMETERS)}"
        )
    if method not in BIAS_METHODS:
        raise ValueError(f"Unknown bias method '{method}'. Choose from {list(BIAS_METHODS)}")

    rng = make_rng(rng)
    swept: list[float] = []
    biases: list[float] = []
    failures: list[SweepFailure] = []

    for value in values:
        try:
            iteration = config.replace(**{parameter: value})
        except ParameterError as exc:
            logger.warning("Skipping %s = %s: invalid configuration: %s", parameter, value, exc)
            failures.append(SweepFailure(value, "configuration", str(exc)))
            continue

        try:
            full = run_full(iteration, rng)
            comparisons = run_comparisons(full.data, iteration.include_intercept)
        except ExperimentError as exc:
            logger.warning("Skipping %s = %s: %s", parameter, value, exc)
            failures.append(SweepFailure(value, exc.stage, exc.message))
            continue

        if method == "analytic":
            bias = comparisons.analytic_bias
        else:
            bias = comparisons.simulated_bias(iteration.beta)
        swept.append(getattr(iteration, parameter))
        biases.append(bias)

    logger.info(
        "Swept %s over %d value(s), %d skipped", parameter, len(swept) + len(failures), len(failures)
    )
    return SweepResult(parameter, method, swept, biases, failures)

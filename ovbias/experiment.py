from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
import pandas as pd

from ._exceptions import DimensionMismatchError, ExperimentError, FitError, ParameterError
from .config import DEFAULT_TOLERANCE, ExperimentConfig
from .diagnostics import (
    DiagnosticReport,
    _check_bias_convergence,
    _check_leakage_decomposition,
    _check_structural_recovery,
)
from .generators import DependentVariables, generate_dependent, generate_independent, make_rng
from .generators.vector import RandomState
from .regression import FittedModel, fit

logger = logging.getLogger(__name__)


def analytic_bias(alpha_y: float, alpha_x: float, sigma_a: float, sigma_ex: float) -> float:
    """
    Probability limit of the naive coefficient minus the true ``beta``::

        alpha_y * alpha_x * sigma_a**2 / (alpha_x**2 * sigma_a**2 + sigma_ex**2)

    Depends only on the structural parameters, not on ``beta``,
    ``sigma_ey`` or the sample size.
    """
    var_v = sigma_a ** 2
    return (alpha_y * alpha_x * var_v) / (alpha_x ** 2 * var_v + sigma_ex ** 2)


@dataclass(frozen=True)
class GeneratedData:
    """
    Flat, regression-ready view of one simulated dataset.

    Built from ``DependentVariables`` once generation is complete; the
    arrays are the read-only vectors produced by the generators.
    """

    y: np.ndarray
    x: np.ndarray
    v: np.ndarray
    e_y: np.ndarray
    sigma_ex: float
    sigma_a: float
    alpha_x: float
    alpha_y: float
    beta: float

    @classmethod
    def from_dependent(cls, dep_vars: DependentVariables) -> GeneratedData:
        ind_vars = dep_vars.ind_vars
        return cls(
            y=dep_vars.y,
            x=ind_vars.x,
            v=ind_vars.v,
            e_y=dep_vars.e_y,
            sigma_ex=ind_vars.sigma_ex,
            sigma_a=ind_vars.sigma_a,
            alpha_x=ind_vars.alpha_x,
            alpha_y=dep_vars.alpha_y,
            beta=dep_vars.beta,
        )

    @property
    def n(self) -> int:
        return len(self.y)

    @property
    def composite_error(self) -> np.ndarray:
        """
        The error of the naive model: ``alpha_y * v + e_y``.

        Raises ``DimensionMismatchError`` if ``v`` and ``e_y`` do not have
        the same length as ``x``.
        """
        n = len(self.x)
        if len(self.v) != n or len(self.e_y) != n:
            raise DimensionMismatchError(
                f"Cannot combine columns of unequal length: x has {n} rows, "
                f"v has {len(self.v)}, e_y has {len(self.e_y)}."
            )
        return self.alpha_y * self.v + self.e_y

    def to_frame(self) -> pd.DataFrame:
        """The sample vectors as a dataframe with columns y, x, v, e_y."""
        return pd.DataFrame({"y": self.y, "x": self.x, "v": self.v, "e_y": self.e_y})


class FullRegression(NamedTuple):
    """The regression of y on [x, v] and the data it was fitted on."""

    model: FittedModel
    data: GeneratedData


class Comparisons(NamedTuple):
    """
    The naive regression, the composite-error diagnostic and the analytic bias.

    ``naive`` is y on x alone. ``composite`` is ``alpha_y * v + e_y`` on x,
    measuring how much of the confounder leaks into the naive coefficient.
    """

    naive: FittedModel
    composite: FittedModel
    analytic_bias: float

    def simulated_bias(self, beta: float) -> float:
        """Naive coefficient on x minus the true ``beta``."""
        return float(self.naive.coef[0]) - beta


def _stage_failed(stage: str, exc: Exception) -> ExperimentError:
    logger.debug("Experiment stage '%s' failed: %s", stage, exc)
    return ExperimentError(stage, str(exc))


def run_full(config: ExperimentConfig, rng: RandomState = None) -> FullRegression:
    """
    Generate one dataset and regress y on [x, v].

    The design matrix has x as column 0 and v as column 1, so
    ``model.coef`` estimates ``[beta, alpha_y]``.

    Parameters
    ----------
    config : ExperimentConfig
        Sample size, structural parameters and intercept switch.
    rng : numpy.random.Generator, int or None
        Random source or seed.

    Raises
    ------
    ExperimentError
        If generation or fitting fails. ``stage`` names the failing step
        and the original error is chained.
    """
    rng = make_rng(rng)

    logger.debug("Generating independent variables (n=%d)", config.n)
    try:
        ind_vars = generate_independent(
            config.n, config.alpha_x, config.sigma_a, config.sigma_ex, rng
        )
    except ParameterError as exc:
        raise _stage_failed("independent variables", exc) from exc

    logger.debug("Generating dependent variables")
    try:
        dep_vars = generate_dependent(
            config.beta, config.alpha_y, config.sigma_ey, ind_vars, rng
        )
    except ParameterError as exc:
        raise _stage_failed("dependent variables", exc) from exc

    data = GeneratedData.from_dependent(dep_vars)
    design = np.column_stack([data.x, data.v])

    logger.debug("Fitting y ~ x + v")
    try:
        model = fit(design, data.y, config.include_intercept)
    except FitError as exc:
        raise _stage_failed("full regression", exc) from exc

    return FullRegression(model, data)


def run_comparisons(data: GeneratedData, include_intercept: bool) -> Comparisons:
    """
    Fit the naive and composite-error regressions on ``data``.

    Raises
    ------
    ExperimentError
        If either regression fails.
    """
    logger.debug("Fitting y ~ x")
    try:
        naive = fit(data.x, data.y, include_intercept)
    except FitError as exc:
        raise _stage_failed("naive regression", exc) from exc

    logger.debug("Fitting (alpha_y * v + e_y) ~ x")
    try:
        composite = fit(data.x, data.composite_error, include_intercept)
    except FitError as exc:
        raise _stage_failed("composite error regression", exc) from exc

    bias = analytic_bias(data.alpha_y, data.alpha_x, data.sigma_a, data.sigma_ex)
    return Comparisons(naive, composite, bias)


class ExperimentResult:
    """
    The full and naive regressions from one simulated dataset.

    Obtain via ``run_experiment(config)``. Holds the structural estimates,
    the naive estimate that omits the confounder, and the analytic bias, so
    the simulated bias can be compared with its probability limit.
    """

    def __init__(
        self,
        config: ExperimentConfig,
        full: FullRegression,
        comparisons: Comparisons,
    ) -> None:
        self._config = config
        self._full = full
        self._comparisons = comparisons

    @property
    def config(self) -> ExperimentConfig:
        return self._config

    @property
    def data(self) -> GeneratedData:
        return self._full.data

    @property
    def full_model(self) -> FittedModel:
        """Regression of y on [x, v]."""
        return self._full.model

    @property
    def naive_model(self) -> FittedModel:
        """Regression of y on x alone."""
        return self._comparisons.naive

    @property
    def composite_model(self) -> FittedModel:
        """Regression of the composite error ``alpha_y * v + e_y`` on x."""
        return self._comparisons.composite

    @property
    def true_effect(self) -> float:
        return self._config.beta

    @property
    def full_effect(self) -> float:
        """Estimated coefficient on x when v is controlled for."""
        return float(self.full_model.coef[0])

    @property
    def confounder_effect(self) -> float:
        """Estimated coefficient on v in the full regression."""
        return float(self.full_model.coef[1])

    @property
    def naive_effect(self) -> float:
        """Estimated coefficient on x when v is omitted."""
        return float(self.naive_model.coef[0])

    @property
    def leakage(self) -> float:
        """Coefficient of the composite error on x."""
        return float(self.composite_model.coef[0])

    @property
    def simulated_bias(self) -> float:
        return self._comparisons.simulated_bias(self._config.beta)

    @property
    def analytic_bias(self) -> float:
        return self._comparisons.analytic_bias

    def diagnose(self, tolerance: float = DEFAULT_TOLERANCE) -> DiagnosticReport:
        """
        Compare the simulated estimates with their population values.

        Runs three checks:

        - **Structural recovery**: full-regression coefficients within
          ``tolerance`` of ``[beta, alpha_y]``.
        - **Bias convergence**: simulated bias within ``tolerance`` of the
          analytic bias.
        - **Leakage decomposition**: naive coefficient equals ``beta`` plus
          the composite-error coefficient.

        The first two depend on sampling noise and only hold for large n.
        """
        checks = [
            _check_structural_recovery(
                self.full_model.coef, self._config.beta, self._config.alpha_y, tolerance,
            ),
            _check_bias_convergence(self.simulated_bias, self.analytic_bias, tolerance),
            _check_leakage_decomposition(self.naive_effect, self._config.beta, self.leakage),
        ]
        return DiagnosticReport(checks, n=self.data.n)

    def summary(self) -> str:
        c = self._config
        intercept = "with intercept" if c.include_intercept else "no intercept"
        lines = [
            "",
            f"Omitted-Variable Bias: y ~ x  (n = {c.n:,}, {intercept})",
            "─" * 50,
            f"  True beta            : {c.beta:>10.4f}",
            f"  Full estimate        : {self.full_effect:>10.4f}  (controlling for v)",
            f"  Confounder estimate  : {self.confounder_effect:>10.4f}  (true alpha_y = {c.alpha_y:.4f})",
            f"  Naive estimate       : {self.naive_effect:>10.4f}  (v omitted)",
            "",
            f"  Simulated bias       : {self.simulated_bias:>+10.4f}",
            f"  Analytic bias        : {self.analytic_bias:>+10.4f}",
            f"  Error leakage        : {self.leakage:>+10.4f}  (alpha_y * v + e_y on x)",
            "",
            f"  alpha_x = {c.alpha_x:g}, sigma_a = {c.sigma_a:g}, "
            f"sigma_ex = {c.sigma_ex:g}, sigma_ey = {c.sigma_ey:g}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()


def run_experiment(config: ExperimentConfig, rng: RandomState = None) -> ExperimentResult:
    """
    Generate, fit the full regression, then fit the comparisons.

    Example::

        result = run_experiment(ExperimentConfig(n=100_000), rng=42)
        print(result.summary())
        print(result.diagnose().summary())

    Raises
    ------
    ExperimentError
        If any stage fails.
    """
    full = run_full(config, rng)
    comparisons = run_comparisons(full.data, config.include_intercept)
    return ExperimentResult(config, full, comparisons)

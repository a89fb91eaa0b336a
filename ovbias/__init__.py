from .config import ExperimentConfig
from .generators import (
    Normal, Uniform, generate_vector,
    IndependentVariables, DependentVariables,
    generate_independent, generate_dependent,
)
from .regression import FittedModel, fit
from .experiment import (
    GeneratedData, FullRegression, Comparisons, ExperimentResult,
    analytic_bias, run_full, run_comparisons, run_experiment,
)
from .diagnostics import DiagnosticCheck, DiagnosticReport
from .sweep import SweepResult, SweepFailure, sweep_bias, linspace_values
from .plotting import render_line_chart
from ._exceptions import (
    ParameterError, FitError, DimensionMismatchError, SingularDesignError, ExperimentError,
)

__all__ = [
    "ExperimentConfig",
    "Normal", "Uniform", "generate_vector",
    "IndependentVariables", "DependentVariables", "generate_independent", "generate_dependent",
    "FittedModel", "fit",
    "GeneratedData", "FullRegression", "Comparisons", "ExperimentResult",
    "analytic_bias", "run_full", "run_comparisons", "run_experiment",
    "DiagnosticCheck", "DiagnosticReport",
    "SweepResult", "SweepFailure", "sweep_bias", "linspace_values",
    "render_line_chart",
    "ParameterError", "FitError", "DimensionMismatchError", "SingularDesignError", "ExperimentError",
]

from __future__ import annotations

import numpy as np
import statsmodels.api as sm

from ._exceptions import DimensionMismatchError, FitError, SingularDesignError


class FittedModel:
    """
    The result of an OLS fit.

    ``coef`` holds one coefficient per design-matrix column, in column
    order. The intercept, when fitted, is kept separately and never appears
    in ``coef``.
    """

    def __init__(self, result, include_intercept: bool) -> None:
        self._result = result
        self._include_intercept = include_intercept

        params = np.asarray(result.params, dtype=float)
        if include_intercept:
            self._intercept = float(params[0])
            coef = params[1:].copy()
        else:
            self._intercept = 0.0
            coef = params.copy()
        coef.setflags(write=False)
        self._coef = coef

    @property
    def coef(self) -> np.ndarray:
        """Coefficients of the data columns, in the order they were passed."""
        return self._coef

    @property
    def intercept(self) -> float:
        """Fitted intercept, or ``0.0`` when no intercept was requested."""
        return self._intercept

    @property
    def include_intercept(self) -> bool:
        return self._include_intercept

    @property
    def n_obs(self) -> int:
        """Number of rows the model was fitted on."""
        return int(self._result.nobs)

    @property
    def statsmodels_result(self):
        """The underlying statsmodels result, for full diagnostics."""
        return self._result

    def __repr__(self) -> str:
        coef = ", ".join(f"{c:.4f}" for c in self._coef)
        intercept = f", intercept={self._intercept:.4f}" if self._include_intercept else ""
        return f"FittedModel(coef=[{coef}]{intercept}, n_obs={self.n_obs})"


def _as_design(X) -> np.ndarray:
    design = np.asarray(X, dtype=float)
    if design.ndim == 1:
        design = design.reshape(-1, 1)
    if design.ndim != 2:
        raise DimensionMismatchError(
            f"Design matrix must be 2-dimensional, got shape {design.shape}."
        )
    return design


def _as_response(y) -> np.ndarray:
    response = np.asarray(y, dtype=float)
    if response.ndim == 2 and response.shape[1] == 1:
        response = response[:, 0]
    if response.ndim != 1:
        raise DimensionMismatchError(
            f"Response must be a single column, got shape {response.shape}."
        )
    return response


def fit(X, y, include_intercept: bool) -> FittedModel:
    """
    Fit ordinary least squares of ``y`` on the columns of ``X``.

    Parameters
    ----------
    X : array-like
        Design matrix of shape ``(n, k)``. A 1-D array is treated as a
        single column. Columns are passed to the solver in the given order.
    y : array-like
        Response of shape ``(n,)`` or ``(n, 1)``.
    include_intercept : bool
        Whether to add a constant column. The intercept is reported as
        ``FittedModel.intercept`` and is not counted in ``coef``.

    Raises
    ------
    DimensionMismatchError
        If ``X`` and ``y`` disagree on the number of rows, or either cannot
        be read as a matrix / single column.
    SingularDesignError
        If there are no rows, the data contain non-finite values, or the
        design matrix does not have full column rank (collinear columns,
        fewer rows than columns).
    """
    design = _as_design(X)
    response = _as_response(y)

    if design.shape[0] != response.shape[0]:
        raise DimensionMismatchError(
            f"Design matrix has {design.shape[0]} rows but response has "
            f"{response.shape[0]}."
        )
    if design.shape[0] == 0:
        raise SingularDesignError("Cannot fit a regression on zero observations.")
    if not (np.isfinite(design).all() and np.isfinite(response).all()):
        raise SingularDesignError("Design matrix and response must be finite.")

    if include_intercept:
        design = sm.add_constant(design, prepend=True, has_constant="add")

    n_rows, n_cols = design.shape
    # statsmodels solves through a pseudo-inverse and would return
    # coefficients for a singular design without complaint.
    rank = np.linalg.matrix_rank(design)
    if rank < n_cols:
        raise SingularDesignError(
            f"Design matrix is rank deficient (rank {rank} < {n_cols} columns, "
            f"{n_rows} rows). Columns may be collinear or there are too few "
            f"observations."
        )

    try:
        result = sm.OLS(response, design).fit()
    except (np.linalg.LinAlgError, ValueError) as exc:
        raise FitError(f"Failed to fit linear regression: {exc}") from exc

    return FittedModel(result, include_intercept)

import numpy as np
import pytest

from ovbias import fit
from ovbias._exceptions import DimensionMismatchError, FitError, SingularDesignError


RNG = np.random.default_rng(42)
N = 200


def make_design():
    return np.column_stack([RNG.normal(size=N), RNG.normal(size=N)])


class TestFit:
    def test_recovers_exact_coefficients(self):
        X = make_design()
        y = 2.0 * X[:, 0] - 3.0 * X[:, 1]
        model = fit(X, y, include_intercept=False)
        assert np.allclose(model.coef, [2.0, -3.0])
        assert model.intercept == 0.0
        assert model.n_obs == N

    def test_coefficient_order_follows_columns(self):
        X = make_design()
        y = 2.0 * X[:, 0] - 3.0 * X[:, 1]
        model = fit(X[:, ::-1], y, include_intercept=False)
        assert np.allclose(model.coef, [-3.0, 2.0])

    def test_intercept_excluded_from_coef(self):
        X = make_design()
        y = 4.0 + 2.0 * X[:, 0] - 3.0 * X[:, 1]
        model = fit(X, y, include_intercept=True)
        assert model.coef.shape == (2,)
        assert np.allclose(model.coef, [2.0, -3.0])
        assert model.intercept == pytest.approx(4.0)

    def test_one_dimensional_design_is_single_column(self):
        x = RNG.normal(size=N)
        model = fit(x, 1.5 * x, include_intercept=False)
        assert model.coef.shape == (1,)
        assert model.coef[0] == pytest.approx(1.5)

    def test_column_response_accepted(self):
        X = make_design()
        y = (X @ np.array([1.0, 1.0])).reshape(-1, 1)
        model = fit(X, y, include_intercept=False)
        assert np.allclose(model.coef, [1.0, 1.0])

    def test_coef_is_read_only(self):
        X = make_design()
        model = fit(X, X[:, 0], include_intercept=False)
        with pytest.raises(ValueError):
            model.coef[0] = 0.0

    def test_statsmodels_result_exposed(self):
        X = make_design()
        model = fit(X, X[:, 0] + RNG.normal(size=N), include_intercept=True)
        assert model.statsmodels_result is not None
        assert len(model.statsmodels_result.params) == 3


class TestFitErrors:
    def test_row_mismatch_raises(self):
        with pytest.raises(DimensionMismatchError, match="rows"):
            fit(make_design(), RNG.normal(size=N - 1), include_intercept=False)

    def test_multi_column_response_raises(self):
        with pytest.raises(DimensionMismatchError, match="single column"):
            fit(make_design(), make_design(), include_intercept=False)

    def test_dimension_mismatch_is_a_fit_error(self):
        with pytest.raises(FitError):
            fit(make_design(), RNG.normal(size=3), include_intercept=False)

    def test_collinear_columns_raise(self):
        x = RNG.normal(size=N)
        X = np.column_stack([x, 2.0 * x])
        with pytest.raises(SingularDesignError, match="rank deficient"):
            fit(X, x, include_intercept=False)

    def test_constant_column_with_intercept_raises(self):
        X = np.column_stack([RNG.normal(size=N), np.ones(N)])
        with pytest.raises(SingularDesignError):
            fit(X, RNG.normal(size=N), include_intercept=True)

    def test_fewer_rows_than_columns_raises(self):
        X = RNG.normal(size=(1, 2))
        with pytest.raises(SingularDesignError):
            fit(X, np.array([1.0]), include_intercept=False)

    def test_zero_rows_raise(self):
        with pytest.raises(SingularDesignError, match="zero observations"):
            fit(np.empty((0, 2)), np.empty(0), include_intercept=False)

    def test_non_finite_values_raise(self):
        X = make_design()
        y = X[:, 0].copy()
        y[3] = np.nan
        with pytest.raises(SingularDesignError, match="finite"):
            fit(X, y, include_intercept=False)

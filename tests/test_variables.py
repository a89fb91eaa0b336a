import numpy as np
import pytest

from ovbias import generate_dependent, generate_independent
from ovbias._exceptions import ParameterError


RNG = np.random.default_rng(42)


def valid_input():
    """n, alpha_x, sigma_a, sigma_ex"""
    return 10, 2.5, 1.0, 0.5


def make_ind_vars():
    return generate_independent(*valid_input(), rng=RNG)


class TestGenerateIndependent:
    def test_valid_input_succeeds(self):
        ind = make_ind_vars()
        assert ind.x.shape == ind.v.shape == ind.e_x.shape == (10,)
        assert len(ind) == 10

    def test_negative_sigma_a_raises(self):
        n, alpha_x, _, sigma_ex = valid_input()
        with pytest.raises(ParameterError, match="sigma_a must be positive"):
            generate_independent(n, alpha_x, -1.0, sigma_ex, rng=RNG)

    def test_zero_sigma_a_raises(self):
        n, alpha_x, _, sigma_ex = valid_input()
        with pytest.raises(ParameterError, match="sigma_a must be positive"):
            generate_independent(n, alpha_x, 0.0, sigma_ex, rng=RNG)

    def test_negative_sigma_ex_raises(self):
        n, alpha_x, sigma_a, _ = valid_input()
        with pytest.raises(ParameterError, match="sigma_ex must be positive"):
            generate_independent(n, alpha_x, sigma_a, -0.5, rng=RNG)

    def test_zero_sigma_ex_raises(self):
        n, alpha_x, sigma_a, _ = valid_input()
        with pytest.raises(ParameterError, match="sigma_ex must be positive"):
            generate_independent(n, alpha_x, sigma_a, 0.0, rng=RNG)

    def test_x_is_built_from_v_and_shock(self):
        ind = make_ind_vars()
        assert np.array_equal(ind.x, ind.alpha_x * ind.v + ind.e_x)

    def test_parameters_are_recorded(self):
        ind = make_ind_vars()
        assert (ind.alpha_x, ind.sigma_a, ind.sigma_ex) == (2.5, 1.0, 0.5)

    def test_vectors_are_read_only(self):
        ind = make_ind_vars()
        with pytest.raises(ValueError):
            ind.v[0] = 0.0

    def test_zero_observations(self):
        ind = generate_independent(0, 2.5, 1.0, 0.5, rng=RNG)
        assert ind.x.shape == ind.v.shape == (0,)


class TestGenerateDependent:
    def test_y_is_built_from_x_v_and_shock(self):
        dep = generate_dependent(-0.5, 1.5, 1.0, make_ind_vars(), rng=RNG)
        ind = dep.ind_vars
        assert np.array_equal(dep.y, -0.5 * ind.x + 1.5 * ind.v + dep.e_y)

    def test_lengths_match(self):
        dep = generate_dependent(-0.5, 1.5, 1.0, make_ind_vars(), rng=RNG)
        assert dep.y.shape == dep.e_y.shape == dep.ind_vars.x.shape == dep.ind_vars.v.shape

    def test_negative_sigma_ey_raises(self):
        with pytest.raises(ParameterError, match="sigma_ey must be positive"):
            generate_dependent(-0.5, 1.5, -1.0, make_ind_vars(), rng=RNG)

    def test_zero_sigma_ey_raises(self):
        with pytest.raises(ParameterError, match="sigma_ey must be positive"):
            generate_dependent(-0.5, 1.5, 0.0, make_ind_vars(), rng=RNG)

    def test_independent_variables_embedded_unchanged(self):
        ind = make_ind_vars()
        v_before = ind.v.copy()
        dep = generate_dependent(-0.5, 1.5, 1.0, ind, rng=RNG)
        assert dep.ind_vars is ind
        assert np.array_equal(dep.ind_vars.v, v_before)

    def test_parameters_are_recorded(self):
        dep = generate_dependent(-0.5, 1.5, 2.0, make_ind_vars(), rng=RNG)
        assert (dep.beta, dep.alpha_y, dep.sigma_ey) == (-0.5, 1.5, 2.0)

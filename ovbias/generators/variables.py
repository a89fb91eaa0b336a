"""
Generators for the structural model behind every experiment::

    v   ~ N(0, sigma_a)                   latent confounder
    x   = alpha_x * v + e_x               e_x ~ N(0, sigma_ex)
    y   = beta * x + alpha_y * v + e_y    e_y ~ N(0, sigma_ey)

Because v drives both x and y, x is endogenous whenever ``alpha_y != 0``
and a regression of y on x alone is biased.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .._exceptions import ParameterError
from .vector import Normal, RandomState, generate_vector, make_rng


def _frozen(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


@dataclass(frozen=True)
class IndependentVariables:
    """The latent confounder ``v``, the shock ``e_x`` and the regressor ``x``."""

    v: np.ndarray
    e_x: np.ndarray
    x: np.ndarray
    alpha_x: float
    sigma_a: float
    sigma_ex: float

    def __len__(self) -> int:
        return len(self.x)


@dataclass(frozen=True)
class DependentVariables:
    """
    The outcome ``y`` together with the independent variables it was built from.

    ``ind_vars`` is embedded rather than referenced from outside, so later
    stages read v and x through this object only.
    """

    y: np.ndarray
    e_y: np.ndarray
    alpha_y: float
    beta: float
    sigma_ey: float
    ind_vars: IndependentVariables

    def __len__(self) -> int:
        return len(self.y)


def generate_independent(
    n: int,
    alpha_x: float,
    sigma_a: float,
    sigma_ex: float,
    rng: RandomState = None,
) -> IndependentVariables:
    """
    Draw the confounder and build the observed regressor.

    Parameters
    ----------
    n : int
        Number of observations.
    alpha_x : float
        Effect of the confounder ``v`` on ``x``.
    sigma_a : float
        Standard deviation of ``v``. Must be positive.
    sigma_ex : float
        Standard deviation of the shock ``e_x``. Must be positive.
    rng : numpy.random.Generator, int or None
        Random source or seed.

    Raises
    ------
    ParameterError
        If ``sigma_a`` or ``sigma_ex`` is not positive. Nothing is drawn.
    """
    if not sigma_a > 0:
        raise ParameterError("sigma_a must be positive")
    if not sigma_ex > 0:
        raise ParameterError("sigma_ex must be positive")

    rng = make_rng(rng)
    v = generate_vector(n, Normal(0.0, sigma_a), rng)
    e_x = generate_vector(n, Normal(0.0, sigma_ex), rng)
    x = alpha_x * v + e_x

    return IndependentVariables(
        v=_frozen(v),
        e_x=_frozen(e_x),
        x=_frozen(x),
        alpha_x=alpha_x,
        sigma_a=sigma_a,
        sigma_ex=sigma_ex,
    )


def generate_dependent(
    beta: float,
    alpha_y: float,
    sigma_ey: float,
    ind_vars: IndependentVariables,
    rng: RandomState = None,
) -> DependentVariables:
    """
    Build the outcome ``y = beta * x + alpha_y * v + e_y``.

    ``ind_vars`` is taken over by the returned object and left unmodified.

    Raises
    ------
    ParameterError
        If ``sigma_ey`` is not positive.
    """
    if not sigma_ey > 0:
        raise ParameterError("sigma_ey must be positive")

    n = len(ind_vars.x)
    e_y = generate_vector(n, Normal(0.0, sigma_ey), rng)
    y = beta * ind_vars.x + alpha_y * ind_vars.v + e_y

    return DependentVariables(
        y=_frozen(y),
        e_y=_frozen(e_y),
        alpha_y=alpha_y,
        beta=beta,
        sigma_ey=sigma_ey,
        ind_vars=ind_vars,
    )

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Protocol, Union

import numpy as np

from .._exceptions import ParameterError

RandomState = Union[np.random.Generator, int, None]


def make_rng(rng: RandomState = None) -> np.random.Generator:
    """
    Return a numpy ``Generator`` for ``rng``.

    Accepts an existing generator (returned unchanged, so draws continue
    from its current state), an integer seed, or ``None`` for fresh OS
    entropy.
    """
    return np.random.default_rng(rng)


class Distribution(Protocol):
    """Anything that can draw ``n`` independent scalar samples."""

    def sample(self, n: int, rng: np.random.Generator) -> np.ndarray:
        ...


@dataclass(frozen=True)
class Normal:
    """Normal distribution with the given mean and standard deviation."""

    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self) -> None:
        if not self.std > 0:
            raise ParameterError("std must be positive")

    def sample(self, n: int, rng: np.random.Generator) -> np.ndarray:
        return rng.normal(loc=self.mean, scale=self.std, size=n)


@dataclass(frozen=True)
class Uniform:
    """Continuous uniform distribution on ``[low, high)``."""

    low: float = 0.0
    high: float = 1.0

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise ParameterError("low must be less than high")

    def sample(self, n: int, rng: np.random.Generator) -> np.ndarray:
        return rng.uniform(low=self.low, high=self.high, size=n)


def generate_vector(
    n: int,
    distribution: Distribution,
    rng: RandomState = None,
) -> np.ndarray:
    """
    Draw ``n`` independent samples from ``distribution``.

    Parameters
    ----------
    n : int
        Number of samples. ``n = 0`` is allowed and yields an empty vector.
    distribution : Distribution
        Any object with a ``sample(n, rng)`` method, e.g. ``Normal`` or
        ``Uniform``.
    rng : numpy.random.Generator, int or None
        Random source or seed.

    Returns
    -------
    numpy.ndarray
        Float vector of shape ``(n,)``.

    Raises
    ------
    ParameterError
        If ``n`` is negative or not an integer.
    """
    try:
        n = operator.index(n)
    except TypeError:
        raise ParameterError(f"n must be an integer, got {n!r}") from None
    if n < 0:
        raise ParameterError(f"n must be non-negative, got {n}")

    samples = np.asarray(distribution.sample(n, make_rng(rng)), dtype=float)
    return samples.reshape(n)

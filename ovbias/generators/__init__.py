from .vector import Normal, Uniform, generate_vector, make_rng
from .variables import (
    IndependentVariables,
    DependentVariables,
    generate_independent,
    generate_dependent,
)

__all__ = [
    "Normal", "Uniform", "generate_vector", "make_rng",
    "IndependentVariables", "DependentVariables",
    "generate_independent", "generate_dependent",
]

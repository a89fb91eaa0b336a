"""
Bias grows linearly with the confounder's effect on the outcome.

Sweeps alpha_y over 21 values in [1, 3], keeps every other parameter at
the reference scenario, and writes the chart to bias_vs_alpha_y.png.
"""

import logging

from ovbias import ExperimentConfig, linspace_values, sweep_bias

logging.basicConfig(level=logging.INFO)

result = sweep_bias(
    ExperimentConfig(),
    parameter="alpha_y",
    values=linspace_values(1.0, 3.0, 21),
    rng=0,
)

print(result.summary())
result.plot("bias_vs_alpha_y.png", title="Bias vs alpha_y")

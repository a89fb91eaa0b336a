"""
One simulated dataset: full regression vs naive regression.

Structural model:
    v ~ N(0, 1)                         latent confounder, never observed
    x = 2.5*v + e_x                     e_x ~ N(0, 1)
    y = -0.5*x + 1.5*v + e_y            e_y ~ N(0, 1)

Controlling for v recovers beta = -0.5. Omitting it biases the estimate
on x by roughly 1.5*2.5 / (2.5**2 + 1) ≈ 0.517.
"""

from ovbias import ExperimentConfig, run_experiment

config = ExperimentConfig(n=100_000)
result = run_experiment(config, rng=0)

print(result.summary())
print(result.diagnose().summary())

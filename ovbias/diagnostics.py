from __future__ import annotations

import numpy as np


class DiagnosticCheck:
    """Result of a single diagnostic check."""

    def __init__(self, name: str, passed: bool, detail: str) -> None:
        self.name = name
        self.passed = passed
        self.detail = detail

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"DiagnosticCheck({status!r}, {self.name!r})"


class DiagnosticReport:
    """
    Results of diagnostic checks run against one simulated experiment.

    Obtain via ``ExperimentResult.diagnose()``.

    Example::

        result = run_experiment(ExperimentConfig(n=100_000), rng=0)
        print(result.diagnose().summary())
    """

    def __init__(self, checks: list[DiagnosticCheck], n: int) -> None:
        self._checks = checks
        self._n = n

    @property
    def checks(self) -> list[DiagnosticCheck]:
        """All checks, in the order they were run."""
        return list(self._checks)

    @property
    def passed(self) -> bool:
        """``True`` if every check passed."""
        return all(c.passed for c in self._checks)

    @property
    def failed_checks(self) -> list[DiagnosticCheck]:
        """Only the checks that did not pass."""
        return [c for c in self._checks if not c.passed]

    def summary(self) -> str:
        """Formatted report showing each check result and the overall verdict."""
        lines = [
            "",
            f"Diagnostic Report (n = {self._n:,})",
            "─" * 50,
        ]
        for check in self._checks:
            status = "PASS" if check.passed else "FAIL"
            lines.append(f"  [{status}]  {check.name}: {check.detail}")
        lines.append("")
        if self.passed:
            lines.append("  All checks passed.")
        else:
            n = len(self.failed_checks)
            lines.append(f"  {n} check(s) failed. Small samples deviate from the")
            lines.append("  population values; try a larger n.")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()


def _check_structural_recovery(
    coef: np.ndarray,
    beta: float,
    alpha_y: float,
    tolerance: float,
) -> DiagnosticCheck:
    """
    The full regression of y on [x, v] should recover [beta, alpha_y].
    """
    error = float(np.max(np.abs(coef - np.array([beta, alpha_y]))))
    passed = error <= tolerance
    detail = (
        f"coefficients [{coef[0]:.4f}, {coef[1]:.4f}] vs true "
        f"[{beta:.4f}, {alpha_y:.4f}]  (max error {error:.4f}, tol {tolerance:g})"
    )
    return DiagnosticCheck(name="Structural recovery", passed=passed, detail=detail)


def _check_bias_convergence(
    simulated_bias: float,
    analytic_bias: float,
    tolerance: float,
) -> DiagnosticCheck:
    """
    The simulated bias of the naive regression should sit near its
    probability limit.
    """
    gap = abs(simulated_bias - analytic_bias)
    passed = gap <= tolerance
    detail = (
        f"simulated {simulated_bias:+.4f} vs analytic {analytic_bias:+.4f}  "
        f"(gap {gap:.4f}, tol {tolerance:g})"
    )
    return DiagnosticCheck(name="Bias convergence", passed=passed, detail=detail)


def _check_leakage_decomposition(
    naive_effect: float,
    beta: float,
    leakage: float,
) -> DiagnosticCheck:
    """
    Since y = beta * x + (alpha_y * v + e_y), OLS is linear in the response
    and the naive coefficient equals beta plus the coefficient of the
    composite error on x, up to rounding.
    """
    gap = abs(naive_effect - (beta + leakage))
    passed = bool(np.isclose(naive_effect, beta + leakage, rtol=1e-8, atol=1e-10))
    detail = (
        f"naive {naive_effect:.6f} = beta {beta:.6f} + leakage {leakage:.6f}  "
        f"(residual {gap:.2e})"
    )
    return DiagnosticCheck(name="Leakage decomposition", passed=passed, detail=detail)

"""
Command-line entry point.

Usage::

    python -m ovbias report --n 100000 --seed 0
    python -m ovbias sweep --parameter alpha_y --start 1 --stop 3 --num 21 \
        --output bias_vs_alpha_y.png
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from ._exceptions import ExperimentError
from .config import (
    DEFAULT_PLOT_PATH,
    DEFAULT_SWEEP_NUM,
    DEFAULT_SWEEP_PARAMETER,
    DEFAULT_SWEEP_START,
    DEFAULT_SWEEP_STOP,
    DEFAULT_TOLERANCE,
    SWEEPABLE_PARAMETERS,
    ExperimentConfig,
)
from .experiment import run_experiment
from .sweep import BIAS_METHODS, linspace_values, sweep_bias

COMMANDS = ("report", "sweep")


def build_parser() -> argparse.ArgumentParser:
    defaults = ExperimentConfig()
    parser = argparse.ArgumentParser(
        prog="ovbias",
        description="Monte-Carlo experiments on omitted-variable bias in OLS.",
    )
    parser.add_argument(
        "command", nargs="?",
        help="report: one experiment with diagnostics; sweep: bias across a parameter range",
    )

    model = parser.add_argument_group("experiment parameters")
    model.add_argument("--n", type=int, default=defaults.n, help="sample size")
    model.add_argument("--beta", type=float, default=defaults.beta)
    model.add_argument("--alpha-y", type=float, default=defaults.alpha_y)
    model.add_argument("--alpha-x", type=float, default=defaults.alpha_x)
    model.add_argument("--sigma-a", type=float, default=defaults.sigma_a)
    model.add_argument("--sigma-ex", type=float, default=defaults.sigma_ex)
    model.add_argument("--sigma-ey", type=float, default=defaults.sigma_ey)
    model.add_argument("--intercept", action="store_true", help="fit an intercept")

    sweep = parser.add_argument_group("sweep options")
    sweep.add_argument("--parameter", choices=SWEEPABLE_PARAMETERS, default=DEFAULT_SWEEP_PARAMETER)
    sweep.add_argument("--start", type=float, default=DEFAULT_SWEEP_START)
    sweep.add_argument("--stop", type=float, default=DEFAULT_SWEEP_STOP)
    sweep.add_argument("--num", type=int, default=DEFAULT_SWEEP_NUM)
    sweep.add_argument("--method", choices=BIAS_METHODS, default="simulated")
    sweep.add_argument("--output", default=str(DEFAULT_PLOT_PATH), help="chart file")

    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser


def _config_from_args(args: argparse.Namespace) -> ExperimentConfig:
    return ExperimentConfig(
        n=args.n,
        beta=args.beta,
        alpha_y=args.alpha_y,
        alpha_x=args.alpha_x,
        sigma_a=args.sigma_a,
        sigma_ex=args.sigma_ex,
        sigma_ey=args.sigma_ey,
        include_intercept=args.intercept,
    )


def _report(args: argparse.Namespace) -> int:
    result = run_experiment(_config_from_args(args), rng=args.seed)
    print(result.summary())
    print(result.diagnose(args.tolerance).summary())
    return 0


def _sweep(args: argparse.Namespace) -> int:
    values = linspace_values(args.start, args.stop, args.num)
    result = sweep_bias(
        _config_from_args(args), args.parameter, values, method=args.method, rng=args.seed,
    )
    print(result.summary())
    if not result.values:
        print("No successful iterations; nothing to plot.", file=sys.stderr)
        return 1
    path = result.plot(args.output)
    print(f"Chart written to {path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_usage()
        print(f"Commands: {', '.join(COMMANDS)}")
        return 0

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "report":
            return _report(args)
        return _sweep(args)
    except ExperimentError as exc:
        print(f"Experiment failed: {exc}", file=sys.stderr)
        return 1

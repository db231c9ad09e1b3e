#!/usr/bin/env python3
"""Fit x**3 + x**2 + x with a leaky-ReLU network and print the comparison table."""
from __future__ import annotations

import argparse
import sys
import time

from reluapprox import NetworkConfig, ReluNetwork, TrainingConfig
from reluapprox.data import comparison_table, cubic, training_samples, validation_samples


DEFAULTS = TrainingConfig()


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--units", type=int, default=20, help="number of hidden units")
    p.add_argument("--epochs", type=int, default=DEFAULTS.epochs)
    p.add_argument("--batch-size", type=int, default=DEFAULTS.batch_size)
    p.add_argument("--learning-rate", type=float, default=DEFAULTS.learning_rate)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument(
        "--distribution",
        choices=("normal", "uniform"),
        default="normal",
        help="initial parameter distribution",
    )
    p.add_argument("--points", type=int, default=1000, help="rows in the output table")
    p.add_argument("--plot", type=str, default=None, help="save a comparison plot to this path")
    p.add_argument("--progress", action="store_true", help="show a progress bar")
    p.add_argument("--quiet", action="store_true", help="suppress epoch reports")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    train_data = training_samples(cubic)
    val_data = validation_samples(cubic)
    config = TrainingConfig(
        epochs=args.epochs,
        batch_size=args.batch_size,
        learning_rate=args.learning_rate,
    )

    start = time.perf_counter()
    network_config = NetworkConfig(unit_count=args.units, seed=args.seed, distribution=args.distribution)
    network = ReluNetwork.from_config(network_config)
    network.fit(train_data, config, verbose=not args.quiet, progress=args.progress)
    print(f"Training duration: {time.perf_counter() - start:.2f}s", file=sys.stderr)
    print(f"Validation error: {network.cost(val_data)}", file=sys.stderr)

    rows = comparison_table(network, cubic, points=args.points)
    for x, target, approx in rows:
        print(f"{x}\t{target}\t{approx}")

    if args.plot:
        from reluapprox.plotting import plot_approximation

        plot_approximation(rows, args.plot, title=f"{args.units} units, {args.epochs} epochs")
        print(f"Saved plot to {args.plot}", file=sys.stderr)


if __name__ == "__main__":
    main()

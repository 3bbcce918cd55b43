#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from keysmith.core.random_source import assert_csprng_ready, next_below


def chi_square_statistic(counts: list[int], samples: int) -> float:
    expected = samples / len(counts)
    return sum((observed - expected) ** 2 / expected for observed in counts)


def chi_square_critical(bins: int, z: float) -> float:
    # Wilson-Hilferty approximation of the upper chi-square quantile.
    dof = bins - 1
    term = 1.0 - 2.0 / (9.0 * dof) + z * math.sqrt(2.0 / (9.0 * dof))
    return dof * term ** 3


def _run_probe(*, samples: int, bins: int, z: float) -> tuple[float, float, int, int]:
    assert_csprng_ready()

    if samples <= 0:
        raise ValueError("samples must be > 0")
    if bins < 2:
        raise ValueError("bins must be >= 2")
    if samples < bins * 5:
        raise ValueError("samples must be at least 5 per bin for a meaningful chi-square test")
    if z <= 0.0:
        raise ValueError("z must be > 0")

    counts = [0] * bins
    for _ in range(samples):
        value = next_below(bins)
        if not (0 <= value < bins):
            raise RuntimeError(f"RNG health probe failed: draw {value} outside [0, {bins})")
        counts[value] += 1

    statistic = chi_square_statistic(counts, samples)
    critical = chi_square_critical(bins, z)
    if statistic > critical:
        raise RuntimeError(
            f"RNG health probe failed: chi-square {statistic:.3f} exceeds critical value {critical:.3f}"
        )
    return statistic, critical, min(counts), max(counts)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Uniformity probe for next_below over the OS CSPRNG. "
            "This is a sanity check, not a cryptographic certification."
        )
    )
    parser.add_argument("--samples", type=int, default=100_000, help="Number of draws (default: 100000).")
    parser.add_argument(
        "--bins",
        type=int,
        default=37,
        help="Bound passed to next_below; a non power of two exercises rejection (default: 37).",
    )
    parser.add_argument(
        "--z",
        type=float,
        default=4.0,
        help="Standard-normal quantile for the critical value; larger is more tolerant (default: 4.0).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        statistic, critical, lowest, highest = _run_probe(samples=args.samples, bins=args.bins, z=args.z)
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"[rng] probe failed: {exc}", file=sys.stderr)
        return 1

    print(f"[rng] samples={args.samples} bins={args.bins}")
    print(f"[rng] chi_square={statistic:.3f} (critical={critical:.3f})")
    print(f"[rng] bin_counts min={lowest} max={highest}")
    print("[rng] probe ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

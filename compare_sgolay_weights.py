"""Quick comparison of Savitzky-Golay weights in SgolayKit.

Samples a few functions on a uniform grid, applies centred and off-centre
weights, and prints the estimates next to the analytic values.

Run with:
    python compare_sgolay_weights.py
"""

from __future__ import annotations

from typing import Any

import numpy as np

from sgolaykit import SavGolConfig


def rel_err(a: float, b: float) -> float:
    """Relative error with a safe denominator."""
    d = max(1.0, abs(a), abs(b))
    return abs(a - b) / d


rng = np.random.default_rng(12345)


def noisy_sin(x: np.ndarray, noise_level: float = 1e-3) -> np.ndarray:
    return np.sin(x) + noise_level * rng.normal(size=np.shape(x))


def main() -> None:
    """Main comparison routine."""
    # name -> (f, analytic derivatives by order)
    cases: list[dict[str, Any]] = [
        {
            "name": "sin",
            "f": np.sin,
            "d": [np.sin, np.cos, lambda x: -np.sin(x)],
        },
        {
            "name": "exp",
            "f": np.exp,
            "d": [np.exp, np.exp, np.exp],
        },
        {
            "name": "gaussian * sin(10x)",
            "f": lambda x: np.exp(-x ** 2) * np.sin(10.0 * x),
            "d": [
                lambda x: np.exp(-x ** 2) * np.sin(10.0 * x),
                lambda x: np.exp(-x ** 2) * (
                    10.0 * np.cos(10.0 * x) - 2.0 * x * np.sin(10.0 * x)
                ),
                None,
            ],
        },
        {
            "name": "noisy sin (σ=1e-3)",
            "f": noisy_sin,
            "d": [np.sin, np.cos, lambda x: -np.sin(x)],
        },
    ]

    # (half_width, poly_order) pairs
    windows = [(2, 2), (3, 3), (5, 4), (8, 4)]
    spacing = 0.02
    x0 = 0.4

    line = "-" * 80

    for case in cases:
        print(line)
        print(f"Function: {case['name']!r}, x0 = {x0}, spacing = {spacing}")
        print(line)
        print("  {:>6s} {:>3s} {:>3s} {:>4s}  {:>18s}  {:>18s}".format(
            "window", "n", "s", "t", "estimate", "rel_err"))
        print("  " + "-" * 60)

        for m, n in windows:
            for s, truth_fn in enumerate(case["d"]):
                if truth_fn is None or s > n:
                    continue
                for t in (0, -m):
                    cfg = SavGolConfig(m, n, deriv_order=s, eval_offset=t)
                    # window centre sits t samples left of the evaluation point
                    centre = x0 - t * spacing
                    x = centre + cfg.offsets() * spacing
                    est = float(np.dot(cfg.weights(), case["f"](x))) / spacing ** s
                    truth = float(truth_fn(x0))
                    print(
                        f"  {cfg.window_size:>6d} {n:>3d} {s:>3d} {t:>4d}"
                        f"  {est:18.10e}  {rel_err(est, truth):18.10e}"
                    )

        print()  # blank line between functions


if __name__ == "__main__":
    main()

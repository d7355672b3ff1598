# generate_moon.py
import collections
import csv
import sys

import numpy as np
from sklearn.utils import check_random_state

from moons.spacing import InvalidParameterError, check_count, linspace

DEFAULT_N_SAMPLES = 200
DEFAULT_NOISE = 0.20

MoonsDataset = collections.namedtuple("MoonsDataset", ["samples", "labels"])


def generate_moons_dataset(n_samples, noise, random_state=None):
    """Build two interleaving half circles with additive gaussian noise.

    Samples are drawn from a single angle sweep over [0, 2*pi]. The first
    n_samples // 2 points lie on the unit circle and get label 0, the rest
    lie on the unit circle shifted by (+1, +0.5) and get label 1. Noise is
    drawn independently for x and y with standard deviation `noise`.

    `random_state` follows the scikit-learn convention: None for the global
    numpy generator, an int seed, or a RandomState instance.
    """
    n_samples = check_count(n_samples, "n_samples", "generate_moons_dataset")
    if not noise >= 0.0:
        raise InvalidParameterError("generate_moons_dataset called with noise < 0")

    rng = check_random_state(random_state)

    angles = linspace(0.0, 2.0 * np.pi, n_samples)
    circle = np.column_stack((np.cos(angles), np.sin(angles)))

    # one (x, y) draw per sample, x first
    jitter = rng.normal(0.0, noise, size=(n_samples, 2)).astype(np.float32)

    half = n_samples // 2
    offset = np.zeros((n_samples, 2), dtype=np.float32)
    offset[half:] = (1.0, 0.5)

    samples = circle + offset + jitter
    labels = np.zeros(n_samples, dtype=np.int32)
    labels[half:] = 1

    samples.flags.writeable = False
    labels.flags.writeable = False
    return MoonsDataset(samples, labels)


def format_coordinate(value):
    """Shortest round-trip text of a float32, positional, always with a decimal point."""
    return np.format_float_positional(np.float32(value), trim="0")


def write_dataset(dataset, out):
    writer = csv.writer(out, lineterminator="\n")
    for (x, y), label in zip(dataset.samples, dataset.labels):
        writer.writerow([format_coordinate(x), format_coordinate(y), int(label)])


def main():
    # fixed parameters; command-line arguments are ignored
    try:
        dataset = generate_moons_dataset(DEFAULT_N_SAMPLES, DEFAULT_NOISE)
    except InvalidParameterError as e:
        raise SystemExit(f"[ERROR] {e}")

    write_dataset(dataset, sys.stdout)

    n_upper = int(np.sum(dataset.labels == 0))
    print(
        f"[INFO] Wrote {len(dataset.labels)} samples "
        f"(class 0: {n_upper}, class 1: {len(dataset.labels) - n_upper})",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()

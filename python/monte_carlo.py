#!/usr/bin/env python3
import math
import numpy as np

DEFAULT_NUMBER_OF_SAMPLES = 1_000_000
BATCH_SIZE = 1 << 16


class InvalidArgument(ValueError):
    pass


class WorkerFailure(RuntimeError):
    pass


def make_rng(rng):
    # Seeds and seed sequences become a fresh Generator; anything else that
    # can draw uniform floats is used as-is.
    if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return np.random.default_rng(rng)
    return rng


def estimate(samples, rng=None, batch_size=BATCH_SIZE):
    """Estimate pi from `samples` random points in [-1, 1] x [-1, 1].

    `rng` is a seed, a SeedSequence, or any object with a numpy-style
    `uniform(low, high, size)` method. Zero samples gives nan.
    """
    if samples < 0:
        raise InvalidArgument(f"samples must be non-negative, got {samples}")
    if batch_size < 1:
        raise InvalidArgument(f"batch_size must be positive, got {batch_size}")
    if samples == 0:
        return math.nan

    rng = make_rng(rng)
    inside = 0
    remaining = samples

    while remaining > 0:
        n = min(remaining, batch_size)
        points = rng.uniform(-1.0, 1.0, size=(n, 2))
        inside += int(np.count_nonzero((points * points).sum(axis=1) <= 1.0))
        remaining -= n

    return 4.0 * inside / samples


def estimate_chunk(args):
    samples, seed = args
    return estimate(samples, seed)

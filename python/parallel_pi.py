#!/usr/bin/env python3
import logging
import time
import numpy as np
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from concurrent.futures.process import BrokenProcessPool

from monte_carlo import InvalidArgument, WorkerFailure, estimate, estimate_chunk

logger = logging.getLogger(__name__)

BACKENDS = ("thread", "process")
DEFAULT_BACKEND = "thread"


def partition_size(samples, workers):
    if workers < 1:
        raise InvalidArgument(f"workers must be at least 1, got {workers}")
    if samples < 0:
        raise InvalidArgument(f"samples must be non-negative, got {samples}")
    # Remainder samples are dropped, not spread across workers
    return samples // workers


def spawn_seeds(workers, seed=None):
    return np.random.SeedSequence(seed).spawn(workers)


def collect(futures):
    partials = []
    for index, future in enumerate(futures):
        try:
            partials.append(future.result())
        except BrokenProcessPool as exc:
            logger.error("Worker %d terminated abnormally: %s", index, exc)
            raise WorkerFailure(f"worker {index} terminated abnormally") from exc
        except Exception as exc:
            logger.error("Worker %d failed: %s", index, exc)
            raise WorkerFailure(f"worker {index} failed: {exc!r}") from exc

    return partials


def run_threads(size, seeds):
    with ThreadPoolExecutor(max_workers=len(seeds)) as executor:
        futures = [executor.submit(estimate, size, child) for child in seeds]
        return collect(futures)


def run_processes(size, seeds, task=estimate_chunk, mp_context=None):
    with ProcessPoolExecutor(max_workers=len(seeds), mp_context=mp_context) as executor:
        futures = [executor.submit(task, (size, child)) for child in seeds]
        return collect(futures)


def parallel_estimate(samples, workers, seed=None, backend=DEFAULT_BACKEND):
    """Estimate pi on `workers` concurrent workers and average their results.

    Each worker draws `samples // workers` points from its own random
    stream. Blocks until every worker is done; a failed worker raises
    WorkerFailure instead of being left out of the mean.
    """
    if backend not in BACKENDS:
        raise InvalidArgument(
            f"unknown backend {backend!r}, expected one of {', '.join(BACKENDS)}"
        )
    size = partition_size(samples, workers)
    seeds = spawn_seeds(workers, seed)

    logger.debug(
        "Dispatching %d %s workers with %d samples each", workers, backend, size
    )
    start_time = time.time()
    if backend == "thread":
        partials = run_threads(size, seeds)
    else:
        partials = run_processes(size, seeds)
    elapsed = time.time() - start_time
    logger.info("Estimation took %.2fms", elapsed * 1000)

    return sum(partials) / workers

#!/usr/bin/env python3
import os
import sys
import time
from monte_carlo import DEFAULT_NUMBER_OF_SAMPLES, InvalidArgument, WorkerFailure, estimate
from parallel_pi import BACKENDS, parallel_estimate

DEFAULT_ROUNDS = 5


def time_call(fn):
    start_time = time.time()
    fn()
    return time.time() - start_time


def run_benchmark(samples, workers, rounds=DEFAULT_ROUNDS):
    """Best wall-clock time in seconds for each case over `rounds` runs.

    Cases are the single estimator ("single") and one parallel run per
    backend on `workers` workers.
    """
    if rounds < 1:
        raise InvalidArgument(f"rounds must be at least 1, got {rounds}")

    cases = {"single": lambda: estimate(samples)}
    for backend in BACKENDS:
        cases[backend] = lambda backend=backend: parallel_estimate(
            samples, workers, backend=backend
        )

    return {
        name: min(time_call(fn) for _ in range(rounds))
        for name, fn in cases.items()
    }


def main(argv=None):
    argv = sys.argv if argv is None else argv
    prog = os.path.basename(argv[0]) if argv else "bench.py"
    args = argv[1:]

    if len(args) > 2:
        print(f"Usage: {prog} [samples] [rounds]", file=sys.stderr)
        return 1

    try:
        samples = int(args[0]) if len(args) > 0 else DEFAULT_NUMBER_OF_SAMPLES
        rounds = int(args[1]) if len(args) > 1 else DEFAULT_ROUNDS
    except ValueError as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        print(f"Usage: {prog} [samples] [rounds]", file=sys.stderr)
        return 1

    workers = os.cpu_count() or 1
    print(f"Benchmarking {samples} samples, best of {rounds}, {workers} workers")

    try:
        timings = run_benchmark(samples, workers, rounds)
    except (InvalidArgument, WorkerFailure) as exc:
        print(f"Benchmark failed: {exc}", file=sys.stderr)
        return 1

    for name, elapsed in timings.items():
        print(f"{name.capitalize()} took {elapsed * 1000:.2f}ms")

    single = timings["single"]
    for backend in BACKENDS:
        if timings[backend] > 0:
            print(f"{backend.capitalize()} speedup: {single / timings[backend]:.2f}x")

    return 0


if __name__ == "__main__":
    sys.exit(main())

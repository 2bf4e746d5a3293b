#!/usr/bin/env python3
import logging
import os
import sys
from monte_carlo import DEFAULT_NUMBER_OF_SAMPLES, InvalidArgument, WorkerFailure
from parallel_pi import BACKENDS, DEFAULT_BACKEND, parallel_estimate


def usage(prog):
    print(f"Usage: {prog} [samples] [workers] [backend]", file=sys.stderr)
    print(f"Backends: {', '.join(BACKENDS)}", file=sys.stderr)


def parse_count(value, name):
    try:
        count = int(value)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {value!r}") from None
    return count


def main(argv=None):
    argv = sys.argv if argv is None else argv
    prog = os.path.basename(argv[0]) if argv else "main.py"
    args = argv[1:]

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if len(args) > 3:
        usage(prog)
        return 1

    try:
        samples = (
            parse_count(args[0], "samples") if len(args) > 0
            else DEFAULT_NUMBER_OF_SAMPLES
        )
        workers = (
            parse_count(args[1], "workers") if len(args) > 1
            else os.cpu_count() or 1
        )
        backend = args[2].lower() if len(args) > 2 else DEFAULT_BACKEND
        pi_estimate = parallel_estimate(samples, workers, backend=backend)
    except InvalidArgument as exc:
        print(f"Invalid argument: {exc}", file=sys.stderr)
        usage(prog)
        return 1
    except WorkerFailure as exc:
        print(f"Estimation failed: {exc}", file=sys.stderr)
        return 1

    print(f"Pi after {samples} iterations using {workers} threads: {pi_estimate}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

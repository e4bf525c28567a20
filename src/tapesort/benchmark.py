import argparse
import logging
import random

from .compare import ComparisonCounter
from .tape import Tape
from .tape_sort import TapeSorter
from .utils import encode_sorted_tape, is_sorted

logger = logging.getLogger(__name__)

default_sizes = [10, 100, 1000]
default_num_tapes = 3
default_trials = 5
default_seed = 1
max_value = 1000000

algorithms = ["classic", "multi", "balanced"]


def make_input(size, seed, max_value=max_value):
    rng = random.Random(seed)
    return [rng.randint(0, max_value) for _ in range(size)]


def run_trial(algorithm, values, num_tapes):
    """
    Sort values once with the named algorithm on a fresh sorter.
    Returns a dict with the write and comparison counts of that sort and
    the size in bits of the gap-coded result (None for negative values).
    """
    counter = ComparisonCounter()
    sorter = TapeSorter(compare=counter)
    tape = Tape(values)
    if algorithm == "classic":
        result = sorter.sort(tape)
        num_tapes = 2
    elif algorithm == "multi":
        result = sorter.multi_sort(tape, num_tapes)
    elif algorithm == "balanced":
        result = sorter.balanced_sort(tape, num_tapes)
    else:
        raise ValueError("Unknown algorithm: " + str(algorithm))

    output = result.to_list()
    # Size of the sorted result as a gap-coded bit image
    image_bits = len(encode_sorted_tape(result)) if min(values, default=0) >= 0 else None
    return {
        "algorithm": algorithm,
        "size": len(values),
        "num_tapes": num_tapes,
        "writes": sorter.total_writes(),
        "comparisons": counter.comparisons,
        "image_bits": image_bits,
        "sorted": is_sorted(output) and len(output) == len(values),
    }


def run_benchmark(sizes=default_sizes, num_tapes=default_num_tapes,
                  trials=default_trials, seed=default_seed):
    """
    Run every algorithm on the same random inputs.

    For each size, trials inputs are generated (seeds seed, seed+1, ...)
    and each algorithm sorts every one of them. One row per
    (size, algorithm) holds the mean writes, comparisons and encoded size
    of the sorted result in bits.
    """
    rows = []
    for size in sizes:
        inputs = [make_input(size, seed + t) for t in range(trials)]
        for algorithm in algorithms:
            results = [run_trial(algorithm, values, num_tapes) for values in inputs]
            row = {
                "algorithm": algorithm,
                "size": size,
                "num_tapes": results[0]["num_tapes"],
                "writes": sum(r["writes"] for r in results) / trials,
                "comparisons": sum(r["comparisons"] for r in results) / trials,
                "image_bits": sum(r["image_bits"] for r in results) / trials,
                "sorted": all(r["sorted"] for r in results),
            }
            logger.debug("size %d %s: %.1f writes, %.1f comparisons",
                         size, algorithm, row["writes"], row["comparisons"])
            rows.append(row)
    return rows


def format_report(rows):
    header = "%-10s %8s %6s %14s %14s %12s %6s" % (
        "algorithm", "size", "tapes", "writes", "comparisons", "image_bits", "ok")
    lines = [header, "-" * len(header)]
    for r in rows:
        lines.append("%-10s %8d %6d %14.1f %14.1f %12.1f %6s" % (
            r["algorithm"], r["size"], r["num_tapes"], r["writes"],
            r["comparisons"], r["image_bits"], "yes" if r["sorted"] else "NO"))
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare tape sort algorithms by writes and comparisons"
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=default_sizes,
        help="Input sizes to sort",
    )
    parser.add_argument(
        "--tapes",
        type=int,
        default=default_num_tapes,
        help="Auxiliary tapes for multi sort, tapes per group for balanced sort",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=default_trials,
        help="Random inputs per size",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=default_seed,
        help="Seed of the first random input",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every sort pass",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    rows = run_benchmark(args.sizes, args.tapes, args.trials, args.seed)
    print(format_report(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

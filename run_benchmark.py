import random
import time
import argparse
import numpy as np
from tabulate import tabulate

from binary_stride.searches import NOT_FOUND, SEARCHES, bisection_search, stride_search, find_crossover
from binary_stride.utils import count_probes, counting_predicate, is_sorted, missing_value_near
from binary_stride.data_loader import DISTRIBUTIONS, generate_sorted_data, load_values_from_csv

# Literal cases from the original write-up
SMOKE_ARRAYS = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9],
    [1, 2, 3, 4, 5, 6, 7, 8, 9],
    [4],
    [1, 4, 9],
    [1, 4],
    [4, 9],
    [],
]
SMOKE_NEEDLES = [4, 14, 0]


def run_smoke() -> list[list]:
    """
    Runs Binary Stride over the documented example arrays and prints the results,
    followed by a side-by-side comparison with Binary Search.
    Returns the comparison rows: [array, needle, binary search index, binary stride index].
    """
    print("--- Binary Stride Smoke Test ---")

    for a in SMOKE_ARRAYS:
        print(stride_search(a, 4))

    # Element at each found index; the empty array has none
    for a in SMOKE_ARRAYS[:-1]:
        print(a[stride_search(a, 4)])

    for needle in SMOKE_NEEDLES[1:]:
        for a in SMOKE_ARRAYS[:-1]:
            print(stride_search(a, needle))

    rows = []
    for needle in SMOKE_NEEDLES:
        for a in SMOKE_ARRAYS:
            rows.append([str(a), needle, bisection_search(a, needle), stride_search(a, needle)])

    headers = ["Array", "Needle", "Binary Search", "Binary Stride"]
    print(tabulate(rows, headers=headers, tablefmt="grid"))
    return rows


def pick_query(values: list[int], miss_rate: float) -> int:
    """Picks a value from the array, or with probability miss_rate a value that is not in it."""
    if random.random() >= miss_rate:
        return random.choice(values)
    # Shifting a present value by one usually misses; -1 and max+1 always do
    return missing_value_near(values, random.choice(values) + random.choice([-1, 1]))


def run_crossover_demo(values: list[int]):
    """
    Finds where f(x) = x - t becomes positive over the array, with t its median,
    and prints the crossover index and the number of predicate evaluations.
    """
    threshold = values[len(values) // 2]
    predicate = counting_predicate(lambda i: values[i] - threshold <= 0)
    crossover = find_crossover(predicate, len(values))

    print(f"\nCrossover demo: f(x) = x - {threshold}")
    if crossover < len(values):
        print(f"f becomes positive at index {crossover} (value {values[crossover]}) "
              f"after {len(predicate.probes)} evaluations.")
    else:
        print(f"f never becomes positive ({len(predicate.probes)} evaluations).")
    return crossover


def run_benchmark(dataset_size: int, distribution: str = "uniform", num_runs: int = 10,
                  seed: int | None = None, data_file: str | None = None, miss_rate: float = 0.0):
    """
    Builds or loads a sorted dataset, runs every search over random queries, and prints
    the benchmark results, averaging time and comparisons over the queries.
    """
    print("--- Binary Stride vs Binary Search Benchmark ---")

    if seed is not None:
        random.seed(seed)

    # 1. Build the dataset
    if data_file:
        print(f"\n1. Loading values from {data_file}...")
        values = load_values_from_csv(data_file)
    else:
        print(f"\n1. Generating {dataset_size} sorted values ({distribution})...")
        values = generate_sorted_data(dataset_size, distribution=distribution, seed=seed)

    if not values:
        print("No data to search. Exiting.")
        return None

    if not is_sorted(values):
        print("Error: input values are not sorted. Exiting.")
        return None

    all_results = {name: {'times': [], 'comps': [], 'successes': []} for name in SEARCHES}

    # 2. Run searches
    print(f"\n2. Running Benchmarks over {num_runs} random queries...")

    for run in range(num_runs):
        search_query = pick_query(values, miss_rate)

        # Reference verdict
        found_idx_bs = bisection_search(values, search_query)
        expected_found = found_idx_bs != NOT_FOUND

        for name, search in SEARCHES.items():
            start_time = time.perf_counter()
            found_idx = search(values, search_query)
            end_time = time.perf_counter()

            _, comparisons = count_probes(search, values, search_query)

            if found_idx == NOT_FOUND:
                success = not expected_found
            else:
                success = expected_found and values[found_idx] == search_query

            all_results[name]['times'].append((end_time - start_time) * 1e6)
            all_results[name]['comps'].append(comparisons)
            all_results[name]['successes'].append(success)

            if not success:
                print(f"Warning: {name} disagreed with Binary Search on query {search_query} "
                      f"(got {found_idx}, expected {found_idx_bs}).")

    # 3. Calculate averages and print results using tabulate
    print("\n\n--- Final Averaged Benchmark Results ---")

    headers = ["Search Method", "Avg Time (µs)", "Avg Comparisons", "Max Comparisons", "Success Rate"]
    table_data = []

    for name, data in all_results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        avg_comps = np.mean(data['comps']) if data['comps'] else 0
        max_comps = np.max(data['comps']) if data['comps'] else 0
        success_rate = np.mean(data['successes']) * 100 if data['successes'] else 0
        table_data.append([name, f"{avg_time:.2f}", f"{avg_comps:.2f}", f"{max_comps}", f"{success_rate:.1f}%"])

    print(tabulate(table_data, headers=headers, tablefmt="grid"))

    print("\nAnalysis:")
    print(f"Averaged over {num_runs} random search queries on a dataset of {len(values)} values.")
    print(f"log2(n) = {np.log2(len(values)):.2f}")
    if num_runs > 0:
        print(f"Binary Search averages {np.mean(all_results['Binary Search']['comps']):.2f} comparisons, "
              f"Binary Stride averages {np.mean(all_results['Binary Stride']['comps']):.2f}.")
    if distribution == "duplicates" and not data_file:
        print("Note: on runs of equal values Binary Stride lands on the last index of the run.")
    print("-" * 80)

    run_crossover_demo(values)
    return all_results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Compare binary search with the binary stride technique.")
    parser.add_argument("--dataset-size", type=int, default=100000,
                        help="Number of sorted values to generate.")
    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform",
                        help="Distribution of the generated values.")
    parser.add_argument("--runs", type=int, default=10,
                        help="Number of random search queries to average over.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for data generation and query selection.")
    parser.add_argument("--data-file", type=str, default=None,
                        help="CSV file with a header row and one integer key per row. "
                             "Overrides --dataset-size and --distribution.")
    parser.add_argument("--miss-rate", type=float, default=0.0,
                        help="Fraction of queries that search for a value not in the dataset.")
    parser.add_argument("--smoke", action="store_true",
                        help="Only run the literal example cases and exit.")
    args = parser.parse_args()

    if args.smoke:
        run_smoke()
    else:
        run_benchmark(args.dataset_size, distribution=args.distribution, num_runs=args.runs,
                      seed=args.seed, data_file=args.data_file, miss_rate=args.miss_rate)

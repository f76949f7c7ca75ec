import csv
import numpy as np
from scipy.stats import gaussian_kde

DISTRIBUTIONS = ("uniform", "clustered", "duplicates")


def _top_up_unique(rng: np.random.Generator, values: np.ndarray, size: int, max_value: int) -> np.ndarray:
    """
    Adds uniform random values until `values` holds `size` unique entries.
    """
    values = np.unique(values)
    while len(values) < size:
        needed = size - len(values)
        extra = rng.integers(0, max_value, size=needed, endpoint=True, dtype=np.int64)
        values = np.unique(np.concatenate([values, extra]))
    return values


def generate_uniform(rng: np.random.Generator, size: int, max_value: int) -> np.ndarray:
    values = rng.integers(0, max_value, size=size, endpoint=True, dtype=np.int64)
    return _top_up_unique(rng, values, size, max_value)


def generate_clustered(rng: np.random.Generator, size: int, max_value: int, num_clusters: int = 5) -> np.ndarray:
    """
    Generates unique values concentrated around a few random centres.
    A Gaussian KDE is fitted on a small seed sample drawn around the centres and
    resampled to the requested size.
    """
    centers = rng.uniform(0, max_value, size=num_clusters)
    spread = max(max_value * 0.02, 1.0)
    seed_points = np.concatenate([rng.normal(c, spread, size=50) for c in centers])

    kde = gaussian_kde(seed_points)
    samples = kde.resample(size, rng)[0]
    values = np.clip(samples, 0, max_value).astype(np.int64)
    return _top_up_unique(rng, values, size, max_value)


def generate_duplicates(rng: np.random.Generator, size: int, max_value: int, num_distinct: int = 0) -> np.ndarray:
    """
    Generates values drawn from only a handful of distinct keys, so the sorted
    array consists of long runs of equal elements.
    """
    if num_distinct <= 0:
        num_distinct = max(1, size // 100)
    num_distinct = min(num_distinct, max_value + 1)
    keys = generate_uniform(rng, num_distinct, max_value)
    return rng.choice(keys, size=size, replace=True)


def generate_sorted_data(size: int, distribution: str = "uniform", max_value: int = 2**32 - 1,
                         seed: int | None = None) -> list[int]:
    """
    Generates a sorted list of integers in [0, max_value].

    Distributions:
        uniform: unique values spread uniformly over the range.
        clustered: unique values concentrated around a few centres (KDE).
        duplicates: few distinct values, each repeated many times.

    Returns:
        A sorted list of `size` Python ints (empty if size <= 0).
    """
    if distribution not in DISTRIBUTIONS:
        raise ValueError(f"Unknown distribution '{distribution}'. Choose from: {', '.join(DISTRIBUTIONS)}")
    if size <= 0:
        return []
    if distribution != "duplicates" and size > max_value + 1:
        raise ValueError(f"Cannot draw {size} unique values from [0, {max_value}]")

    rng = np.random.default_rng(seed)

    if distribution == "uniform":
        values = generate_uniform(rng, size, max_value)
    elif distribution == "clustered":
        values = generate_clustered(rng, size, max_value)
    else:
        values = generate_duplicates(rng, size, max_value)

    return np.sort(values).tolist()


def load_values_from_csv(file_path: str, column: int = 0) -> list[int]:
    """
    Loads integer keys from a CSV file with a header row.
    Returns:
        The values from `column`, sorted, or an empty list if the file
        is missing or cannot be parsed.
    """
    values = []
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            reader = csv.reader(f)
            next(reader, None)  # Skip header
            for row in reader:
                if not row:
                    continue
                values.append(int(row[column]))
    except FileNotFoundError:
        print(f"Error: Data file not found at {file_path}")
        return []
    except (ValueError, IndexError) as e:
        print(f"Error processing file {file_path}: {e}")
        return []

    print(f"Loaded {len(values)} values from {file_path}.")
    return sorted(values)

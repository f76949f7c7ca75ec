from typing import Callable, Sequence

from .searches import NOT_FOUND, bisection_search, find_crossover


# --- Probe Instrumentation ---

class ProbeCounter:
    """
    Read-only view of a sequence that records every index read through it.
    Searches take it in place of the list, so comparison counts and probe
    traces come from the data access itself rather than from the algorithms.
    """
    def __init__(self, data: Sequence):
        self.data = data
        self.probes: list[int] = []

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int):
        self.probes.append(index)
        return self.data[index]

    @property
    def comparisons(self) -> int:
        return len(self.probes)


def count_probes(search: Callable, data: Sequence, query) -> tuple[int, int]:
    """
    Runs `search` over `data` and returns the index found and the number of
    element reads it made.
    """
    counter = ProbeCounter(data)
    found_idx = search(counter, query)
    return found_idx, counter.comparisons


def counting_predicate(predicate: Callable[[int], object]):
    """Wraps a predicate so the indices it is evaluated on are recorded in `.probes`."""
    def wrapped(i: int):
        wrapped.probes.append(i)
        return predicate(i)
    wrapped.probes = []
    return wrapped


# --- Crossover Helpers ---

def first_positive_index(data: Sequence, fn: Callable) -> int:
    """
    Finds where the graph of fn over `data` becomes positive.
    fn(data[i]) must be <= 0 up to some index and > 0 from there on.
    Returns len(data) if fn never becomes positive.
    """
    return find_crossover(lambda i: fn(data[i]) <= 0, len(data))


def is_sorted(data: Sequence) -> bool:
    """True if data is in non-decreasing order."""
    return all(data[i] <= data[i + 1] for i in range(len(data) - 1))


def missing_value_near(data: Sequence, value: int) -> int:
    """
    Returns value if it is absent from the sorted array, otherwise max + 1.
    """
    if bisection_search(data, value) != NOT_FOUND:
        return data[-1] + 1
    return value

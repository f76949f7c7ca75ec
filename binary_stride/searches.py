from typing import Callable, Sequence

NOT_FOUND = -1


# --- Baseline Search Algorithms ---

def search_full_scan(data: Sequence, query) -> int:
    """
    Scans the array left to right.
    Returns the index of the first matching element or NOT_FOUND.
    """
    for i in range(len(data)):
        if data[i] == query:
            return i
    return NOT_FOUND

def bisection_search(data: Sequence, query) -> int:
    """
    Classic binary search over inclusive bounds [low, high].
    Returns the index of an element equal to the query or NOT_FOUND.
    """
    low, high = 0, len(data) - 1
    while low <= high:
        # overflow-safe midpoint
        mid = low + (high - low) // 2
        value = data[mid]
        if value == query:
            return mid
        elif value < query:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND

def search_exponential(data: Sequence, query) -> int:
    """
    Exponential search.
    Finds range where element may exist by exponentially increasing the index,
    then performs binary search within that range.
    Returns the index of the element or NOT_FOUND.
    """
    n = len(data)
    if n == 0:
        return NOT_FOUND

    if data[0] == query:
        return 0

    # Find range for binary search by doubling index
    i = 1
    while i < n and data[i] <= query:
        if data[i] == query:
            return i
        i *= 2

    low = i // 2
    high = min(i, n - 1)

    while low <= high:
        mid = low + (high - low) // 2
        value = data[mid]
        if value == query:
            return mid
        elif value < query:
            low = mid + 1
        else:
            high = mid - 1

    return NOT_FOUND


# --- Binary Stride ---

def stride_search(data: Sequence, query) -> int:
    """
    Binary stride search.

    Walks the array left to right with jumps of n/2, n/4, ..., 1. At each jump
    length the position advances for as long as the element it lands on is
    still <= query, then the jump length is halved. When the jumps are
    exhausted either data[pos] is the query or the query is not in the array.

    With duplicates this lands on the last element of the matching run. The
    position advances at most twice per jump length, so even an array of equal
    values costs O(log n) reads.

    Returns the index of the element or NOT_FOUND.
    """
    n = len(data)
    if n == 0:
        return NOT_FOUND

    pos = 0
    stride = n // 2
    while stride >= 1:
        while pos + stride < n and data[pos + stride] <= query:
            pos += stride
        stride //= 2

    if data[pos] == query:
        return pos
    return NOT_FOUND

def find_crossover(predicate: Callable[[int], object], domain_size: int) -> int:
    """
    Finds the first index at which a monotone predicate stops being positive.

    `predicate` is evaluated on indices in [0, domain_size) only. It must be
    positive (or truthy) on [0, k) and non-positive (or falsy) on
    [k, domain_size); the return value is k, so domain_size means the predicate
    never crossed. If the predicate is not monotone the result is some index in
    [0, domain_size] with no particular meaning.
    """
    if domain_size < 0:
        raise ValueError(f"domain_size must be non-negative, got {domain_size}")
    if domain_size == 0 or not predicate(0) > 0:
        return 0

    # Invariant: predicate(pos) > 0
    pos = 0
    stride = domain_size // 2
    while stride >= 1:
        while pos + stride < domain_size and predicate(pos + stride) > 0:
            pos += stride
        stride //= 2
    return pos + 1


SEARCHES = {
    "Full Scan": search_full_scan,
    "Binary Search": bisection_search,
    "Exponential Search": search_exponential,
    "Binary Stride": stride_search,
}

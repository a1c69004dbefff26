"""Edit Distance: Levenshtein distance with unit costs."""

import numpy as np


def _code_points(text: str) -> np.ndarray:
    return np.fromiter((ord(ch) for ch in text), dtype=np.int64, count=len(text))


def distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or
    substitutions needed to turn ``a`` into ``b``.

    Works row by row over the shorter string, so memory is O(min(len(a), len(b))).
    Deletions and substitutions are vectorised; insertions along the row are
    resolved with a running minimum of ``row[k] - k``.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    short = _code_points(b)
    offsets = np.arange(len(b) + 1, dtype=np.int64)
    previous = offsets.copy()

    for i, ch in enumerate(a, start=1):
        substitution_cost = (short != ord(ch)).astype(np.int64)
        candidate = np.empty_like(previous)
        candidate[0] = i
        candidate[1:] = np.minimum(previous[1:] + 1, previous[:-1] + substitution_cost)
        previous = np.minimum.accumulate(candidate - offsets) + offsets

    return int(previous[-1])

"""Integer statistics — median and mode.

Pure functions with no shared state. ``median`` sorts its argument in
place; callers that need the original order should pass a copy.
"""

from __future__ import annotations

from collections.abc import Iterable


def median(numbers: list[int]) -> int:
    """Sort *numbers* ascending in place and return the lower-middle element.

    For even lengths the lower of the two middle values is returned, i.e.
    index ``(len - 1) // 2`` after sorting.

    Raises:
        ValueError: If *numbers* is empty.

    Examples:
        >>> median([3, 1, 2])
        2
        >>> median([4, 1, 3, 2])
        2
    """
    if not numbers:
        raise ValueError("median() of an empty sequence")
    numbers.sort()
    return numbers[(len(numbers) - 1) // 2]


def mode(numbers: Iterable[int]) -> tuple[int, int]:
    """Return ``(value, count)`` for the most frequent value.

    Ties go to the value that first reached the winning count while
    scanning left to right, so ``mode([1, 2, 2, 1])`` is ``(2, 2)``. The
    original exercise compared with ``>=`` and handed ties to the later
    value, giving ``(1, 2)``. An empty input yields ``(0, 0)``.

    Examples:
        >>> mode([1, 2, 2, 3, 3])
        (2, 2)
        >>> mode([])
        (0, 0)
    """
    counts: dict[int, int] = {}
    result = 0
    max_count = 0
    for num in numbers:
        counts[num] = counts.get(num, 0) + 1
        if counts[num] > max_count:
            max_count = counts[num]
            result = num
    return result, max_count

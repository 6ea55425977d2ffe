"""String similarity metrics.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import (
    WINKLER_BOOST_THRESHOLD,
    WINKLER_MAX_PREFIX,
    WINKLER_PREFIX_SCALE,
)


def jaro(first: str, second: str) -> float:
    """Jaro similarity of two strings.

    Characters match when equal and no farther apart than half the longer
    string minus one. Transpositions are matched characters that appear
    in a different order, counted by halves.

    :param str first: first string
    :param str second: second string
    :return float: similarity in [0, 1]
    """
    if first == second:
        return 1.0

    len_first, len_second = len(first), len(second)
    if not len_first or not len_second:
        return 0.0

    window = max(max(len_first, len_second) // 2 - 1, 0)

    first_flags = [False] * len_first
    second_flags = [False] * len_second

    matches = 0
    for i, char in enumerate(first):
        start = max(0, i - window)
        end = min(i + window + 1, len_second)
        for j in range(start, end):
            if second_flags[j] or second[j] != char:
                continue
            first_flags[i] = second_flags[j] = True
            matches += 1
            break

    if not matches:
        return 0.0

    transpositions = 0
    j = 0
    for i in range(len_first):
        if not first_flags[i]:
            continue
        while not second_flags[j]:
            j += 1
        if first[i] != second[j]:
            transpositions += 1
        j += 1

    return (
        matches / len_first
        + matches / len_second
        + (matches - transpositions / 2) / matches
    ) / 3


def jaro_winkler(
    first: str,
    second: str,
    prefix_scale: float = WINKLER_PREFIX_SCALE,
    boost_threshold: float = WINKLER_BOOST_THRESHOLD,
) -> float:
    """Jaro-Winkler similarity, Jaro boosted by a shared prefix.

    :param str first: first string
    :param str second: second string
    :param float prefix_scale: weight of each common prefix character
    :param float boost_threshold: Jaro score the boost starts after
    :return float: similarity in [0, 1]
    """
    score = jaro(first, second)
    if score <= boost_threshold:
        return score

    prefix = 0
    for a, b in zip(first[:WINKLER_MAX_PREFIX], second[:WINKLER_MAX_PREFIX]):
        if a != b:
            break
        prefix += 1

    return score + prefix * prefix_scale * (1.0 - score)

"""Fuzzy comparison of extracted and user-entered ticket identifiers."""

from typing import List, Optional

from services.identifier_extraction import normalize_identifier

DEFAULT_MAX_EDIT_DISTANCE = 2


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions that turn ``a`` into ``b``.
    """
    rows, cols = len(a) + 1, len(b) + 1
    table: List[List[int]] = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i][j - 1],  # insertion
                    table[i - 1][j],  # deletion
                )

    return table[rows - 1][cols - 1]


def identifiers_match(
    extracted: Optional[str],
    provided: Optional[str],
    max_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
) -> bool:
    """Exact match after normalization, else tolerate up to ``max_distance`` edits."""
    if not provided:
        return False

    clean_provided = normalize_identifier(provided)
    clean_extracted = normalize_identifier(extracted)

    if clean_extracted == clean_provided:
        return True

    return levenshtein_distance(clean_extracted, clean_provided) <= max_distance

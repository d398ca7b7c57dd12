"""String closeness helpers backing typo-tolerant matching.

:func:`edit_distance` is the plain Levenshtein distance (insert, delete and
substitute all cost one) and is case-sensitive. :func:`similarity` lower-cases
both inputs and normalizes the distance by the longer string, so the result
always falls in ``[0, 1]`` with ``1`` meaning identical.
"""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - edit_distance(a.lower(), b.lower()) / max_len

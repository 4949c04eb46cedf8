# pictosigns/services/picto_search.py
"""
Tag search over the pictogram library.

A picto matches when ``pattern`` occurs anywhere in its raw tag string. When
nothing matches, the closest single tag (Damerau-Levenshtein distance below
``MAX_SUGGESTION_DISTANCE``) is offered as a "did you mean".
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from rapidfuzz.distance import DamerauLevenshtein

from pictosigns.models import Picto

MAX_SUGGESTION_DISTANCE = 2


def split_tags(tags: str) -> List[str]:
    # raw split, no trimming: "a, b" yields "a" and " b"
    return tags.split(",")


def closest_tag(pattern: str, tags: Sequence[str]) -> Optional[str]:
    """First tag strictly closer than ``MAX_SUGGESTION_DISTANCE``, ties keep the earlier one."""
    best_tag, best_score = "", MAX_SUGGESTION_DISTANCE
    for tag in tags:
        score = DamerauLevenshtein.distance(pattern, tag)
        if score < best_score:
            best_tag, best_score = tag, score
    return best_tag or None


def search_pictos(
    pictos: Sequence[Picto], pattern: str
) -> Tuple[List[Picto], Optional[str]]:
    matching = [p for p in pictos if pattern in p.tags]
    if matching:
        return matching, None

    tags = [tag for p in pictos for tag in split_tags(p.tags)]
    return [], closest_tag(pattern, tags)

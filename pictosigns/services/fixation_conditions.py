# pictosigns/services/fixation_conditions.py
"""
Selection of the mounting condition that applies to an order.

A condition belongs to one (fixation, shape) pair and says, for an area range,
which mounting points are drilled. Small items (one side <= 10) skip the area
matching and take the condition with the lowest ``area_min``; other items are
matched on their truncated area.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, FrozenSet, Optional, Sequence

from pictosigns.models import FixationCondition

SMALL_DIMENSION = 10.0

# areas are stored as 32-bit integers
AREA_MIN = -(2**31)
AREA_MAX = 2**31 - 1

ConditionLookup = Callable[[int, int], Sequence[FixationCondition]]


class Position(str, Enum):
    TOP_LEFT = "tl"
    TOP_CENTER = "tc"
    TOP_RIGHT = "tr"
    CENTER_LEFT = "cl"
    CENTER_RIGHT = "cr"
    BOTTOM_LEFT = "bl"
    BOTTOM_CENTER = "bc"
    BOTTOM_RIGHT = "br"


def positions_of(condition: FixationCondition) -> FrozenSet[Position]:
    """Mounting points whose flag is explicitly true."""
    return frozenset(p for p in Position if getattr(condition, f"pos_{p.value}") is True)


def count_positions(condition: Optional[FixationCondition], *, legacy: bool = True) -> int:
    """
    Number of fixations billed for ``condition``.

    ``legacy`` reproduces the historical count used by the live price lists:
    bottom-center is billed twice and bottom-right is never billed.
    """
    if condition is None:
        return 0

    positions = positions_of(condition)
    if not legacy:
        return len(positions)

    count = len(positions - {Position.BOTTOM_RIGHT})
    if Position.BOTTOM_CENTER in positions:
        count += 1
    return count


def _bound(value: Optional[int]) -> int:
    # unset bound == 0 == unbounded
    return value or 0


def _area_min_key(condition: FixationCondition) -> int:
    return _bound(condition.area_min)


def truncate_area(width: float, height: float) -> int:
    """Area truncated toward zero, clamped to the 32-bit range; NaN becomes 0."""
    area = width * height
    if math.isnan(area):
        return 0
    if area >= AREA_MAX:
        return AREA_MAX
    if area <= AREA_MIN:
        return AREA_MIN
    return int(area)


def is_small_dimension(width: float, height: float) -> bool:
    return width <= SMALL_DIMENSION or height <= SMALL_DIMENSION


def first_min_condition(conditions: Sequence[FixationCondition]) -> Optional[FixationCondition]:
    """Condition with the smallest ``area_min``, first in storage order on ties."""
    if not conditions:
        return None
    return min(conditions, key=_area_min_key)


def matches_area(condition: FixationCondition, area: int) -> bool:
    area_min = _bound(condition.area_min)
    area_max = _bound(condition.area_max)

    return (
        (area_min == 0 and area_max == 0)
        or (area_min == 0 and area_max >= area)
        # NOTE: can only hold when area_max <= area < area_min; kept verbatim
        # so existing condition tables price the same way.
        or (area_min > area and area_max <= area)
        or (area_min < area and area_max == 0)
    )


def find_condition_by_area(
    conditions: Sequence[FixationCondition], area: int
) -> Optional[FixationCondition]:
    """Lowest ``area_min`` among the conditions matching ``area``."""
    return first_min_condition([c for c in conditions if matches_area(c, area)])


def select_condition(
    conditions: Sequence[FixationCondition], width: float, height: float
) -> Optional[FixationCondition]:
    if is_small_dimension(width, height):
        return first_min_condition(conditions)
    return find_condition_by_area(conditions, truncate_area(width, height))


def resolve_condition(
    lookup: ConditionLookup,
    fixation_id: int,
    shape_id: int,
    width: float,
    height: float,
) -> Optional[FixationCondition]:
    """Load the pair's conditions through ``lookup`` and select one.

    Nothing is loaded when the fixation or the shape is unset (id 0).
    """
    if fixation_id == 0 or shape_id == 0:
        return None
    return select_condition(lookup(fixation_id, shape_id), width, height)

import math

import pytest

from pictosigns.models import FixationCondition
from pictosigns.services.fixation_conditions import (
    Position,
    count_positions,
    find_condition_by_area,
    first_min_condition,
    matches_area,
    positions_of,
    resolve_condition,
    select_condition,
    truncate_area,
)


def cond(id, area_min=None, area_max=None, **flags):
    return FixationCondition(
        id=id, fixation_id=1, shape_id=1, area_min=area_min, area_max=area_max, **flags
    )


# ---------- positions ----------


def test_positions_only_count_true_flags():
    c = cond(1, pos_tl=True, pos_tr=False, pos_bl=None, pos_br=True)

    assert positions_of(c) == {Position.TOP_LEFT, Position.BOTTOM_RIGHT}


def test_count_without_condition_is_zero():
    assert count_positions(None) == 0
    assert count_positions(None, legacy=False) == 0


def test_legacy_count_bills_bottom_center_twice_and_skips_bottom_right():
    c = cond(1, pos_tl=True, pos_bc=True, pos_br=True)

    assert count_positions(c) == 3
    assert count_positions(c, legacy=False) == 3


def test_legacy_count_four_corners():
    c = cond(1, pos_tl=True, pos_tr=True, pos_bl=True, pos_br=True)

    assert count_positions(c) == 3
    assert count_positions(c, legacy=False) == 4


def test_all_positions():
    flags = {f"pos_{p.value}": True for p in Position}
    c = cond(1, **flags)

    assert count_positions(c) == 8
    assert count_positions(c, legacy=False) == 8


# ---------- mode A: small items ----------


def test_small_item_takes_lowest_area_min():
    conditions = [cond(1, 500, 0), cond(2, 100, 200), cond(3, 300, 0)]

    assert select_condition(conditions, 10, 5000).id == 2
    assert select_condition(conditions, 5000, 8).id == 2


def test_small_item_ignores_area_bounds():
    # area 10 * 10 = 100 is outside every range, still picked
    conditions = [cond(1, 5000, 9000)]

    assert select_condition(conditions, 10, 10).id == 1


def test_first_min_keeps_storage_order_on_ties():
    conditions = [cond(7, 0, 100), cond(3, 0, 0)]

    assert first_min_condition(conditions).id == 7
    assert first_min_condition([]) is None


def test_unset_area_min_sorts_as_zero():
    conditions = [cond(1, 50, 0), cond(2, None, 0)]

    assert first_min_condition(conditions).id == 2


# ---------- mode B: area matching ----------


def test_wildcard_matches_every_area():
    wildcard = cond(1, 0, 0)

    for area in (1, 121, 10_000, 5_000_000):
        assert matches_area(wildcard, area)


def test_open_lower_bound_matches_up_to_area_max():
    c = cond(1, 0, 1000)

    assert matches_area(c, 1000)
    assert not matches_area(c, 1001)


def test_open_upper_bound_matches_above_area_min():
    c = cond(1, 1000, 0)

    assert matches_area(c, 1001)
    assert not matches_area(c, 1000)


def test_closed_range_only_matches_the_inverted_clause():
    c = cond(1, 100, 1000)

    assert not matches_area(c, 500)
    # area_max <= area < area_min never holds for a well-formed range
    assert not matches_area(c, 50)
    assert not matches_area(c, 2000)


def test_inverted_range_matches_between_its_bounds():
    c = cond(1, 1000, 100)

    assert matches_area(c, 500)
    assert matches_area(c, 100)
    assert not matches_area(c, 1000)


def test_area_match_picks_lowest_area_min():
    conditions = [cond(1, 5000, 0), cond(2, 200, 0), cond(3, 0, 100)]

    assert find_condition_by_area(conditions, 6000).id == 2


def test_no_condition_matches():
    conditions = [cond(1, 0, 100)]

    assert find_condition_by_area(conditions, 400) is None
    assert select_condition(conditions, 20, 20) is None


def test_area_is_truncated_before_matching():
    c = cond(1, 0, 120)

    # 10.5 x 11.5 = 120.75 -> 120
    assert select_condition([c], 10.5, 11.5).id == 1


# ---------- resolve ----------


@pytest.mark.parametrize("fixation_id, shape_id", [(0, 3), (3, 0), (0, 0)])
def test_unset_ids_never_load_conditions(fixation_id, shape_id):
    def lookup(f, s):
        raise AssertionError("lookup must not be called")

    assert resolve_condition(lookup, fixation_id, shape_id, 10, 10) is None
    assert resolve_condition(lookup, fixation_id, shape_id, 500, 500) is None


def test_resolve_loads_pair_and_selects():
    calls = []

    def lookup(f, s):
        calls.append((f, s))
        return [cond(1, 0, 1000), cond(2, 1000, 0)]

    chosen = resolve_condition(lookup, 4, 9, 100, 100)

    assert calls == [(4, 9)]
    assert chosen.id == 2


# ---------- area truncation ----------


def test_truncate_area_rounds_toward_zero():
    assert truncate_area(10.5, 11.5) == 120
    assert truncate_area(-10.5, 11.5) == -120


def test_truncate_area_saturates_non_finite_values():
    assert truncate_area(math.inf, 20) == 2**31 - 1
    assert truncate_area(-math.inf, 20) == -(2**31)
    assert truncate_area(1e12, 1e12) == 2**31 - 1
    assert truncate_area(math.nan, 20) == 0
    # inf x 0 is NaN
    assert truncate_area(math.inf, 0) == 0


def test_infinite_width_selects_open_ended_condition():
    conditions = [cond(1, 0, 1000), cond(2, 1000, 0)]

    assert select_condition(conditions, math.inf, 20).id == 2


def test_nan_width_matches_as_zero_area():
    conditions = [cond(1, 0, 0)]

    assert select_condition(conditions, math.nan, 20).id == 1


def test_negative_dimensions_are_small_items():
    conditions = [cond(1, 500, 0), cond(2, 100, 0)]

    assert select_condition(conditions, -200, 300).id == 2

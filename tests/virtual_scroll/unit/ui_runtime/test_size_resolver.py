from __future__ import annotations

import pytest

from virtual_scroll.api.sizing import Fraction, ItemSize, Percent, Pixels
from virtual_scroll.ui_runtime.size_resolver import resolve_sizes, resolve_uniform_sizes


def _from_list(descriptors: list[object]):
    return lambda index: descriptors[index]


def test_pixels_and_fractions_split_leftover_space() -> None:
    sizes = resolve_sizes(500, 3, _from_list(["100px", "1fr", "1fr"]))
    assert sizes == [100, 200, 200]


def test_fraction_shares_are_proportional() -> None:
    sizes = resolve_sizes(600, 3, _from_list(["1fr", "2fr", "25%"]))
    assert sizes == pytest.approx([150.0, 300.0, 150.0])


def test_equal_fractions_split_remaining_space_evenly() -> None:
    n = 7
    sizes = resolve_sizes(1000, n + 1, _from_list(["160px", *(["1fr"] * n)]))
    assert sizes[0] == 160
    assert sizes[1:] == pytest.approx([840 / n] * n)
    assert sum(sizes[1:]) == pytest.approx(840)


def test_pixel_totals_do_not_depend_on_container_and_percent_totals_scale() -> None:
    descriptors = ["40px", "10%", "25px", "30%"]
    small = resolve_sizes(100, 4, _from_list(descriptors))
    large = resolve_sizes(200, 4, _from_list(descriptors))
    assert sum(small) == pytest.approx(40 + 10 + 25 + 30)
    assert sum(large) == pytest.approx(40 + 20 + 25 + 60)
    assert (small[0], small[2]) == (large[0], large[2])


def test_min_bound_lifts_small_fraction() -> None:
    # Three 10px-wide fractions in a 30px container give 10 each before clamping.
    descriptors = [{"value": "1fr", "min": "50px"}, "1fr", "1fr"]
    assert resolve_sizes(30, 3, _from_list(descriptors)) == [50, 10, 10]


def test_max_bound_and_percent_bounds() -> None:
    descriptors = [
        {"value": "1fr", "max": "20%"},
        {"value": "10px", "min": "10%"},
        {"value": "300px", "max": "250px"},
    ]
    sizes = resolve_sizes(1000, 3, _from_list(descriptors))
    assert sizes == pytest.approx([200.0, 100.0, 250.0])


def test_min_and_max_both_checked_against_unclamped_value() -> None:
    inverted = ItemSize(value=Pixels(50), min_size=Pixels(80), max_size=Pixels(60))
    assert resolve_sizes(100, 1, lambda _index: inverted) == [80]
    within = ItemSize(value=Pixels(70), min_size=Pixels(60), max_size=Pixels(80))
    assert resolve_sizes(100, 1, lambda _index: within) == [70]


@pytest.mark.parametrize("raw_value", [-500.0, 0.0, 35.0, 10_000.0])
def test_clamped_result_stays_within_bounds(raw_value: float) -> None:
    size = ItemSize(value=Pixels(raw_value), min_size=Pixels(20), max_size=Percent(50))
    [resolved] = resolve_sizes(200, 1, lambda _index: size)
    assert 20 <= resolved <= 100


def test_fraction_overflow_yields_negative_sizes() -> None:
    sizes = resolve_sizes(100, 3, _from_list(["150px", "1fr", "1fr"]))
    assert sizes == [150, -25, -25]


def test_no_fraction_items_does_not_divide() -> None:
    assert resolve_sizes(0, 2, _from_list(["10px", "0%"])) == [10, 0]


def test_zero_share_fractions_resolve_to_zero() -> None:
    assert resolve_sizes(100, 2, _from_list(["0fr", "0fr"])) == [0, 0]


def test_unrecognized_unit_contributes_zero_and_keeps_indexes() -> None:
    sizes = resolve_sizes(300, 3, _from_list(["auto", "100px", "1fr"]))
    assert sizes == [0, 100, 200]


def test_unit_descriptor_objects_are_accepted() -> None:
    sizes = resolve_sizes(100, 3, _from_list([Pixels(20), Percent(30), Fraction(1)]))
    assert sizes == pytest.approx([20.0, 30.0, 50.0])


def test_empty_and_negative_counts_resolve_to_empty_list() -> None:
    assert resolve_sizes(100, 0, _from_list([])) == []
    assert resolve_sizes(100, -3, _from_list([])) == []


def test_uniform_sizes_apply_one_descriptor_to_every_item() -> None:
    assert resolve_uniform_sizes(400, 4, "1fr") == [100, 100, 100, 100]
    assert resolve_uniform_sizes(400, 2, "30px") == [30, 30]


def test_trailing_space_suffix_contributes_zero() -> None:
    assert resolve_sizes(300, 3, _from_list(["100px ", "100px", "1fr"])) == [0, 100, 200]


def test_directly_built_item_sizes_keep_indexes_aligned() -> None:
    descriptors = [ItemSize(value="10px"), "1fr"]  # type: ignore[arg-type]
    assert resolve_sizes(100, 2, _from_list(descriptors)) == [10, 90]


def test_fraction_bound_on_item_size_is_ignored() -> None:
    size = ItemSize(value=Pixels(5), min_size=Fraction(1), max_size=Fraction(1))  # type: ignore[arg-type]
    assert resolve_sizes(100, 1, lambda _index: size) == [5]

"""Tests for line reconstruction."""

import random

import pytest

from ink_invoice.text_extraction import Line, LineReconstructor, TextFragment, reconstruct


def test_orders_lines_top_to_bottom_and_words_left_to_right():
    fragments = [
        TextFragment("World", x=60, y=700),
        TextFragment("Hello", x=10, y=700),
        TextFragment("second", x=10, y=680),
        TextFragment("line", x=70, y=680),
    ]

    lines = reconstruct(fragments)

    assert [line.text for line in lines] == ["Hello World", "second line"]
    assert all(isinstance(line, Line) for line in lines)


def test_output_does_not_depend_on_fragment_order(make_page):
    page = make_page([
        "0 0 10 $9.25 $92.50",
        "KSG6",
        "Kuro Sumi Greywash",
        "Page 1 of 1",
    ])
    expected = reconstruct(page.fragments)

    rng = random.Random(1234)
    for _ in range(20):
        shuffled = list(page.fragments)
        rng.shuffle(shuffled)
        assert reconstruct(shuffled) == expected


def test_tolerance_mode_output_does_not_depend_on_fragment_order(make_page):
    rows = [
        "EI-1 Eternal Ink Black 1 oz 25",
        "EI-2 Eternal Ink White 2 oz 3",
        "Subtotal 28",
    ]
    page = make_page(rows, jitter={1: 1.5, 4: -0.4, 8: 0.8, 13: -1.0})
    reconstructor = LineReconstructor(tolerance=2)
    expected = reconstructor.reconstruct(page.fragments)

    assert [line.text for line in expected] == rows

    rng = random.Random(4321)
    for _ in range(20):
        shuffled = list(page.fragments)
        rng.shuffle(shuffled)
        assert reconstructor.reconstruct(shuffled) == expected


def test_rounding_mode_merges_sub_unit_jitter():
    fragments = [
        TextFragment("EI-1", x=10, y=700.2),
        TextFragment("Black", x=50, y=699.6),
        TextFragment("25", x=200, y=700.4),
    ]

    lines = LineReconstructor(tolerance=0).reconstruct(fragments)

    assert [line.text for line in lines] == ["EI-1 Black 25"]
    assert lines[0].y == 700.0


def test_rounding_mode_rounds_half_up():
    fragments = [
        TextFragment("a", x=10, y=10.5),
        TextFragment("b", x=20, y=11.4),
    ]

    assert [line.text for line in reconstruct(fragments)] == ["a b"]


def test_tolerance_mode_groups_within_tolerance(make_page):
    # word 1 ("Black-1") drifts 1.8 units below its row
    page = make_page(["EI-1 Black-1 ounce Bottle 25 10.00 250.00"], jitter={1: -1.8})

    rounded = LineReconstructor(tolerance=0).reconstruct(page.fragments)
    tolerant = LineReconstructor(tolerance=2).reconstruct(page.fragments)

    assert len(rounded) == 2
    assert [line.text for line in tolerant] == ["EI-1 Black-1 ounce Bottle 25 10.00 250.00"]


def test_tolerance_mode_starts_new_line_beyond_tolerance():
    fragments = [
        TextFragment("top", x=10, y=100),
        TextFragment("near", x=50, y=98.5),
        TextFragment("far", x=10, y=97),
    ]

    lines = LineReconstructor(tolerance=2).reconstruct(fragments)

    assert [line.text for line in lines] == ["top near", "far"]


def test_pages_are_emitted_in_ascending_order():
    fragments = [
        TextFragment("second-page", x=10, y=700, page=2),
        TextFragment("first-page", x=10, y=100, page=1),
    ]

    lines = reconstruct(fragments)

    assert [(line.page, line.text) for line in lines] == [(1, "first-page"), (2, "second-page")]


def test_blank_fragments_do_not_produce_lines():
    fragments = [TextFragment("  ", x=10, y=700), TextFragment("kept", x=10, y=600)]

    assert [line.text for line in reconstruct(fragments)] == ["kept"]


def test_empty_input_returns_no_lines():
    assert reconstruct([]) == []


def test_is_deterministic():
    fragments = [TextFragment(str(i), x=i % 5, y=float(i // 5)) for i in range(40)]

    assert reconstruct(fragments, tolerance=1) == reconstruct(fragments, tolerance=1)


def test_rejects_negative_tolerance():
    with pytest.raises(ValueError):
        LineReconstructor(tolerance=-1)

import itertools

import pytest

from models.menu import MenuItem, MenuSection
from utils.menu_tree import (move, index_of, public_sections, count_items, section_chart,
                             truncate_label, format_price)


def test_move_forward_shifts_entries_back():
    assert move(["a", "b", "c", "d"], 0, 2) == ["b", "c", "a", "d"]


def test_move_backward_shifts_entries_forward():
    assert move(["a", "b", "c", "d"], 3, 1) == ["a", "d", "b", "c"]


def test_move_same_index_is_noop_and_returns_copy():
    entries = ["a", "b"]
    out = move(entries, 1, 1)
    assert out == entries
    assert out is not entries


@pytest.mark.parametrize("from_index,to_index", [(3, 0), (0, 3), (-1, 0)])
def test_move_out_of_range(from_index, to_index):
    with pytest.raises(ValueError):
        move(["a", "b", "c"], from_index, to_index)


def test_every_move_is_a_permutation_with_entry_at_target():
    entries = list("abcde")
    for from_index, to_index in itertools.product(range(5), repeat=2):
        out = move(entries, from_index, to_index)
        assert sorted(out) == sorted(entries)
        assert out[to_index] == entries[from_index]
        rest = [e for e in entries if e != entries[from_index]]
        assert [e for e in out if e != entries[from_index]] == rest


def _menu():
    return [
        MenuSection(id="s1", name="Starters", items=[
            MenuItem(id="i1", name="Soup", price=4),
            MenuItem(id="i2", name="Salad", price=5, disabled=True),
            MenuItem(id="i3", name="Bread", price=2, out_of_stock=True),
        ]),
        MenuSection(id="s2", name="Seasonal", disabled=True, items=[MenuItem(id="i4", name="Gazpacho", price=6)]),
        MenuSection(id="s3", name="Desserts"),
    ]


def test_index_of():
    sections = _menu()
    assert index_of(sections, "s3") == 2
    assert index_of(sections, "missing") == -1
    assert index_of(sections[0].items, "i2") == 1


def test_public_sections_drops_hidden_entries_without_touching_the_editor_tree():
    sections = _menu()
    public = public_sections(sections)
    assert [s.id for s in public] == ["s1", "s3"]
    assert [i.id for i in public[0].items] == ["i1"]
    # empty sections stay visible
    assert public[1].items == []
    assert [i.id for i in sections[0].items] == ["i1", "i2", "i3"]


def test_counts_and_chart():
    sections = _menu()
    assert count_items(sections) == 4
    assert section_chart(sections) == [
        {"name": "Starters", "items": 3},
        {"name": "Seasonal", "items": 1},
        {"name": "Desserts", "items": 0},
    ]


def test_truncate_label():
    assert truncate_label("Appetizers") == "Appetizers"
    assert truncate_label("Main Courses") == "Main Cours..."


def test_format_price():
    assert format_price(6.5, "€") == "€6.50"
    assert format_price(0, "$") == "$0.00"

"""
Helpers for the in-memory menu tree: ordering, lookup and the public filtered view.

Sections and items are ordered by list position only, so every reorder
rewrites the whole list.
"""
from typing import List, Sequence, TypeVar

from models.menu import MenuSection, MenuItem

T = TypeVar("T")

CHART_LABEL_LENGTH = 10

def move(entries: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """
    Return a new list with the entry at from_index moved to to_index.
    Entries between the two positions shift by one. Raises ValueError on an out of range index.
    """
    size = len(entries)
    if not 0 <= from_index < size or not 0 <= to_index < size:
        raise ValueError(f"Move index out of range (list has {size} entries)")
    out = list(entries)
    out.insert(to_index, out.pop(from_index))
    return out

def index_of(entries: Sequence, entry_id: str) -> int:
    """Position of the entry with the given id, or -1."""
    for i, entry in enumerate(entries):
        if entry.id == entry_id:
            return i
    return -1

def is_item_visible(item: MenuItem) -> bool:
    return not item.disabled and not item.out_of_stock

def public_sections(sections: Sequence[MenuSection]) -> List[MenuSection]:
    # sections left empty by the filter are still shown
    out = []
    for section in sections:
        if section.disabled:
            continue
        items = [item for item in section.items if is_item_visible(item)]
        out.append(section.model_copy(update={"items": items}))
    return out

def count_items(sections: Sequence[MenuSection]) -> int:
    return sum(len(section.items) for section in sections)

def truncate_label(name: str, length: int = CHART_LABEL_LENGTH) -> str:
    if len(name) > length:
        return name[:length] + "..."
    return name

def section_chart(sections: Sequence[MenuSection]) -> List[dict]:
    return [{"name": truncate_label(section.name), "items": len(section.items)} for section in sections]

def format_price(price: float, symbol: str) -> str:
    return f"{symbol}{price:.2f}"

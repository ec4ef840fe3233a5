"""A slide: an ordered set of items under one top-level group."""

from __future__ import annotations

import itertools
from typing import Iterator

from .items import Item, ItemGroup

_slide_ids = itertools.count()


class Slide:
    """A slide whose items live in a single top-level group."""

    def __init__(self) -> None:
        self._top_item = ItemGroup()
        self._id = next(_slide_ids)

    @property
    def id(self) -> int:
        return self._id

    @property
    def top_item(self) -> ItemGroup:
        """The group holding every item of the slide."""
        return self._top_item

    def add_item(self, item: Item) -> None:
        """Append an item to the slide."""
        self._top_item.add_item(item)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._top_item):
            raise IndexError(f"No item found with given id: [{index}]")

    def remove_item(self, index: int) -> Item:
        """Remove and return the item at the given position."""
        self._check_index(index)
        return self._top_item.remove_item(index)

    def get_item(self, index: int) -> Item:
        """Return the item at the given position."""
        self._check_index(index)
        return list(self._top_item)[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._top_item)

    def __len__(self) -> int:
        return len(self._top_item)

    def __repr__(self) -> str:
        return f"Slide(id={self._id}, items={len(self)})"
"""Items that can be placed on a slide."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .geometry import BoundingBox


class ItemType(Enum):
    """Kind of a slide item."""

    RECTANGLE = auto()
    ELLIPSE = auto()
    GROUP = auto()


_TYPE_NAMES = {
    "Rect": ItemType.RECTANGLE,
    "Elipse": ItemType.ELLIPSE,
    "Group": ItemType.GROUP,
}


def item_type_from_name(name: str) -> ItemType:
    """Return the item type a user-facing type name stands for."""
    try:
        return _TYPE_NAMES[name]
    except KeyError:
        raise ValueError(f"Unknown type: [{name}]") from None


@dataclass
class StyleAttributes:
    """Visual style of an item."""


_item_ids = itertools.count()


class Item:
    """A single shape on a slide, with an id unique for the process lifetime."""

    def __init__(self, type_name: str) -> None:
        self.type = item_type_from_name(type_name)
        self._id = next(_item_ids)
        self.bounding_box = BoundingBox()
        self.style = StyleAttributes()

    @property
    def id(self) -> int:
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, type={self.type.name})"


class ItemGroup(Item):
    """An item holding other items in order."""

    def __init__(self) -> None:
        super().__init__("Group")
        self._items: list[Item] = []

    def add_item(self, item: Item) -> None:
        """Append an item to the group."""
        self._items.append(item)

    def remove_item(self, index: int) -> Item:
        """Remove and return the item at the given position."""
        return self._items.pop(index)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
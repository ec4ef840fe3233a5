"""Renderers that draw items, and the views that pick the right drawing call."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TextIO

from .items import Item, ItemType


class Renderer(ABC):
    """Output format that can draw every kind of item."""

    @abstractmethod
    def render_rect(self, item: Item) -> None:
        """Draw a rectangle."""

    @abstractmethod
    def render_ellipse(self, item: Item) -> None:
        """Draw an ellipse."""

    @abstractmethod
    def render_group(self, item: Item) -> None:
        """Draw a group of items."""


class ConsoleRenderer(Renderer):
    """Describes items as lines of text on a stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self._stream)

    def _describe_shape(self, item: Item, label: str) -> None:
        box = item.bounding_box
        self._write(
            f"[ID: {item.id}] {label}: width - {box.width:g}, height - {box.height:g}"
        )

    def render_rect(self, item: Item) -> None:
        self._describe_shape(item, "Rect")

    def render_ellipse(self, item: Item) -> None:
        self._describe_shape(item, "Elipse")

    def render_group(self, item: Item) -> None:
        self._write(f"[ID: {item.id}] Group rendered")


class RendererLibrary:
    """Maps output format names to renderers."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Renderer]] = {
            "console": ConsoleRenderer,
        }

    def find_renderer(self, name: str) -> Renderer:
        """Return a new renderer for the named format."""
        try:
            factory = self._factories[name]
        except KeyError:
            raise ValueError(f"Unknown renderer: [{name}]") from None
        return factory()


class ItemView(ABC):
    """Binds an item to the renderer call that draws it."""

    def __init__(self, item: Item) -> None:
        self.item = item

    @abstractmethod
    def render(self, renderer: Renderer) -> None:
        """Draw the item with the given renderer."""


class RectangleView(ItemView):
    """View of a rectangle item."""

    def render(self, renderer: Renderer) -> None:
        renderer.render_rect(self.item)


class GroupView(ItemView):
    """View of a group item."""

    def render(self, renderer: Renderer) -> None:
        renderer.render_group(self.item)


class ItemViewLibrary:
    """Chooses the view class for an item by its type."""

    def __init__(self) -> None:
        self._views: dict[ItemType, type[ItemView]] = {
            ItemType.RECTANGLE: RectangleView,
            ItemType.GROUP: GroupView,
        }

    def get_view(self, item: Item) -> ItemView:
        """Return a new view bound to the item."""
        try:
            view_class = self._views[item.type]
        except KeyError:
            raise LookupError(f"No view for item type: [{item.type.name}]") from None
        return view_class(item)
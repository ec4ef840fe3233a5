"""A presentation document: an ordered list of slides."""

from __future__ import annotations

from typing import Iterator

from .slide import Slide


class Document:
    """Ordered collection of slides."""

    def __init__(self) -> None:
        self._slides: list[Slide] = []

    def add_slide(self, slide: Slide | None = None) -> Slide:
        """Append a slide, a new empty one if none is given, and return it."""
        if slide is None:
            slide = Slide()
        self._slides.append(slide)
        return slide

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slides):
            raise IndexError(f"No slide found with given id: [{index}]")

    def remove_slide(self, index: int) -> Slide:
        """Remove and return the slide at the given position."""
        self._check_index(index)
        return self._slides.pop(index)

    def get_slide(self, index: int) -> Slide:
        """Return the slide at the given position."""
        self._check_index(index)
        return self._slides[index]

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)

    def __len__(self) -> int:
        return len(self._slides)
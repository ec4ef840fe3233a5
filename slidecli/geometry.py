"""Geometry of slide items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by its top-left and bottom-right corners.

    The y axis points up, so the top edge has the larger y value.
    """

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    def __post_init__(self) -> None:
        if self.x1 > self.x2 or self.y1 < self.y2:
            raise ValueError("Invalid coordinates for bounding box")

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.y1 - self.y2
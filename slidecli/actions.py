"""Actions that change a document, and the director that runs them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .document import Document
from .items import Item
from .slide import Slide

_log = logging.getLogger(__name__)


class Action(ABC):
    """A change to the document."""

    @abstractmethod
    def run(self) -> None:
        """Apply the change."""


@dataclass
class AddItemAction(Action):
    """Add an item to a slide."""

    item: Item
    slide: Slide

    def run(self) -> None:
        self.slide.add_item(self.item)
        _log.debug("added item %d to slide %d", self.item.id, self.slide.id)


@dataclass
class AddSlideAction(Action):
    """Append a slide to a document."""

    slide: Slide
    document: Document

    def run(self) -> None:
        self.document.add_slide(self.slide)
        _log.debug("added slide %d", self.slide.id)


class Director:
    """Runs actions on behalf of commands."""

    def do_action(self, action: Action) -> None:
        """Run an action."""
        action.run()
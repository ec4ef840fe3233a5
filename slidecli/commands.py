"""User commands and the registry that finds them by name.

Commands act on an application object that provides ``document``,
``director``, ``item_view_library`` and ``renderer_library``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Union

from .actions import AddItemAction, AddSlideAction
from .geometry import BoundingBox
from .items import Item, ItemGroup
from .slide import Slide

_log = logging.getLogger(__name__)

OptionValue = Union[float, int, str]


class QuitRequested(Exception):
    """Raised by the quit command to end the session."""


class Command(ABC):
    """A named operation with typed options.

    Each option's default fixes its type: float, int or str.
    """

    defaults: ClassVar[dict[str, OptionValue]] = {}

    def __init__(self) -> None:
        self._options: dict[str, OptionValue] = dict(self.defaults)

    def get_value(self, name: str) -> OptionValue:
        """Return the current value of an option."""
        try:
            return self._options[name]
        except KeyError:
            raise ValueError(f"Unknown option: [{name}]") from None

    def set_option(self, name: str, value: OptionValue) -> None:
        """Set an option's value."""
        self._options[name] = value

    @abstractmethod
    def execute(self, app: Any) -> str:
        """Carry out the command and return a message for the user."""


class AddItemCommand(Command):
    """Add a shape or group to a slide."""

    defaults = {
        "-type": "",
        "-x1": 0.0,
        "-y1": 0.0,
        "-x2": 0.0,
        "-y2": 0.0,
        "-slide": 0,
    }

    def _construct_item(self) -> Item:
        box = BoundingBox(
            float(self._options["-x1"]),
            float(self._options["-y1"]),
            float(self._options["-x2"]),
            float(self._options["-y2"]),
        )
        type_name = str(self._options["-type"])
        item: Item = ItemGroup() if type_name == "Group" else Item(type_name)
        item.bounding_box = box
        return item

    def execute(self, app: Any) -> str:
        slide = app.document.get_slide(int(self._options["-slide"]))
        item = self._construct_item()
        _log.debug(
            "height: %g width: %g", item.bounding_box.height, item.bounding_box.width
        )
        app.director.do_action(AddItemAction(item, slide))
        _log.debug(
            "slide %d holds items %s", slide.id, [element.id for element in slide]
        )
        return f"{self._options['-type']} added successfully."


class AddSlideCommand(Command):
    """Append a new empty slide to the document."""

    def execute(self, app: Any) -> str:
        slide = Slide()
        app.director.do_action(AddSlideAction(slide, app.document))
        _log.debug(
            "document holds slides %s", [element.id for element in app.document]
        )
        return f"Slide {slide.id} added successfully."


class DisplayCommand(Command):
    """Render a slide in the chosen format."""

    defaults = {
        "-slide": 0,
        "-format": "console",
        "-path": "slide.png",
    }

    def execute(self, app: Any) -> str:
        slide = app.document.get_slide(int(self._options["-slide"]))
        renderer = app.renderer_library.find_renderer(str(self._options["-format"]))
        view = app.item_view_library.get_view(slide.top_item)
        view.render(renderer)
        return "Display executed successfully"


class QuitCommand(Command):
    """End the session."""

    def execute(self, app: Any) -> str:
        raise QuitRequested()


class CommandRegistry:
    """Maps command names to command classes."""

    def __init__(self) -> None:
        self._commands: dict[str, type[Command]] = {
            "add_item": AddItemCommand,
            "add_slide": AddSlideCommand,
            "display": DisplayCommand,
            "quit": QuitCommand,
        }

    def find_command(self, name: str) -> Command:
        """Return a new command with default options for the given name."""
        try:
            command_class = self._commands[name]
        except KeyError:
            raise ValueError(f"Unknown command: [{name}]") from None
        return command_class()
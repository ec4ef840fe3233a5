"""The interactive session: document state plus a command loop."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .actions import Director
from .commands import QuitRequested
from .document import Document
from .parser import CommandParser
from .rendering import ItemViewLibrary, RendererLibrary


class Controller:
    """Reads command lines, runs them and reports the outcome of each."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._input = input_stream
        self._output = output_stream
        self._parser = CommandParser()

    def run(self, app: Application) -> None:
        """Process lines until the quit command or the end of input."""
        for line in self._input:
            try:
                command = self._parser.parse(line)
                message = command.execute(app)
            except QuitRequested:
                return
            except Exception as error:  # every failure is reported, the loop goes on
                message = str(error)
            print(message, file=self._output)


class Application:
    """A presentation being edited, starting with one empty slide."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self.director = Director()
        self.document = Document()
        self.item_view_library = ItemViewLibrary()
        self.renderer_library = RendererLibrary()
        self.controller = Controller(
            input_stream if input_stream is not None else sys.stdin,
            output_stream if output_stream is not None else sys.stdout,
        )
        self.document.add_slide()

    def run(self) -> None:
        """Run the command loop on this application."""
        self.controller.run(self)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive editing session on standard input and output."""
    argparse.ArgumentParser(
        prog="slidecli",
        description="Edit a slide presentation with typed commands.",
    ).parse_args(argv)
    Application().run()
    return 0
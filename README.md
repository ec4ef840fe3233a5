# slidecli

An interactive command-line editor for slide documents. A document is an
ordered list of slides; each slide holds items (rectangles, ellipses and
groups), each with a bounding box.

## Installation

```
pip install .
```

## Usage

Start the editor:

```
slidecli
```

It takes no arguments apart from `--help`. It reads one command per line from
standard input and prints the message each command returns, or the error
message if the command failed, and then goes on with the next line. It stops
at the `quit` command or at the end of input. A new document starts with one
empty slide at position 0.

### Commands

Options are written as `-name value`. Each option has a default, and its
value is read as the type of that default (integer, decimal number or text).

- `add_slide` — append a new empty slide to the document and print
  `Slide <id> added successfully.`
- `add_item -type <Rect|Elipse|Group> [-x1 <x>] [-y1 <y>] [-x2 <x>] [-y2 <y>] [-slide <n>]`
  — add an item to the slide at position `n` (default 0) and print
  `<type> added successfully.` The box runs from the top-left corner
  `(x1, y1)` to the bottom-right corner `(x2, y2)`, all defaulting to 0;
  `x1` must not exceed `x2`, and `y1` must not be smaller than `y2`
  (the y axis points up). `-type` has no usable default and must be given.
- `display [-slide <n>] [-format console] [-path <file>]` — render the slide
  at position `n` (default 0) and print `Display executed successfully`.
  With the `console` format, the only one there is, this prints one line for
  the slide's top-level group, such as `[ID: 3] Group rendered`. `-path` is
  accepted but not used.
- `quit` — leave the editor.

### Example session

```
add_item -type Rect -x1 0 -y1 10 -x2 20 -y2 0
add_slide
display -slide 0
quit
```

Unknown commands, unknown options, missing or malformed option values,
unknown item types, out-of-range slide positions and invalid boxes are
reported as messages; the editor keeps running.

## Library use

The model can be used directly from Python:

```python
from slidecli.document import Document
from slidecli.items import Item, ItemGroup
from slidecli.geometry import BoundingBox

doc = Document()
slide = doc.add_slide()          # appends and returns a new empty slide
rect = Item("Rect")
rect.bounding_box = BoundingBox(0, 10, 20, 0)
slide.add_item(rect)
print(rect.bounding_box.width, rect.bounding_box.height)   # 20 10
```

- `slidecli.geometry.BoundingBox` — frozen box with `width` and `height`;
  raises `ValueError` for invalid corners.
- `slidecli.items` — `ItemType`, `Item`, `ItemGroup` and
  `item_type_from_name()`. Item ids are unique for the life of the process.
- `slidecli.slide.Slide` and `slidecli.document.Document` — ordered
  containers with `add_*`, `remove_*`, `get_*`, `len()` and iteration;
  bad positions raise `IndexError`.
- `slidecli.actions` — `AddItemAction`, `AddSlideAction` and the `Director`
  that runs them.
- `slidecli.rendering` — `ConsoleRenderer` (writes to a given stream or
  standard output), `RendererLibrary`, and the item views `RectangleView`
  and `GroupView` chosen by `ItemViewLibrary`.
- `slidecli.commands` and `slidecli.parser` — the commands above,
  `CommandRegistry`, and `CommandParser.parse()` for one input line.
- `slidecli.application` — `Application` (takes optional input and output
  streams) and `main()`.

## What it does not do

- Documents cannot be saved or loaded; everything is lost on `quit`.
- There is no undo or redo, and no command to remove or move slides or items.
- Only the `console` display format exists; nothing is drawn to an image
  file, and displaying a slide does not list the items inside its group.
- Item views exist only for rectangles and groups, not for ellipses.
- Style attributes of items are empty and cannot be set.

## Running the tests

```
pip install .[test]
pytest
```
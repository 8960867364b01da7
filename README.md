# orderbox

`orderbox` holds a list of comparable values in the order they were added
and lets you walk them in six different orders without changing how they
are stored.

| Traversal    | Order                                                              |
|--------------|--------------------------------------------------------------------|
| `INSERTION`  | the order the elements were added                                  |
| `REVERSE`    | last added first                                                   |
| `ASCENDING`  | smallest to largest                                                |
| `DESCENDING` | largest to smallest                                                |
| `SIDE_CROSS` | smallest, largest, next smallest, next largest, ...                |
| `MIDDLE_OUT` | the middle element (size // 2), then alternately left and right    |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from orderbox.container import OrderedContainer, ElementNotFoundError

box = OrderedContainer([7, 15, 6, 1, 2])
print(box)                    # [7, 15, 6, 1, 2]
print(len(box))               # 5
print(list(box))              # [7, 15, 6, 1, 2]

print(list(box.ascending()))  # [1, 2, 6, 7, 15]
print(list(box.descending())) # [15, 7, 6, 2, 1]
print(list(box.side_cross())) # [1, 15, 2, 7, 6]
print(list(box.reverse()))    # [2, 1, 6, 15, 7]
print(list(box.insertion()))  # [7, 15, 6, 1, 2]
print(list(box.middle_out())) # [6, 15, 1, 7, 2]

box.add(4)
box.remove(6)                 # removes every element equal to 6

try:
    box.remove(100)
except ElementNotFoundError as exc:   # a subclass of RuntimeError
    print(exc)                        # Element not found in container
```

### Cursors

Each traversal method returns a `Cursor` from `orderbox.traversal`;
`OrderedContainer.traverse(traversal, start=0)` makes one for any
`Traversal` member, starting at position `start`. A cursor is an ordinary
Python iterator, and can also be stepped by hand:

```python
from orderbox.traversal import Traversal

cursor = box.traverse(Traversal.ASCENDING)
cursor.current()   # the element under the cursor
cursor.advance()   # move one step forward; returns the cursor
cursor.at_end()    # True once every element has been visited
cursor.position    # the current step number
```

- `current()` past the end raises `IndexError`.
- `advance()` past the end raises `IndexError` for the ascending,
  descending and middle-out traversals (`Traversal.strict` is true for
  these); for the others it just moves further on.
- Two cursors are equal when they walk the same container storage with the
  same traversal and stand at the same position, so
  `box.insertion() == box.insertion()` holds, and on an empty container a
  fresh cursor is already at its end.

The order is fixed when the cursor is created: a cursor works on the
elements as they were at that moment, so create a new one after adding or
removing elements.

### Index helpers

The functions in `orderbox.traversal` (`ascending_indices`,
`descending_indices`, `side_cross_indices`, `reverse_indices`,
`insertion_indices`, `middle_out_indices`) return the visiting order as a
list of positions for any sequence; `Traversal.indices(values)` picks the
right one for a member:

```python
from orderbox.traversal import Traversal, middle_out_indices

middle_out_indices([10, 20, 30, 40, 50])      # [2, 1, 3, 0, 4]
Traversal.SIDE_CROSS.indices([1, 3, 5, 7, 9]) # [0, 4, 1, 3, 2]
```

## Demo

A short walk-through of every traversal on a sample container, printed to
standard output:

```
orderbox-demo
```
# scenegraph

Building blocks for a scene graph. The package uses only the standard library.

- `scenegraph.enums` provides `EnumDirection` (`FIRST_TO_LAST`, `LAST_TO_FIRST`) and the `EnumCallOrder` flag (`PRE_ORDER`, `POST_ORDER`, which can be combined). Together they control how a tree is walked.
- `scenegraph.linked.forward_list` provides `ForwardList` and `CircularForwardList`.
  - Both support `push_front`, `push_back`, `front`, `back`, `remove`, `rotate`, `reverse`, `swap` and `clear`.
  - `ForwardList` also has `append_list` and `prepend_list`. These move every item out of another list.
  - Items are tracked by identity: `remove` takes out that very object.
  - `front()` and `back()` raise `IndexError` on an empty list. `remove` raises `ValueError` when the item is absent.
- `scenegraph.linked.hierarchy` provides `Hierarchy`, a base class for tree nodes. It offers:
  - the navigation properties `parent`, `next_sibling`, `prev_sibling`, `first_child`, `last_child` and `root`;
  - `children()` and `child_at(index)`, where a negative index counts from the end;
  - `least_common_ancestor(node)`;
  - a depth-first `walk(direction, call_order)` generator;
  - the insertion methods `append_child`, `prepend_child`, `insert_child_at`, `insert_after` and `insert_before`;
  - `replace_child`;
  - the removal methods `remove_child_at`, `remove_from_parent` and `remove_all_children`.

  Invalid moves raise `ValueError`. Examples are inserting a node that already has a parent, or placing a node inside itself.
- `scenegraph.work_thread` provides `PipeTask`, `Pipe` and `WorkThread`.
  - A `WorkThread` runs pushed tasks in order on a background thread. Each task's `callback_in` runs there.
  - `try_pop()` collects a finished task and runs its `callback_out` on the calling thread.
  - `wait_one`, `wait_n` and `wait_all` block until work is done.
  - A `WorkThread` is a context manager; `close()` stops the thread.
- `scenegraph.math` holds the math types. Matrices act on row vectors.
  - `quaternion` provides `Quaternion`, `difference_of_products` and `almost_equal_floats`.
  - `matrix4` provides `Matrix4`, with rotation, orthographic and perspective constructors, `+`, `-`, `*`, `scaled` and `inverted`.
  - `matrix32` provides `Matrix32`, `Transform2D` and `Vector2`.
  - `vector3` provides `Vector3` and `Plane`.
  - `frustum` provides `Sphere` and `Frustum`.
  - `Matrix4.inverted`, `Matrix32.inverted` and `Matrix32.decompose` raise `ValueError` when the determinant is not above single-precision epsilon.

## Installation

```
pip install .
```

## Examples

Tree navigation and traversal:

```python
from scenegraph.enums import EnumCallOrder, EnumDirection
from scenegraph.linked.hierarchy import Hierarchy

class Node(Hierarchy):
    def __init__(self, name):
        super().__init__()
        self.name = name

root = Node("root")
a = root.append_child(Node("a"))
a.append_child(Node("a1"))
root.append_child(Node("b"))

for order, node in root.walk(EnumDirection.FIRST_TO_LAST, EnumCallOrder.PRE_ORDER):
    print(order, node.name)
```

Linked lists:

```python
from scenegraph.linked.forward_list import ForwardList

items = ForwardList([1, 2, 3])
items.rotate(1)
items.reverse()
print(list(items))  # [1, 3, 2]
```

Background work:

```python
from scenegraph.work_thread import PipeTask, WorkThread

with WorkThread() as worker:
    worker.push(PipeTask(callback_in=lambda p: print("working on", p), param=42))
    worker.wait_all()
    done = worker.try_pop()
```

Math:

```python
from scenegraph.math.matrix4 import Matrix4
from scenegraph.math.frustum import Frustum
from scenegraph.math.vector3 import Vector3

projection = Matrix4.perspective_field_of_view(1.0, 16 / 9, 0.1, 100.0)
frustum = Frustum.from_matrix(projection)
frustum.normalize()
print(frustum.cull_point(Vector3(0.0, 0.0, -10.0)))
```

## What this package does not do

This package is a set of data structures and math types. It does not include:

- rendering, windows or GPU resources;
- scene objects or components built on top of `Hierarchy`;
- an application or command to run.

## Running the tests

```
pip install .[test]
pytest
```
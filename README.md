# treegraph

Small graph and binary-tree algorithms, usable as a library and from the
command line. Requires Python 3.12 or later; it has no dependencies outside
the standard library.

## Graphs

### Breadth-first search: `treegraph.bfs`

`Graph(vertices)` is an undirected graph on vertices labelled `1` to
`vertices`, stored as an adjacency matrix in `graph.matrix`. A negative
count raises `ValueError`.

- `add_edge(v1, v2)` links two vertices and increments `graph.edges`. It
  raises `ValueError` if either label is out of range.
- `format_matrix()` returns the matrix as text. Each entry is followed by a
  tab and each row ends with a newline.
- `bfs(start)` returns the vertices in the order a breadth-first search from
  `start` visits them. Neighbours are taken in ascending order. A `start`
  that is out of range raises `ValueError`.

```python
from treegraph.bfs import Graph

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(1, 3)
g.add_edge(3, 4)
print(g.bfs(1))          # [1, 2, 3, 4]
print(g.format_matrix())
```

### m-colouring: `treegraph.colouring`

- `colour_graph(graph, colours_available)` colours the vertices of an
  adjacency matrix by backtracking.
  - It uses colours `1..colours_available`, giving each vertex in index order
    the lowest colour that works.
  - It returns the list of colours, or `None` if no colouring exists.
  - A matrix that is not square raises `ValueError`.
- `is_safe(graph, colours, vertex, colour)` tells whether no neighbour of
  `vertex` already has `colour`.
- `format_solution(colours)` returns the text report for a colouring.
- `DEFAULT_GRAPH` and `DEFAULT_COLOURS` hold the built-in four-vertex graph
  and the colour count of 3.

```python
from treegraph.colouring import DEFAULT_GRAPH, colour_graph

print(colour_graph(DEFAULT_GRAPH, 3))   # [1, 2, 3, 2]
print(colour_graph(DEFAULT_GRAPH, 2))   # None
```

## Binary trees

### Building and drawing: `treegraph.tree`

Trees here are not search trees: each new item goes wherever a random walk
down from the root ends.

- `BTNode(item, left=None, right=None)` is a dataclass node.
- `insert_node(root, item, rng)` adds one item and returns the root.
  - At each node it draws `rng.randrange(2)`.
  - A non-zero draw goes left, a zero draw goes right.
  - The item is placed at the first empty child slot.
- `build_tree(items, rng=None)` inserts the items one by one and returns the
  root, or `None` for no items. Pass a seeded `random.Random` for repeatable
  shapes.
- `render_tree(root)` draws the tree one node per line. A left child is
  marked `|---` and a right child `|___`, indented by `|` plus a tab per
  level.
- `read_items(text)` reads integers from the start of `text` until something
  else appears. It skips that terminating word and returns
  `(items, rest_of_text)`.

### Queries: `treegraph.tree_queries`

- `smaller_values(root, limit)` returns the items below `limit`, in
  pre-order.
- `nodes_with_great_grandchild(root)` returns the items of nodes that have a
  great-grandchild, in post-order.
- `max_depth(root)` returns the number of edges on the longest
  root-to-leaf path. It is `0` for a single node and `-1` for an empty tree.
- `search_node(root, key)` returns the first node in pre-order whose item is
  `key`, or `None`.

### Traversals: `treegraph.tree_traversals`

- `preorder_iterative(root)` returns the items in pre-order.
- `level_order(root)` returns the items level by level, left to right.
- `mirror_tree(root)` swaps the children of every node in place and returns
  the same root.
- `smallest_value(root)` returns the smallest item. An empty tree raises
  `ValueError`. A subtree minimum is chosen only when it is strictly below
  both the node's item and the other subtree's minimum. When the two subtree
  minima are equal, the node's own item is returned.

```python
import random
from treegraph.tree import build_tree, render_tree
from treegraph.tree_queries import max_depth
from treegraph.tree_traversals import level_order

root = build_tree([5, 3, 8, 1, 4], random.Random(1))
print(render_tree(root))
print(max_depth(root))
print(level_order(root))
```

## Command line

Every command reads from standard input and prints prompts followed by its
results.

`treegraph-bfs` takes its input in this order:

1. the number of vertices;
2. pairs of adjacent vertices, ended by a pair that is out of range, a
   non-integer, or the end of input;
3. the start vertex.

It prints the adjacency matrix and then the visiting order. Missing or
invalid numbers are reported on standard error with exit status 1.

```
printf '4\n1 2\n1 3\n3 4\n0 0\n1\n' | treegraph-bfs
```

`treegraph-colouring` reads nothing. It colours the built-in graph with
three colours and prints the result.

`treegraph-tree QUERY [--seed N]` reads a list of integers ended by a
non-integer word and builds a tree from them. It draws the tree and then
answers one query:

- `smaller` prints the items below a limit.
- `great-grandchild` prints the nodes with a great-grandchild.
- `depth` prints the maximum depth.
- `search` reports whether a key is present.

For `smaller` and `search`, the integer comes after the terminating word.

```
echo "5 3 8 1 4 x 4" | treegraph-tree smaller --seed 1
```

`treegraph-traverse OPERATION [--seed N]` reads the same kind of list and
runs one operation on the tree:

- `preorder` prints the tree and its pre-order.
- `level` prints the tree and its level order.
- `mirror` prints the tree before and after mirroring.
- `smallest` prints the tree and its smallest item.

```
echo "5 3 8 1 4 x" | treegraph-traverse level --seed 1
```

Without `--seed` the tree shape differs from run to run.

## Limits

- Trees are only ever built by random insertion. There is no ordered
  (search-tree) insertion and no deletion of single nodes.
- Neither graphs nor trees can be saved or loaded other than through the
  text input the commands read.
- `treegraph-colouring` always works on its built-in graph. To colour another
  graph, call `colour_graph` from Python.

## Tests

```
pip install -e ".[test]"
pytest
```
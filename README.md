# algolab

A small collection of textbook data structures and algorithms. Each one
lives in its own module, and each module has a command that demonstrates it.
The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algolab.graph`: `Graph` is a directed graph of up to 100 vertices,
  each carrying an integer value. Edges are added with `add_edge(i, j)`.
  `neighbors(i)` lists successors with the most recently added edge first.
  `format()` renders the adjacency lists as text. `dfs(graph, start)`
  (explicit stack) and `bfs(graph, start)` (queue) return the vertex values
  in the order they are visited. A vertex index that is out of range raises
  `IndexError`.
- `algolab.bst`: `BinarySearchTree` holds distinct integers. The root is on
  level 1. `insert(value)` returns `False` when the value is already present.
  `level_of(value)` returns a node's level, or raises `KeyError` when the
  value is absent. `inorder()` yields the values in ascending order, and
  `value in tree` tests membership.
- `algolab.binary_tree`: `build_preorder(text)` builds a tree of `TreeNode`
  objects (`data`, `left`, `right`) from a preorder string in which `#`
  marks an empty subtree. It raises `ValueError` if the string ends before
  the tree is complete. `preorder(root)` yields node data in preorder.
  `preorder_prefix(root, length)` returns the first `length` nodes of that
  order.
- `algolab.heapsort`: `heap_sort(values)` returns the sorted values together
  with the number of comparisons made. `build_max_heap(heap, length, count)`
  arranges a prefix in place so that its maximum is at index 0.
  `random_values(count, rng)` returns random integers between 10 and
  1,000,000.
- `algolab.kmp`: Knuth–Morris–Pratt search. `failure_table(pattern)` builds
  the prefix table. `find_all(text, pattern)` returns the start index of
  every occurrence, overlapping ones included. An empty pattern raises
  `ValueError`.
- `algolab.linked_list`:
  - `LinkedList` is a singly linked list with 1-based positional
    `insert(location, value)`, `clear()`, an in-place selection `sort()`,
    `total()`, and `extremes()`, which returns `(maximum, minimum)`.
  - `CircularDoublyLinkedList` supports `append(value)`, and
    `iter_from(location)` walks every value once, starting at a 1-based
    position and wrapping around.
  - `format_chain(values)` renders values as `[1]->[2]->[3]`.

## Example

```python
from algolab.kmp import find_all
from algolab.linked_list import LinkedList

find_all("asdababab", "abab")   # [3, 5]

chain = LinkedList([1, 2, 75, 4, 56])
chain.sort()
list(chain)                     # [1, 2, 4, 56, 75]
```

## Commands

```
algolab-graph                  # read a graph interactively, print it, run DFS and BFS
algolab-bst                    # build a sample search tree, insert a number read from input, print in order
algolab-binary-tree [PREORDER] # print every preorder path prefix of the tree (a sample tree by default)
algolab-heapsort [--length N] [--output FILE] [--seed S]
algolab-kmp [TEXT PATTERN]     # print the positions of PATTERN in TEXT (a sample pair by default)
algolab-linked-list            # build, sort and traverse sample linked lists
```

`algolab-graph` asks for the vertex count and edge count separated by `,`,
then the value of each vertex, then each edge as `i,j`, and finally the start
vertex.

`algolab-heapsort` sorts ten random arrays of the given length (at most 50;
it asks for the length when `--length` is not given). It prints each array
and its comparison count, and writes a report to `--output`, which defaults
to `tets.txt` in the current directory. The report holds each array before
and after sorting, the comparisons for each round, and the average count.

## Limitations

The graph, tree and list structures are held in memory only. Nothing is
saved between runs, and the only file the package writes is the heap sort
report.
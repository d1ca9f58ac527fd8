# algobox

A small library of classic algorithms and data structures in plain Python,
using only the standard library. Every function returns its result; none
of them print.

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.backtracking` | `solve_maze`, `is_possible`, `solve_sudoku`, `format_sudoku` |
| `algobox.traversal` | `AdjacencyGraph` (with `add_edge`, `adjacency`, `bfs`), `dfs_matrix`, `dfs_stack`, `topological_sort` |
| `algobox.paths` | `dijkstra`, `kruskal`, `DisjointSet` |
| `algobox.lca` | `LowestCommonAncestor` using binary lifting |
| `algobox.hashing` | `ChainedHashTable`, a fixed-size hash table of integers with separate chaining |
| `algobox.primes` | `sieve`, `primes_up_to`, `prime_factorization` |
| `algobox.numtools` | `is_buzz_number`, `gcd_of`, `is_happy_number`, `is_palindrome_number`, `fibonacci`, `power` |
| `algobox.geometry` | `Point`, `distance`, `triangle_area`, `all_within`, `smallest_enclosing_circle` |
| `algobox.matrix` | `generate_matrix`, `spiral_order` |
| `algobox.search` | `find_word`, `ternary_search`, `ternary_search_recursive` |
| `algobox.sorting` | `bitonic_sort`, `cocktail_selection_sort`, `counting_sort`, `counting_sort_string`, `numeric_sort`, `numeric_string_key`, `bucket_sort`, `comb_sort` |
| `algobox.circular_queue` | `CircularQueue`, with the `QueueFull` and `QueueEmpty` exceptions |

## Examples

### Backtracking

`solve_maze` looks for a path from the top-left to the bottom-right cell,
moving only right or down through cells holding 1. It returns a grid of the
same shape with 1 on the path, or `None` when there is no path.

```python
from algobox.backtracking import solve_maze

maze = [
    [1, 0, 1, 0],
    [1, 0, 1, 1],
    [1, 0, 0, 1],
    [1, 1, 1, 1],
]
path = solve_maze(maze)
```

`solve_sudoku` takes a 9 by 9 grid with 0 for blanks and returns a new,
filled grid, or `None` if it cannot be solved; the input is not changed.
`format_sudoku` renders a grid as text with its 3 by 3 boxes spaced apart.

### Graphs

```python
from algobox.traversal import AdjacencyGraph, dfs_matrix, topological_sort

graph = AdjacencyGraph(4)
graph.add_edge(1, 2)      # edges use vertex labels from 1
graph.add_edge(1, 3)
graph.adjacency()         # {1: [2, 3], 2: [], 3: [], 4: []}
graph.bfs(0)              # breadth-first order over zero-based indices

dfs_matrix([[0, 1, 1, 0], [0, 0, 1, 0], [1, 0, 0, 1], [0, 0, 0, 1]], 2)
topological_sort(3, [(1, 2), (2, 3)])
```

`dfs_stack` takes successors either as a mapping or as a sequence indexed by
node; nodes missing from it have no successors.

Shortest paths and minimum spanning trees:

```python
from algobox.paths import dijkstra, kruskal

edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7)]
distances = dijkstra(3, edges, 1, False)  # distances to nodes 1..3, None if unreachable
total_cost = kruskal(3, edges)            # cost of a minimum spanning forest
```

`DisjointSet` is the union-find structure `kruskal` uses: `find` returns a
set's representative and `union` returns `False` if the two items were
already in one set.

Lowest common ancestor in a tree rooted at node 1, given by its edges:

```python
from algobox.lca import LowestCommonAncestor

tree = LowestCommonAncestor(5, [(1, 2), (1, 3), (2, 4), (2, 5)])
tree.query(4, 5)  # 2
tree.level(4)     # 2
```

### Hashing

```python
from algobox.hashing import ChainedHashTable

table = ChainedHashTable(7)
table.add(10)
table.add(17)
10 in table       # True
table.bucket(3)   # [10, 17]
print(table.describe())
```

### Numbers and primes

```python
from algobox.numtools import fibonacci, power, is_happy_number, gcd_of
from algobox.primes import primes_up_to, prime_factorization

fibonacci(50)
power(2, 100)             # the decimal digits as a string
gcd_of([12, 18, 24])
primes_up_to(100)
prime_factorization(360)  # [(2, 3), (3, 2), (5, 1)]
```

### Geometry

```python
from algobox.geometry import Point, smallest_enclosing_circle

center, radius = smallest_enclosing_circle(
    [Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)]
)
```

### Searching

`find_word` returns the position of the first occurrence of a word in a
paragraph, or `None`; it raises `ValueError` for an empty paragraph.
`ternary_search` and `ternary_search_recursive` return the index of a target
in an ascending sequence, or `None`.

### Sorting

Every sort returns a new list and leaves its input alone.

```python
from algobox.sorting import bitonic_sort, numeric_sort, comb_sort, bucket_sort

bitonic_sort([3, 7, 4, 8, 6, 2, 1, 5], True)   # length must be a power of two
numeric_sort(["1", "10", "100", "2", "20", "200"])
comb_sort([9, 4, 7, 1])
bucket_sort([0.897, 0.565, 0.656, 0.1234])     # values must lie in [0, 1)
```

### Circular queue

A fixed-capacity queue that raises instead of overflowing:

```python
from algobox.circular_queue import CircularQueue, QueueFull

queue = CircularQueue(5)
for value in (14, 22, 13, -6):
    queue.enqueue(value)
first = queue.dequeue()
print(list(queue), len(queue))
```

`enqueue` raises `QueueFull` when all slots are taken and `dequeue` raises
`QueueEmpty` when nothing is queued.

## What it does not do

algobox is a library only. It has no command-line programs and reads nothing
from standard input: feed it data from your own code and use the returned
values.

## Running the tests

Install the `test` extra and run pytest from the project directory.
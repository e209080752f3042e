# algolab

Compact implementations of classic algorithms, numerical methods and small
simulations: sorting and searching, matrix operations, computational
geometry, path finding, simple predict-and-correct filters, physics and fluid
models, grayscale image operations, procedural noise and tiny learning models.

Every piece is a plain Python function or class that returns its result (or,
for simulations, updates its own state), so it can be used from your own
code, inspected in a REPL or tested directly.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `bubble_sort`, `bubble_sort_early_exit`, `insertion_sort` (each returns a sorted copy) |
| `algolab.search` | `linear_search` (index of the first match, or `None`) |
| `algolab.linalg` | `matrix_add`, `matrix_multiply`, `row_reduce` (Gauss-Jordan with partial pivoting), `least_squares` (normal equations) |
| `algolab.integration` | `left_riemann_sum` |
| `algolab.datafilter` | `generate_data` (random integers 0..99), `filter_above` |
| `algolab.closest_pair` | `distance`, `closest_pair`, `closest_distance`, `random_points` |
| `algolab.convex_hull` | `Orientation`, `orientation`, `convex_hull` (Graham scan), `is_on_segment`, `render_ascii` |
| `algolab.circles` | `Circle`, `largest_empty_circle`, `centroid_bounding_circle`, `circumcenter`, `min_bounding_circle` |
| `algolab.astar` | `parse_grid`, `find_path` (eight-way A*), `render_grid` |
| `algolab.bayes` | `LanderStep`, `simple_filter`, `descent_filter`, `lander_filter` |
| `algolab.nbody` | `Body`, `Universe` (`step`, `run`, `positions`), `solar_system` |
| `algolab.balls` | `Ball` (`advance`), `simulate`, `random_balls` |
| `algolab.imaging` | `sobel`, `threshold`, `load_grayscale` |
| `algolab.perlin` | `interpolate`, `perlin`, `noise_image` |
| `algolab.wave_collapse` | `neighbourhood_values`, `wave_function_collapse` |
| `algolab.neural` | `sigmoid`, `FeedForwardNetwork` (`feedforward`) |
| `algolab.sgd` | `Example`, `linear_data`, `classification_data`, `train_linear`, `train_logistic` |
| `algolab.fluids` | `ShallowWater`, `DiffusionFlow`, `InletFlow` (each with `step`) |
| `algolab.particle_in_cell` | `Simulation` (`step`, `run`), `ParticleOutOfBounds` |

Functions and classes that draw random numbers take an `rng` argument — a
`random.Random`, or for `FeedForwardNetwork` a `numpy.random.Generator` — so
results can be made reproducible by passing a seeded generator. Invalid input
(mismatched shapes, negative counts, singular systems and the like) raises
`ValueError`.

Note that `perlin` draws a fresh random gradient for every grid corner on
every call, so two calls at the same point give different values unless the
generator is in the same state.

## Examples

Searching and sorting:

```python
from algolab.search import linear_search
from algolab.sorting import insertion_sort

linear_search([4, 2, 6, 1, 3, 7, 8, 5], 5)   # 7
linear_search([1, 2, 3], 9)                  # None
insertion_sort([5, 3, 9, 1])                 # [1, 3, 5, 9]
```

Linear algebra:

```python
from algolab.linalg import matrix_add, matrix_multiply, least_squares

matrix_add([[1, 2], [3, 4]], [[5, 6], [7, 8]])        # [[6, 8], [10, 12]]
matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]

features = [[1, x] for x in range(1, 11)]
targets = [x + 2 for x in range(1, 11)]
least_squares(features, targets)             # about [2.0, 1.0]: intercept and slope
```

Geometry:

```python
from algolab.convex_hull import convex_hull, render_ascii
from algolab.circles import min_bounding_circle

points = [(0, 0), (4, 4), (0, 3), (3, 0), (2, 2), (1, 1)]
hull = convex_hull(points)                   # counter-clockwise from the lowest point
print(render_ascii(points, hull))

circle = min_bounding_circle(points)
circle.center, circle.radius
```

Path finding on a character grid, where `#` marks a wall:

```python
from algolab.astar import parse_grid, find_path, render_grid

grid = parse_grid(
    "....\n"
    ".##.\n"
    "....\n"
)
path = find_path(grid, (0, 0), (3, 2))       # list of (x, y), or [] if unreachable
print(render_grid(grid, path))
```

Simulations:

```python
from algolab.nbody import solar_system
from algolab.particle_in_cell import Simulation

universe = solar_system()
universe.run(1000)
for x, y in universe.positions:
    print(x, y)

pic = Simulation()
pic.run(10)                                  # raises ParticleOutOfBounds if a particle leaves the grid
```

## Command-line tools

Installing the package provides four commands:

- `algolab-sort [COUNT] [--algorithm {bubble,bubble-early-exit,insertion}] [--seed N]`
  sorts `COUNT` random integers (1000 by default), prints them and the time taken.
- `algolab-hull [--size N]` prints a fixed sample point set, its convex hull
  and an ASCII drawing at most `N` characters across (15 by default).
- `algolab-astar` finds a path through a sample maze and prints the grid
  before and after, with the path marked `*`.
- `algolab-imaging` works on a grayscale image file:
  - `algolab-imaging sobel [--input FILE] [--output FILE]` writes the Sobel
    edge image (defaults `image1.jpg` and `01-result.jpg`);
  - `algolab-imaging threshold LEVEL OUTPUT [--input FILE]` writes a black and
    white image where pixels at or above `LEVEL` (0 to 255) become white.

Each command accepts `--help`.

## What this package does not do

There is no graphical output: nothing is shown in a window, and apart from
`algolab-imaging` nothing writes image files. Functions such as
`noise_image`, `wave_function_collapse` and `sobel` return NumPy arrays;
saving or displaying them is left to the caller. The simulations keep their
state in memory and do not print or plot it; read the fields or positions
from the objects yourself.
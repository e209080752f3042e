"""Compact implementations of classic algorithms, numerical methods and simulations."""

__version__ = "0.1.0"

__all__ = [
    "astar",
    "balls",
    "bayes",
    "circles",
    "closest_pair",
    "convex_hull",
    "datafilter",
    "fluids",
    "imaging",
    "integration",
    "linalg",
    "nbody",
    "neural",
    "particle_in_cell",
    "perlin",
    "search",
    "sgd",
    "sorting",
    "wave_collapse",
]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Small, readable implementations of classic algorithms, numerical methods and simulations"
requires-python = ">=3.10"
keywords = [
    "algorithms",
    "sorting",
    "geometry",
    "convex hull",
    "a-star",
    "linear algebra",
    "simulation",
    "n-body",
    "particle-in-cell",
    "perlin noise",
    "image processing",
    "gradient descent",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
algolab-sort = "algolab.sorting:main"
algolab-hull = "algolab.convex_hull:main"
algolab-astar = "algolab.astar:main"
algolab-imaging = "algolab.imaging:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latticeflow"
version = "0.1.0"
description = "Lattice Boltzmann fluid flow simulation on D2Q9, D3Q15, D3Q19 and D3Q27 lattices"
requires-python = ">=3.10"
keywords = ["lattice boltzmann", "cfd", "fluid dynamics", "simulation", "d2q9"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = ["numpy"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
latticeflow = "latticeflow.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["latticeflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trmsubs"
version = "0.1.0"
description = "Numerical and astronomical utility routines: random generators, linear algebra, fitting, minimisation, rebinning and sky positions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "astronomy",
    "numerical",
    "least-squares",
    "eigenvalues",
    "rebinning",
    "random",
    "planck",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trmsubs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

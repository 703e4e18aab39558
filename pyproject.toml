[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snplabs"
version = "0.1.0"
description = "Small console programs for systems programming exercises: bit operations, shapes, triangles, include graphs, word sorting, tic-tac-toe, a person register and weekday calculation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "bit-operations",
    "tic-tac-toe",
    "graphviz",
    "dependencies",
    "calendar",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snp-bitops = "snplabs.bitops:main"
snp-calculator = "snplabs.calculator:main"
snp-shapes = "snplabs.shapes:main"
snp-triangle = "snplabs.triangle:main"
dep2dot = "snplabs.depdot:main"
snp-sortwords = "snplabs.sortwords:main"
tic-tac-toe = "snplabs.ttt_view:main"
personen-verwaltung = "snplabs.personapp:main"
weekday = "snplabs.weekday:main"

[tool.hatch.build.targets.wheel]
packages = ["snplabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

"""Console programs for bit operations, a bitwise calculator, shapes, triangles, include graphs, word sorting, tic-tac-toe, a person register and weekdays."""

__version__ = "0.1.0"
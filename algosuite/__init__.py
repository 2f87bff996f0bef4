"""Algorithm and data-structure routines: trees, combinatorics, strings, arrays, grids, graphs and designs."""

__version__ = "0.1.0"
__all__ = ["trees", "combinatorics", "strings", "arrays", "grids", "graphs", "designs"]
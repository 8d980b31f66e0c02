"""Two-stack integer sorting with a restricted set of operations: parsing, stack machine and sorting strategies."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Functions solving short competitive-programming problems, and a command line for three of them."""

__version__ = "0.1.0"
__all__ = ["__version__"]
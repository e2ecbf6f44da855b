"""Node graph model with .x graph files, dot export, a command line and node code scaffolding."""

__version__ = "4.0.0"
__all__ = ["__version__"]
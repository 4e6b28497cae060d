"""Console tic-tac-toe against a simple computer opponent, with save and load."""

__version__ = "0.1.0"
__all__ = ["__version__"]